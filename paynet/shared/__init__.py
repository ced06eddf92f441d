# -*- coding: utf-8 -*-
"""
paynet/shared/__init__.py

Infraestructura compartida del SDK (configuración, logging, cache de token).
"""
