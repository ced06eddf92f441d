# -*- coding: utf-8 -*-
"""
paynet/modules/__init__.py

Módulos funcionales del SDK.
"""
