# -*- coding: utf-8 -*-
"""
paynet/modules/payments/__init__.py

Módulo Payments: modelos, firmas, cliente HTTP, formularios y webhooks
de la integración con Paynet.
"""
