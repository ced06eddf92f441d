# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/__init__.py

Fachadas públicas del módulo Payments:
- PaynetServerSDK (cliente de alto nivel)
- Formularios GetEcom / SetEcom
- Recepción de notificaciones
"""

from .server_sdk import PaynetServerSDK
from .webhooks import parse_notification, verify_notification

__all__ = ["PaynetServerSDK", "parse_notification", "verify_notification"]
