# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/webhooks/__init__.py

Fachada de notificaciones (webhooks) de Paynet.
"""

from .notifications import NotificationBody, parse_notification, verify_notification

__all__ = ["NotificationBody", "parse_notification", "verify_notification"]
