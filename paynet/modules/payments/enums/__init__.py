# -*- coding: utf-8 -*-
"""
paynet/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.
"""

from .payment_status_enum import PaymentStatus

__all__ = ["PaymentStatus"]

# Fin del archivo paynet/modules/payments/enums/__init__.py
