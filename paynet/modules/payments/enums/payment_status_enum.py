# -*- coding: utf-8 -*-
"""
paynet/modules/payments/enums/payment_status_enum.py

Enum de estados del pago en Paynet.
Los valores numéricos son los que devuelve la API en el campo Status.

Fecha: 2025-12-02
"""

from enum import IntEnum


class PaymentStatus(IntEnum):
    """Estado del pago en el ciclo de vida de Paynet."""

    REGISTERED = 1
    CUSTOMER_VERIFIED = 2
    INITIALIZED = 3
    PAID = 4

    @property
    def is_final(self) -> bool:
        return self is PaymentStatus.PAID


__all__ = ["PaymentStatus"]

# Fin del archivo paynet/modules/payments/enums/payment_status_enum.py
