# -*- coding: utf-8 -*-
"""
paynet/modules/payments/schemas/__init__.py

Punto de entrada para los esquemas Pydantic del módulo Payments.

Incluye:
- Modelos de dominio (Payment, Customer, Service, Product, MoneyType)
- Criterios de búsqueda
- DTOs de la API y del webhook de notificaciones
"""

from __future__ import annotations

from .payment_schemas import (
    Customer,
    MoneyType,
    Number,
    Payment,
    PaynetModel,
    Product,
    SearchCriteria,
    Service,
)
from .dto_schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    CreatePaymentResponse,
    NotificationPayment,
    PaymentNotificationRequest,
    WireScalar,
)

__all__ = [
    "Customer",
    "MoneyType",
    "Number",
    "Payment",
    "PaynetModel",
    "Product",
    "SearchCriteria",
    "Service",
    "AuthenticateRequest",
    "AuthenticateResponse",
    "CreatePaymentResponse",
    "NotificationPayment",
    "PaymentNotificationRequest",
    "WireScalar",
]

# Fin del archivo paynet/modules/payments/schemas/__init__.py
