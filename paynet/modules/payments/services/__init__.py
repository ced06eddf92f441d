# -*- coding: utf-8 -*-
"""
paynet/modules/payments/services/__init__.py

Servicios del módulo Payments: cliente HTTP, mapeo de requests y firmas.
"""

from .api_client import DEFAULT_TIMEOUT_SECONDS, PaynetApiClient, normalize_host
from .payment_mapping import build_create_payment_body, normalize_service, product_amount

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "PaynetApiClient",
    "normalize_host",
    "build_create_payment_body",
    "normalize_service",
    "product_amount",
]
