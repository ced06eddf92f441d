# -*- coding: utf-8 -*-
"""
paynet/__init__.py

SDK de servidor para la API de pagos de Paynet.

Superficie pública:
- PaynetServerSDK
- Modelos (Payment, Customer, Service, Product, MoneyType, SearchCriteria, ...)
- Firmas (generate_payment_signature, generate_notification_signature,
  verify_notification_signature)
- Errores (PaynetError / PaynetSDKError y subclases)
"""

from paynet.modules.payments.enums import PaymentStatus
from paynet.modules.payments.errors import (
    PaynetApiError,
    PaynetAuthenticationError,
    PaynetNetworkError,
    PaynetSDKError,
    PaynetValidationError,
)
from paynet.modules.payments.facades import (
    PaynetServerSDK,
    parse_notification,
    verify_notification,
)
from paynet.modules.payments.schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    CreatePaymentResponse,
    Customer,
    MoneyType,
    NotificationPayment,
    Payment,
    PaymentNotificationRequest,
    Product,
    SearchCriteria,
    Service,
)
from paynet.modules.payments.services.signatures import (
    generate_notification_signature,
    generate_payment_signature,
    verify_notification_signature,
)
from paynet.shared.config import PaynetSettings, get_paynet_settings, setup_logging

__version__ = "0.1.0"

PaynetError = PaynetSDKError

__all__ = [
    "__version__",
    "PaynetServerSDK",
    "PaymentStatus",
    "AuthenticateRequest",
    "AuthenticateResponse",
    "CreatePaymentResponse",
    "Customer",
    "MoneyType",
    "NotificationPayment",
    "Payment",
    "PaymentNotificationRequest",
    "Product",
    "SearchCriteria",
    "Service",
    "generate_notification_signature",
    "generate_payment_signature",
    "verify_notification_signature",
    "parse_notification",
    "verify_notification",
    "PaynetError",
    "PaynetSDKError",
    "PaynetApiError",
    "PaynetAuthenticationError",
    "PaynetNetworkError",
    "PaynetValidationError",
    "PaynetSettings",
    "get_paynet_settings",
    "setup_logging",
]
