# -*- coding: utf-8 -*-
"""
paynet/modules/payments/services/signatures/__init__.py

Subsistema de firmas: serialización canónica + codec MD5/base64.
"""

from .canonical import (
    canonical_notification_string,
    canonical_payment_string,
    canonical_scalar,
    notification_signature_values,
    payment_signature_values,
)
from .signature_codec import (
    generate_notification_signature,
    generate_payment_signature,
    sign,
    verify_notification_signature,
)

__all__ = [
    "canonical_notification_string",
    "canonical_payment_string",
    "canonical_scalar",
    "notification_signature_values",
    "payment_signature_values",
    "generate_notification_signature",
    "generate_payment_signature",
    "sign",
    "verify_notification_signature",
]
