# -*- coding: utf-8 -*-
"""
paynet/modules/payments/services/signatures/signature_codec.py

Firma y verificación con secreto compartido (esquema Paynet v0.5).

Esquema (contrato de la API, NO una recomendación criptográfica):
    base64( MD5( utf8(cadena_canónica + secret_key) ) )

- El secreto se CONCATENA al final (no HMAC, no prefijo).
- Base64 estándar con padding (no URL-safe).
- Cambiar a HMAC-SHA256 u otro esquema rompe la interoperabilidad.

Fecha: 2025-12-02
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from .canonical import (
    NotificationInput,
    PaymentInput,
    coerce_model,
    canonical_notification_string,
    canonical_payment_string,
)
from paynet.modules.payments.schemas import PaymentNotificationRequest


def sign(canonical_string: str, secret_key: str) -> str:
    """Firma una cadena canónica con el secreto compartido."""
    digest = hashlib.md5((canonical_string + secret_key).encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def generate_payment_signature(payment: PaymentInput, secret_key: str) -> str:
    """Firma de un pago (flujo client->server / SetEcom)."""
    return sign(canonical_payment_string(payment), secret_key)


def generate_notification_signature(notification: NotificationInput, secret_key: str) -> str:
    """Firma esperada de una notificación."""
    return sign(canonical_notification_string(notification), secret_key)


def verify_notification_signature(notification: NotificationInput, secret_key: str) -> bool:
    """
    Verifica la firma de una notificación entrante.

    Returns:
        True si la firma recibida coincide con la recalculada.
        Un mismatch o una firma ausente devuelven False (no es error).

    Raises:
        PaynetValidationError: si la notificación está estructuralmente
            mal formada (p.ej. sin el sub-registro Payment).
    """
    notification = coerce_model(PaymentNotificationRequest, notification, "Notification")
    expected = generate_notification_signature(notification, secret_key)
    received = notification.signature
    if not received:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8"))


__all__ = [
    "sign",
    "generate_payment_signature",
    "generate_notification_signature",
    "verify_notification_signature",
]

# Fin del archivo paynet/modules/payments/services/signatures/signature_codec.py
