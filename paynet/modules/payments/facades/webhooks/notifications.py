# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/webhooks/notifications.py

Recepción de notificaciones (webhooks) de Paynet.

Uso típico en el handler del integrador:

    if not verify_notification(await request.body(), secret_key):
        return Response(status_code=400)

- Body mal formado (JSON inválido, sin sub-registro Payment) ->
  PaynetValidationError: el handler debe responder 400.
- Firma que no coincide -> False (rechazar sin lanzar).

Fecha: 2025-12-03
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from paynet.modules.payments.errors import PaynetValidationError
from paynet.modules.payments.schemas import PaymentNotificationRequest
from paynet.modules.payments.services.signatures import verify_notification_signature

logger = logging.getLogger(__name__)

NotificationBody = Union[bytes, bytearray, str, Mapping[str, Any], PaymentNotificationRequest]


def parse_notification(body: NotificationBody) -> PaymentNotificationRequest:
    """
    Convierte el body crudo del webhook en PaymentNotificationRequest.

    Raises:
        PaynetValidationError: si el body no es JSON válido o no tiene la
            estructura de una notificación
    """
    if isinstance(body, PaymentNotificationRequest):
        return body

    if isinstance(body, (bytes, bytearray, str)):
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise PaynetValidationError("Notification body is not valid JSON", cause=e) from e
    else:
        data = body

    if not isinstance(data, Mapping):
        raise PaynetValidationError(
            f"Notification body must be a JSON object, got {type(data).__name__}"
        )

    try:
        return PaymentNotificationRequest.model_validate(data)
    except ValidationError as e:
        raise PaynetValidationError("Notification body is malformed", cause=e) from e


def verify_notification(body: NotificationBody, secret_key: str) -> bool:
    """Parsea y verifica la firma de una notificación entrante."""
    notification = parse_notification(body)
    valid = verify_notification_signature(notification, secret_key)
    if not valid:
        logger.warning(
            "[PaynetSDK] notification rejected: invalid signature event_id=%s event_type=%s",
            notification.event_id,
            notification.event_type,
        )
    return valid


__all__ = ["NotificationBody", "parse_notification", "verify_notification"]

# Fin del archivo paynet/modules/payments/facades/webhooks/notifications.py
