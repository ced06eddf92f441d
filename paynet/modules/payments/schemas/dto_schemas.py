# -*- coding: utf-8 -*-
"""
paynet/modules/payments/schemas/dto_schemas.py

DTOs de requests/responses de la API de Paynet y del webhook de
notificaciones.

Endpoints:
- POST /auth                  -> AuthenticateRequest / AuthenticateResponse
- POST /api/Payments/Send     -> CreatePaymentResponse (éxito o error)
- Webhook de notificación     -> PaymentNotificationRequest

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .payment_schemas import PaynetModel

# Valor escalar tal como llega en el webhook: se firma con su tipo y texto
# originales ("100.50" sigue siendo "100.50", Customer 12345 sigue siendo 12345)
WireScalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class AuthenticateRequest(PaynetModel):
    """Body form-urlencoded de POST /auth (grant de tipo password)."""

    grant_type: Literal["password"] = "password"
    username: str
    password: str


class AuthenticateResponse(PaynetModel):
    """Respuesta OAuth2 de POST /auth."""

    access_token: str
    token_type: str = Field(default="bearer", description='p.ej. "bearer"')
    expires_in: int = Field(description="Vigencia del token en segundos")


class CreatePaymentResponse(PaynetModel):
    """
    Respuesta de POST /api/Payments/Send.

    En caso de error de negocio la API responde 2xx con ``Code`` y
    ``Message``; el resto de campos replica el pago registrado.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    code: Optional[Union[int, str]] = Field(default=None, alias="Code")
    message: Optional[str] = Field(default=None, alias="Message")

    @property
    def is_error(self) -> bool:
        return bool(self.code)


class NotificationPayment(PaynetModel):
    """Resumen del pago incluido en una notificación."""

    id: Optional[WireScalar] = Field(default=None, alias="ID")
    external_id: Optional[WireScalar] = Field(default=None, alias="ExternalID")
    merchant: Optional[WireScalar] = Field(default=None, alias="Merchant")
    customer: Optional[WireScalar] = Field(default=None, alias="Customer")
    status_date: Optional[WireScalar] = Field(default=None, alias="StatusDate", description="ISO 8601")
    amount: Optional[WireScalar] = Field(default=None, alias="Amount")


class PaymentNotificationRequest(PaynetModel):
    """Notificación (webhook) enviada por Paynet al cambiar el estado de un pago."""

    event_id: Optional[WireScalar] = Field(default=None, alias="EventID")
    event_type: Optional[WireScalar] = Field(default=None, alias="EventType", description='p.ej. "PAID"')
    event_date: Optional[WireScalar] = Field(default=None, alias="EventDate", description="ISO 8601")
    payment: NotificationPayment = Field(alias="Payment")
    signature: Optional[str] = Field(default=None, alias="Signature")
    sign_version: Optional[str] = Field(default=None, alias="SignVersion")


__all__ = [
    "WireScalar",
    "AuthenticateRequest",
    "AuthenticateResponse",
    "CreatePaymentResponse",
    "NotificationPayment",
    "PaymentNotificationRequest",
]

# Fin del archivo paynet/modules/payments/schemas/dto_schemas.py
