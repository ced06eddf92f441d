# -*- coding: utf-8 -*-
"""
paynet/modules/payments/services/signatures/canonical.py

Serialización canónica de pagos y notificaciones para firma (Paynet v0.5).

Reglas:
- El orden de campos es FIJO y lo define el protocolo de Paynet; nunca se
  deriva del orden de iteración del modelo ni de un orden alfabético.
- Un campo ausente aporta "" en su posición (ausente != omitido).
- Los valores se concatenan SIN separador.
- Servicios y productos se aplanan en el orden de la lista.

Las funciones son puras: no mutan la entrada ni hacen I/O.

Fecha: 2025-12-02
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import ValidationError

from paynet.modules.payments.errors import PaynetValidationError
from paynet.modules.payments.schemas import Payment, PaymentNotificationRequest, PaynetModel

_M = TypeVar("_M", bound=PaynetModel)

PaymentInput = Union[Payment, Mapping[str, Any]]
NotificationInput = Union[PaymentNotificationRequest, Mapping[str, Any]]


def _format_float(value: float) -> str:
    """
    Texto de un float con las reglas de Number#toString de JavaScript.

    Mismos dígitos mínimos que ``repr``; cambia dónde se usa notación
    exponencial (n fuera de (-6, 21]) y su formato (``1e-7``, ``1e+21``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + text


def canonical_scalar(value: Any) -> str:
    """
    Convierte un escalar a su forma canónica de texto.

    Los números se renderizan como lo haría la API (sin formato de locale,
    ``1000.0`` -> ``"1000"``); los booleanos como "true"/"false".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return canonical_scalar(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return str(int(value))
        return format(value.normalize(), "f")
    return str(value)


def coerce_model(model_cls: Type[_M], value: Any, label: str) -> _M:
    if isinstance(value, model_cls):
        return value
    if isinstance(value, Mapping):
        try:
            return model_cls.model_validate(value)
        except ValidationError as e:
            raise PaynetValidationError(f"{label} mal formado: {e.error_count()} error(es)", cause=e) from e
    raise PaynetValidationError(
        f"{label} debe ser {model_cls.__name__} o un mapping, recibido: {type(value).__name__}"
    )


def payment_signature_values(payment: PaymentInput) -> list[Any]:
    """Lista ordenada de valores que entran en la firma de un pago."""
    payment = coerce_model(Payment, payment, "Payment")
    customer = payment.customer
    if customer is None:
        raise PaynetValidationError("Payment sin Customer: no se puede firmar")

    values: list[Any] = [
        payment.currency,
        customer.address,
        customer.city,
        customer.code,
        customer.country,
        customer.email,
        customer.name_first,
        customer.name_last,
        customer.phone_number,
        payment.expiry_date,
        payment.invoice,
        payment.merchant_code,
        payment.money_type.code if payment.money_type is not None else None,
    ]

    for service in payment.services or ():
        values.extend((service.amount, service.description, service.name))
        for product in service.products or ():
            values.extend(
                (
                    product.amount,
                    product.barcode,
                    product.code,
                    product.description,
                    product.group_id,
                    product.group_name,
                    product.line_no,
                    product.name,
                    product.unit_price,
                    product.unit_product,
                )
            )

    return values


def notification_signature_values(notification: NotificationInput) -> list[Any]:
    """Lista ordenada de valores que entran en la firma de una notificación."""
    notification = coerce_model(PaymentNotificationRequest, notification, "Notification")
    summary = notification.payment
    if summary is None:
        raise PaynetValidationError("Notification sin Payment: no se puede firmar")

    # Orden literal del protocolo (no es alfabético estricto)
    return [
        notification.event_date,
        notification.event_id,
        notification.event_type,
        summary.amount,
        summary.customer,
        summary.external_id,
        summary.id,
        summary.merchant,
        summary.status_date,
    ]


def join_canonical(values: list[Any]) -> str:
    return "".join(canonical_scalar(v) for v in values)


def canonical_payment_string(payment: PaymentInput) -> str:
    return join_canonical(payment_signature_values(payment))


def canonical_notification_string(notification: NotificationInput) -> str:
    return join_canonical(notification_signature_values(notification))


__all__ = [
    "coerce_model",
    "PaymentInput",
    "NotificationInput",
    "canonical_scalar",
    "payment_signature_values",
    "notification_signature_values",
    "join_canonical",
    "canonical_payment_string",
    "canonical_notification_string",
]

# Fin del archivo paynet/modules/payments/services/signatures/canonical.py
