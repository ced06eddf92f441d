# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/forms/ecom_forms.py

Formularios de redirección al portal de pago de Paynet.

Flujos:
- GetEcom (server->server): el pago ya se registró vía API; el formulario
  solo referencia el PaymentID y la Signature devuelta por la API.
- SetEcom (client->server): el formulario lleva el pago completo y su
  firma calculada localmente con el secreto compartido.

NOTA: ``LinkUrlSucces`` es un typo de la API de Paynet y es el nombre que
lee el portal; SetEcom envía además ``LinkUrlSuccess`` por compatibilidad.

Fecha: 2025-12-03
"""

from __future__ import annotations

from typing import Any, Union, Mapping

from paynet.modules.payments.errors import PaynetValidationError
from paynet.modules.payments.schemas import Payment
from paynet.modules.payments.services.api_client import normalize_host
from paynet.modules.payments.services.signatures import generate_payment_signature
from paynet.modules.payments.services.signatures.canonical import coerce_model
from .html_form import build_form

DEFAULT_LANG = "en-US"
DEFAULT_SIGN_VERSION = "v05"

GET_ECOM_PATH = "/Acquiring/GetEcom"
SET_ECOM_PATH = "/Acquiring/SetEcom"


def build_get_ecom_form(
    payment: Union[Payment, Mapping[str, Any]],
    *,
    portal_host: str,
    success_url: str,
    cancel_url: str,
    lang: str = DEFAULT_LANG,
) -> str:
    """
    Formulario GetEcom para un pago ya registrado.

    Raises:
        PaynetValidationError: si el pago no tiene PaymentID o Signature
    """
    payment = coerce_model(Payment, payment, "Payment")
    if not payment.payment_id:
        raise PaynetValidationError("Payment must have a PaymentID for GetEcom flow")
    if not payment.signature:
        raise PaynetValidationError("Payment must have a Signature for GetEcom flow")

    form_data: dict[str, Any] = {
        "operation": payment.payment_id,
        "LinkUrlSucces": success_url,
        "LinkUrlCancel": cancel_url,
        "ExpiryDate": payment.expiry_date,
        "Lang": lang,
        "Signature": payment.signature,
    }

    return build_form(f"{normalize_host(portal_host)}{GET_ECOM_PATH}", form_data)


def build_set_ecom_form(
    payment: Union[Payment, Mapping[str, Any]],
    *,
    portal_host: str,
    secret_key: str,
    success_url: str,
    cancel_url: str,
    lang: str = DEFAULT_LANG,
    sign_version: str = DEFAULT_SIGN_VERSION,
) -> str:
    """
    Formulario SetEcom con el pago completo y su firma.

    Efecto secundario documentado: si el pago no trae Signature/SignVersion
    se calculan y se asignan sobre la misma instancia de Payment (para
    reutilizarlos). Si se pasa un mapping, se asignan sobre la copia validada.
    """
    payment = coerce_model(Payment, payment, "Payment")
    if not payment.signature:
        payment.signature = generate_payment_signature(payment, secret_key)
    if not payment.sign_version:
        payment.sign_version = sign_version

    form_data: dict[str, Any] = {
        "ExternalID": payment.external_invoice,
        "Merchant": payment.merchant_code,
        "Currency": payment.currency,
        "ExpiryDate": payment.expiry_date,
        "ExternalDate": payment.external_date,
        "Customer": payment.customer,
        "Services": payment.services,
        "LinkUrlSucces": success_url,
        "LinkUrlSuccess": success_url,
        "LinkUrlCancel": cancel_url,
        "Lang": lang,
        "SignVersion": payment.sign_version,
        "Signature": payment.signature,
    }

    if payment.money_type is not None:
        form_data["MoneyType"] = payment.money_type
    if payment.payer is not None:
        form_data["Payer"] = payment.payer
    if payment.sale_area_code:
        form_data["SaleAreaCode"] = payment.sale_area_code

    return build_form(f"{normalize_host(portal_host)}{SET_ECOM_PATH}", form_data)


__all__ = [
    "DEFAULT_LANG",
    "DEFAULT_SIGN_VERSION",
    "GET_ECOM_PATH",
    "SET_ECOM_PATH",
    "build_get_ecom_form",
    "build_set_ecom_form",
]

# Fin del archivo paynet/modules/payments/facades/forms/ecom_forms.py
