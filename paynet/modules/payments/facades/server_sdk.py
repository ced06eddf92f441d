# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/server_sdk.py

Fachada principal del SDK de servidor de Paynet.

Compone:
- PaynetApiClient (token + endpoints de pagos)
- Firmas (generación de firma de pago, verificación de notificaciones)
- Formularios de redirección GetEcom / SetEcom

Ejemplo:
    async with PaynetServerSDK.from_settings() as sdk:
        await sdk.authenticate("user", "pass")
        payment = await sdk.create_payment(payment)
        html = sdk.build_get_ecom_form(payment, success_url, cancel_url)

Fecha: 2025-12-03
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

import httpx

from paynet.modules.payments.errors import PaynetValidationError
from paynet.modules.payments.schemas import (
    AuthenticateResponse,
    Payment,
    PaymentNotificationRequest,
    SearchCriteria,
)
from paynet.modules.payments.services.api_client import (
    DEFAULT_TIMEOUT_SECONDS,
    PaynetApiClient,
    normalize_host,
)
from paynet.modules.payments.services.signatures import (
    generate_payment_signature,
    verify_notification_signature,
)
from paynet.shared.config.settings_paynet import PaynetSettings, get_paynet_settings
from .forms import DEFAULT_LANG, DEFAULT_SIGN_VERSION, build_get_ecom_form, build_set_ecom_form

logger = logging.getLogger(__name__)


class PaynetServerSDK:
    """SDK de servidor para integrar pagos con Paynet."""

    def __init__(
        self,
        api_host: str,
        portal_host: str,
        secret_key: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        debug: bool = False,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        default_lang: str = DEFAULT_LANG,
        sign_version: str = DEFAULT_SIGN_VERSION,
    ) -> None:
        if not normalize_host(portal_host):
            raise PaynetValidationError("portal_host es requerido")
        if not secret_key:
            raise PaynetValidationError("secret_key es requerido")

        self.portal_host = normalize_host(portal_host)
        self.default_lang = default_lang
        self.sign_version = sign_version
        self.debug = debug
        self._secret_key = secret_key
        self._settings: Optional[PaynetSettings] = None
        self.api = PaynetApiClient(
            api_host,
            http_client=http_client,
            timeout=timeout,
            debug=debug,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[PaynetSettings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "PaynetServerSDK":
        """
        Crea el SDK desde PaynetSettings (variables PAYNET_*).

        Las credenciales (username/password) no se usan aquí: se pasan a
        authenticate() explícitamente o con authenticate_from_settings().

        Raises:
            PaynetValidationError: si falta PAYNET_SECRET_KEY
        """
        settings = settings or get_paynet_settings()
        secret_key = settings.get_secret_key().strip()
        if not secret_key:
            raise PaynetValidationError(
                "[PaynetSDK] PAYNET_SECRET_KEY es requerido para firmar y verificar"
            )

        logger.info(
            "[PaynetSDK] config: api_host=%s portal_host=%s timeout=%ss debug=%s",
            settings.api_host,
            settings.portal_host,
            settings.http_timeout_seconds,
            settings.debug,
        )

        sdk = cls(
            api_host=settings.api_host,
            portal_host=settings.portal_host,
            secret_key=secret_key,
            http_client=http_client,
            debug=settings.debug,
            timeout=settings.http_timeout_seconds,
            default_lang=settings.default_lang,
            sign_version=settings.sign_version,
        )
        sdk._settings = settings
        return sdk

    @property
    def api_host(self) -> str:
        return self.api.api_host

    async def aclose(self) -> None:
        await self.api.aclose()

    async def __aenter__(self) -> "PaynetServerSDK":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Token
    # -------------------------------------------------------------------------

    async def authenticate(self, username: str, password: str) -> AuthenticateResponse:
        """Obtiene un bearer token OAuth2 y guarda credenciales para renovarlo."""
        return await self.api.authenticate(username, password)

    async def authenticate_from_settings(self) -> AuthenticateResponse:
        """Autentica con PAYNET_USERNAME / PAYNET_PASSWORD."""
        settings = self._settings or get_paynet_settings()
        if not settings.username or not settings.get_password():
            raise PaynetValidationError("PAYNET_USERNAME y PAYNET_PASSWORD son requeridos")
        return await self.api.authenticate(settings.username, settings.get_password())

    def set_access_token(self, token: str, expires_in: Optional[int] = None) -> None:
        self.api.set_access_token(token, expires_in)

    def get_access_token(self) -> Optional[str]:
        return self.api.get_access_token()

    # -------------------------------------------------------------------------
    # Pagos (server->server)
    # -------------------------------------------------------------------------

    async def create_payment(self, payment: Payment) -> Payment:
        return await self.api.create_payment(payment)

    async def get_payment(self, payment_id: int) -> Payment:
        return await self.api.get_payment(payment_id)

    async def search_payments(
        self, criteria: Union[SearchCriteria, Mapping[str, Any], None] = None
    ) -> list[Payment]:
        return await self.api.search_payments(criteria)

    # -------------------------------------------------------------------------
    # Firmas
    # -------------------------------------------------------------------------

    def generate_payment_signature(self, payment: Union[Payment, Mapping[str, Any]]) -> str:
        """Firma de un pago con el secreto configurado (flujo client->server)."""
        return generate_payment_signature(payment, self._secret_key)

    def verify_notification_signature(
        self, notification: Union[PaymentNotificationRequest, Mapping[str, Any]]
    ) -> bool:
        """Verifica la firma de una notificación entrante."""
        return verify_notification_signature(notification, self._secret_key)

    # -------------------------------------------------------------------------
    # Formularios
    # -------------------------------------------------------------------------

    def build_get_ecom_form(
        self,
        payment: Union[Payment, Mapping[str, Any]],
        success_url: str,
        cancel_url: str,
        lang: Optional[str] = None,
    ) -> str:
        """Formulario HTML del flujo server->server (GetEcom)."""
        return build_get_ecom_form(
            payment,
            portal_host=self.portal_host,
            success_url=success_url,
            cancel_url=cancel_url,
            lang=lang or self.default_lang,
        )

    def build_set_ecom_form(
        self,
        payment: Union[Payment, Mapping[str, Any]],
        success_url: str,
        cancel_url: str,
        lang: Optional[str] = None,
    ) -> str:
        """
        Formulario HTML del flujo client->server (SetEcom).

        Asigna Signature y SignVersion sobre el pago si no los trae.
        """
        return build_set_ecom_form(
            payment,
            portal_host=self.portal_host,
            secret_key=self._secret_key,
            success_url=success_url,
            cancel_url=cancel_url,
            lang=lang or self.default_lang,
            sign_version=self.sign_version,
        )


__all__ = ["PaynetServerSDK"]

# Fin del archivo paynet/modules/payments/facades/server_sdk.py
