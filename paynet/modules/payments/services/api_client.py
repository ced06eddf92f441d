# -*- coding: utf-8 -*-
"""
paynet/modules/payments/services/api_client.py

Cliente HTTP async para la API de comercio de Paynet.

Operaciones:
- POST /auth                 -> authenticate (grant password, bearer token)
- POST /api/Payments/Send    -> create_payment (flujo server->server)
- GET  /api/Payments/{id}    -> get_payment
- GET  /api/Payments?...     -> search_payments

Token:
- Se guarda en un TokenCache propio de la instancia (sin estado global).
- ensure_token() se llama antes de cada request; si el token falta o
  venció y hay credenciales guardadas, re-autentica.
- Un asyncio.Lock garantiza una sola re-autenticación concurrente.

Errores:
- Fallo de red/timeout            -> PaynetNetworkError
- /auth no-2xx                    -> PaynetAuthenticationError
- Resto de no-2xx o Code en body  -> PaynetApiError

Sin reintentos: la API de Paynet no garantiza idempotencia de /Send.

Fecha: 2025-12-02
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from paynet.modules.payments.errors import (
    PaynetApiError,
    PaynetAuthenticationError,
    PaynetNetworkError,
    PaynetSDKError,
    PaynetValidationError,
)
from paynet.modules.payments.schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    CreatePaymentResponse,
    Payment,
    SearchCriteria,
)
from paynet.shared.core import TokenCache, mask_token
from .payment_mapping import build_create_payment_body

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def normalize_host(url: str) -> str:
    """Quita espacios y slash final de un host."""
    return (url or "").strip().rstrip("/")


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


class PaynetApiClient:
    """Cliente de la API de comercio de Paynet."""

    def __init__(
        self,
        api_host: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        debug: bool = False,
    ) -> None:
        if not normalize_host(api_host):
            raise PaynetValidationError("api_host es requerido")

        self.api_host = normalize_host(api_host)
        self.timeout = timeout
        self.debug = debug

        self._http = http_client
        self._owns_http = http_client is None
        self._token = TokenCache()
        self._credentials: Optional[tuple[str, str]] = None
        self._auth_lock = asyncio.Lock()

    # -------------------------------------------------------------------------
    # Ciclo de vida
    # -------------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout)
            self._owns_http = True
        return self._http

    async def aclose(self) -> None:
        """Cierra el cliente HTTP (solo si lo creó el SDK)."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "PaynetApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # HTTP helpers
    # -------------------------------------------------------------------------

    async def _send(self, method: str, url: str, action: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client().request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error("[PaynetSDK] %s request failed: %s %s error=%s", action, method, url, e)
            raise PaynetNetworkError(f"{action} request failed", cause=e) from e

    @staticmethod
    def _json(response: httpx.Response, action: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise PaynetApiError(
                f"{action} returned invalid JSON",
                response.status_code,
                response.reason_phrase,
                response.text,
                cause=e,
            ) from e

    @staticmethod
    def _auth_headers(token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @staticmethod
    def _to_payment(data: Any, fallback: Optional[Mapping[str, Any]] = None) -> Payment:
        if not isinstance(data, Mapping):
            raise PaynetValidationError(f"Respuesta de pago inesperada: {type(data).__name__}")
        merged: dict[str, Any] = dict(fallback or {})
        merged.update({k: v for k, v in data.items() if v is not None})
        try:
            return Payment.model_validate(merged)
        except ValidationError as e:
            raise PaynetValidationError("Respuesta de pago mal formada", cause=e) from e

    # -------------------------------------------------------------------------
    # Token
    # -------------------------------------------------------------------------

    @property
    def token_cache(self) -> TokenCache:
        return self._token

    async def authenticate(self, username: str, password: str) -> AuthenticateResponse:
        """
        Obtiene un bearer token OAuth2 (grant password).

        Las credenciales se guardan para re-autenticar automáticamente
        cuando el token expire.
        """
        self._credentials = (username, password)
        return await self._authenticate(username, password)

    async def _authenticate(self, username: str, password: str) -> AuthenticateResponse:
        url = f"{self.api_host}/auth"
        form = AuthenticateRequest(username=username, password=password).model_dump()

        response = await self._send(
            "POST",
            url,
            "Authentication",
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        if not response.is_success:
            logger.warning(
                "[PaynetSDK] authentication failed: user=%s status=%d",
                username,
                response.status_code,
            )
            raise PaynetAuthenticationError(
                "Authentication failed",
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        data = self._json(response, "Authentication")
        try:
            auth = AuthenticateResponse.model_validate(data)
        except ValidationError as e:
            raise PaynetAuthenticationError(
                "Authentication response is missing access_token/expires_in",
                response.status_code,
                response.reason_phrase,
                response.text,
                cause=e,
            ) from e

        self._token = TokenCache.from_expires_in(auth.access_token, auth.expires_in)

        if self.debug:
            logger.debug(
                "[PaynetSDK] Authenticated, token=%s expires at: %s",
                mask_token(auth.access_token),
                datetime.fromtimestamp(self._token.expires_at, tz=timezone.utc).isoformat(),
            )

        return auth

    def set_access_token(self, token: str, expires_in: Optional[int] = None) -> None:
        """
        Fija el token manualmente (p.ej. obtenido fuera del SDK).

        Args:
            token: Bearer token
            expires_in: Segundos de vigencia desde ahora; None = sin expiración conocida
        """
        self._token = TokenCache.from_expires_in(token, expires_in)

    def get_access_token(self) -> Optional[str]:
        return self._token.access_token

    async def ensure_token(self) -> str:
        """
        Devuelve un token vigente, re-autenticando si falta o expiró.

        Raises:
            PaynetSDKError: si no hay token válido ni credenciales para renovarlo
        """
        if self._token.has_token and not self._token.is_expired():
            return self._token.access_token  # type: ignore[return-value]

        async with self._auth_lock:
            # Otro request pudo haber renovado el token mientras esperábamos
            if self._token.has_token and not self._token.is_expired():
                return self._token.access_token  # type: ignore[return-value]

            if self._credentials is None:
                if not self._token.has_token:
                    raise PaynetSDKError(
                        "No access token available. Call authenticate() first or use set_access_token()."
                    )
                raise PaynetSDKError(
                    "Access token has expired. Please call authenticate() again to obtain a new token."
                )

            if self.debug:
                logger.debug(
                    "[PaynetSDK] %s, re-authenticating...",
                    "Token expired" if self._token.has_token else "No token",
                )
            await self._authenticate(*self._credentials)

        return self._token.access_token  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Pagos
    # -------------------------------------------------------------------------

    async def create_payment(self, payment: Payment) -> Payment:
        """
        Registra un pago (flujo server->server).

        Returns:
            Payment con los datos devueltos por la API (PaymentID, Signature, ...)
        """
        url = f"{self.api_host}/api/Payments/Send"
        token = await self.ensure_token()
        body = build_create_payment_body(payment)

        if self.debug:
            logger.debug("[PaynetSDK] CreatePayment request: %s", _dump(body))

        response = await self._send(
            "POST", url, "Payment creation", headers=self._auth_headers(token), json=body
        )

        if not response.is_success:
            raise PaynetApiError(
                "Payment creation failed",
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        data = self._json(response, "Payment creation") or {}

        if self.debug:
            logger.debug("[PaynetSDK] CreatePayment response: %s", _dump(data))

        result = CreatePaymentResponse.model_validate(data)
        if result.is_error:
            logger.warning(
                "[PaynetSDK] payment creation rejected: invoice=%s code=%s",
                body.get("Invoice"),
                result.code,
            )
            raise PaynetApiError(
                result.message or f"Payment creation failed with code: {result.code}",
                response.status_code,
                response.reason_phrase,
                json.dumps(data, ensure_ascii=False),
            )

        created = self._to_payment(data, fallback=body)
        logger.info(
            "[PaynetSDK] payment registered: invoice=%s payment_id=%s",
            created.invoice,
            created.payment_id,
        )
        return created

    async def get_payment(self, payment_id: int) -> Payment:
        """Consulta estado y detalle de un pago por su PaymentID de Paynet."""
        url = f"{self.api_host}/api/Payments/{payment_id}"
        token = await self.ensure_token()

        response = await self._send(
            "GET", url, "Payment retrieval", headers=self._auth_headers(token)
        )

        if not response.is_success:
            message = (
                f"Payment not found: {payment_id}"
                if response.status_code == 404
                else "Payment retrieval failed"
            )
            raise PaynetApiError(
                message,
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        data = self._json(response, "Payment retrieval")

        if self.debug:
            logger.debug("[PaynetSDK] GetPayment response: %s", _dump(data))

        return self._to_payment(data)

    async def search_payments(
        self, criteria: Union[SearchCriteria, Mapping[str, Any], None] = None
    ) -> list[Payment]:
        """
        Busca pagos por Invoice y/o rango de fechas.

        Un 404 de la API significa "sin resultados" y devuelve [].
        """
        if criteria is None:
            criteria = SearchCriteria()
        elif not isinstance(criteria, SearchCriteria):
            criteria = SearchCriteria.model_validate(criteria)

        url = f"{self.api_host}/api/Payments"
        token = await self.ensure_token()

        response = await self._send(
            "GET",
            url,
            "Payment search",
            headers=self._auth_headers(token),
            params=criteria.to_query_params(),
        )

        if not response.is_success:
            if response.status_code == 404:
                return []
            raise PaynetApiError(
                "Payment search failed",
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        data = self._json(response, "Payment search")

        if self.debug:
            logger.debug("[PaynetSDK] SearchPayments response: %s", _dump(data))

        if not data:
            return []
        items = data if isinstance(data, list) else [data]
        return [self._to_payment(item) for item in items]


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "PaynetApiClient", "normalize_host"]

# Fin del archivo paynet/modules/payments/services/api_client.py
