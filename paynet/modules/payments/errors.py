# -*- coding: utf-8 -*-
"""
paynet/modules/payments/errors.py

Excepciones semánticas del SDK de Paynet.

Objetivo:
- Distinguir fallos de red, de autenticación, de la API y de validación
  de datos, para que el integrador pueda traducirlos a su propia capa
  (p.ej. respuestas HTTP de su backend) sin inspeccionar httpx.
- Un mismatch de firma NO es un error: se representa como False.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any, Optional


class PaynetSDKError(Exception):
    """
    Error base del SDK.

    Attributes:
        cause: Excepción original (si la hay). También se encadena con
            ``raise ... from`` cuando se envuelve una excepción.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Serializa el error para logs o respuestas JSON."""
        return {
            "error": type(self).__name__,
            "message": self.message,
        }


class PaynetApiError(PaynetSDKError):
    """
    La API de Paynet respondió con un error (HTTP no-2xx o ``Code`` en el body).

    Attributes:
        status: Código HTTP de la respuesta
        status_text: Reason phrase de la respuesta
        body: Body crudo de la respuesta (si pudo leerse)
    """

    def __init__(
        self,
        message: str,
        status: int,
        status_text: str = "",
        body: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status = status
        self.status_text = status_text
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "status": self.status,
                "status_text": self.status_text,
                "body": (self.body or "")[:300],
            }
        )
        return data


class PaynetAuthenticationError(PaynetApiError):
    """Fallo al obtener el token en el endpoint /auth."""


class PaynetNetworkError(PaynetSDKError):
    """Fallo de red (conexión, timeout) antes de recibir respuesta."""


class PaynetValidationError(PaynetSDKError):
    """Datos faltantes o inválidos (incluye input mal formado para firmas)."""


__all__ = [
    "PaynetSDKError",
    "PaynetApiError",
    "PaynetAuthenticationError",
    "PaynetNetworkError",
    "PaynetValidationError",
]

# Fin del archivo paynet/modules/payments/errors.py
