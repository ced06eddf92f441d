# -*- coding: utf-8 -*-
"""
paynet/shared/core/token_cache.py

Cache del bearer token de Paynet como value object.

Cada cliente es dueño de su propia instancia (no hay cache global). El
refresco es explícito: el cliente consulta ``is_expired()`` antes de cada
request y re-autentica si hace falta.

Fecha: 2025-12-02
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

# Margen de seguridad: el token se considera vencido 5s antes de expirar
EXPIRY_MARGIN_SECONDS = 5


@dataclass(frozen=True)
class TokenCache:
    """
    Token vigente y su expiración.

    Attributes:
        access_token: Bearer token (None si aún no se autenticó)
        expires_at: Epoch en segundos; None = sin expiración conocida
    """

    access_token: Optional[str] = None
    expires_at: Optional[float] = None

    @classmethod
    def from_expires_in(
        cls,
        access_token: str,
        expires_in: Optional[int],
        now: Optional[float] = None,
    ) -> "TokenCache":
        """Crea el cache a partir de ``expires_in`` (segundos) de la respuesta OAuth2."""
        if expires_in is None:
            return cls(access_token=access_token, expires_at=None)
        now = time.time() if now is None else now
        return cls(access_token=access_token, expires_at=now + expires_in - EXPIRY_MARGIN_SECONDS)

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)

    def is_expired(self, now: Optional[float] = None) -> bool:
        if self.expires_at is None:
            return False
        now = time.time() if now is None else now
        return now >= self.expires_at


def mask_token(token: Optional[str]) -> str:
    """Enmascara un token para logs (nunca loguear el token completo)."""
    if not token:
        return "<none>"
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-4:]}"


__all__ = ["EXPIRY_MARGIN_SECONDS", "TokenCache", "mask_token"]

# Fin del archivo paynet/shared/core/token_cache.py
