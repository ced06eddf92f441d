# -*- coding: utf-8 -*-
"""
paynet/shared/config/settings_paynet.py

Configuración del SDK de Paynet.

Descripción:
    Centraliza hosts, credenciales, secreto de firma y opciones de
    logging. Se carga desde variables de entorno con prefijo PAYNET_
    (o desde .env).

Ejemplo:
    PAYNET_API_HOST=https://api-merchant.test.paynet.md
    PAYNET_PORTAL_HOST=https://test.paynet.md
    PAYNET_SECRET_KEY=...
    PAYNET_USERNAME=...
    PAYNET_PASSWORD=...

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaynetSettings(BaseSettings):
    """Configuración del SDK de Paynet."""

    # =========================================================================
    # HOSTS
    # =========================================================================

    api_host: str = Field(
        default="https://api-merchant.test.paynet.md",
        description="Host de la API de comercio (token, registro y consulta de pagos)",
    )

    portal_host: str = Field(
        default="https://test.paynet.md",
        description="Host del portal de pago (destino de los formularios GetEcom/SetEcom)",
    )

    @field_validator("api_host", "portal_host", mode="before")
    @classmethod
    def _normalize_host(cls, v: Optional[str]) -> Optional[str]:
        """Quita espacios y slash final."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    # =========================================================================
    # CREDENCIALES
    # =========================================================================

    secret_key: Optional[SecretStr] = Field(
        default=None,
        description="Secreto compartido para generar/verificar firmas",
    )

    username: Optional[str] = Field(
        default=None,
        description="Usuario para el grant password de /auth",
    )

    password: Optional[SecretStr] = Field(
        default=None,
        description="Contraseña para el grant password de /auth",
    )

    # =========================================================================
    # HTTP
    # =========================================================================

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout total de las llamadas HTTP a la API",
    )

    # =========================================================================
    # FORMULARIOS
    # =========================================================================

    default_lang: str = Field(
        default="en-US",
        description="Idioma por defecto del portal de pago",
    )

    sign_version: str = Field(
        default="v05",
        description="Versión de firma enviada en SetEcom",
    )

    # =========================================================================
    # LOGGING
    # =========================================================================

    debug: bool = Field(
        default=False,
        description="Loguea requests/responses a nivel DEBUG",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging usado por setup_logging()",
    )

    log_format: Literal["plain", "pretty", "json"] = Field(
        default="plain",
        description="Formato de logs (json requiere python-json-logger)",
    )

    # =========================================================================
    # CONFIGURACIÓN DE PYDANTIC
    # =========================================================================

    model_config = SettingsConfigDict(
        env_prefix="PAYNET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def get_secret_key(self) -> str:
        """Secreto en claro; vacío si no está configurado."""
        return self.secret_key.get_secret_value() if self.secret_key else ""

    def get_password(self) -> str:
        return self.password.get_secret_value() if self.password else ""


# Singleton global
_paynet_settings: Optional[PaynetSettings] = None


def get_paynet_settings() -> PaynetSettings:
    """
    Obtiene la instancia global de configuración del SDK.

    Returns:
        PaynetSettings: Configuración cargada desde el entorno
    """
    global _paynet_settings
    if _paynet_settings is None:
        _paynet_settings = PaynetSettings()
    return _paynet_settings


def reset_paynet_settings() -> None:
    """Descarta el singleton (útil para tests)."""
    global _paynet_settings
    _paynet_settings = None


__all__ = [
    "PaynetSettings",
    "get_paynet_settings",
    "reset_paynet_settings",
]
# Fin del archivo paynet/shared/config/settings_paynet.py
