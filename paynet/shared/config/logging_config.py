# -*- coding: utf-8 -*-
"""
paynet/shared/config/logging_config.py

Configuración opcional de logging para integradores del SDK.

El SDK solo emite logs vía ``logging.getLogger(__name__)`` bajo el logger
``paynet``. ``setup_logging`` es un atajo para scripts y servicios sin
config propia, con dos alcances:

- scope="root":   configura el logger raíz (la app entera usa el formato)
- scope="paynet": solo el árbol ``paynet``, sin tocar el raíz ni los
                  handlers que ya tenga la aplicación

Formatos: plain (desarrollo) y json (producción, python-json-logger).

Fecha: 2025-12-02
"""

import importlib
import logging.config
from typing import Any, Literal, Optional

from .settings_paynet import PaynetSettings

SDK_LOGGER = "paynet"
HTTP_LOGGERS = ("httpx", "httpcore")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["plain", "pretty", "json"]
LogScope = Literal["root", "paynet"]


def _json_formatter_class() -> str:
    # python-json-logger >= 3.1 movió el formatter a pythonjsonlogger.json
    try:
        importlib.import_module("pythonjsonlogger.json")
        return "pythonjsonlogger.json.JsonFormatter"
    except ImportError:  # pragma: no cover
        return "pythonjsonlogger.jsonlogger.JsonFormatter"


def _formatter(fmt: LogFormat) -> dict[str, Any]:
    if fmt == "json":
        return {
            "()": _json_formatter_class(),
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
    # pretty == plain
    return {"format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s"}


def build_logging_config(
    level: LogLevel = "INFO",
    fmt: LogFormat = "plain",
    httpx_level: str = "WARNING",
    scope: LogScope = "root",
) -> dict[str, Any]:
    """Diccionario para ``logging.config.dictConfig``."""
    level = level.upper()
    handler = {
        "class": "logging.StreamHandler",
        "formatter": "paynet",
        "stream": "ext://sys.stdout",
    }
    loggers: dict[str, Any] = {
        name: {"level": httpx_level.upper()} for name in HTTP_LOGGERS
    }

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"paynet": _formatter(fmt)},
        "handlers": {"paynet_console": handler},
        "loggers": loggers,
    }

    if scope == "root":
        loggers[SDK_LOGGER] = {"level": level, "handlers": [], "propagate": True}
        config["root"] = {"handlers": ["paynet_console"], "level": level}
    else:
        loggers[SDK_LOGGER] = {
            "level": level,
            "handlers": ["paynet_console"],
            "propagate": False,
        }
    return config


def setup_logging(
    level: LogLevel = "INFO",
    fmt: LogFormat = "plain",
    httpx_level: str = "WARNING",
    scope: LogScope = "root",
) -> None:
    """
    Configura el sistema de logging.

    Args:
        level: Nivel del logger ``paynet`` (y del raíz si scope="root")
        fmt: Formato de salida (plain, pretty, json)
        httpx_level: Nivel de los loggers de httpx/httpcore (ruidosos en DEBUG)
        scope: "root" o "paynet"

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("DEBUG", "json", scope="paynet")
    """
    logging.config.dictConfig(build_logging_config(level, fmt, httpx_level, scope))


def setup_logging_from_settings(
    settings: Optional[PaynetSettings] = None,
    scope: LogScope = "root",
) -> None:
    """Aplica ``log_level``/``log_format`` de PaynetSettings (DEBUG si debug=True)."""
    if settings is None:
        from .settings_paynet import get_paynet_settings
        settings = get_paynet_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    setup_logging(level=level, fmt=settings.log_format, scope=scope)


__all__ = [
    "SDK_LOGGER",
    "build_logging_config",
    "setup_logging",
    "setup_logging_from_settings",
]
# Fin del archivo paynet/shared/config/logging_config.py
