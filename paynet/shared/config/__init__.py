# -*- coding: utf-8 -*-
"""
paynet/shared/config/__init__.py

Punto único de acceso a la configuración del SDK:
    from paynet.shared.config import get_paynet_settings
"""

from __future__ import annotations

from .settings_paynet import PaynetSettings, get_paynet_settings, reset_paynet_settings
from .logging_config import build_logging_config, setup_logging, setup_logging_from_settings

__all__ = [
    "PaynetSettings",
    "get_paynet_settings",
    "reset_paynet_settings",
    "build_logging_config",
    "setup_logging",
    "setup_logging_from_settings",
]
