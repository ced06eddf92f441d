# -*- coding: utf-8 -*-
"""
paynet/shared/core/__init__.py

Utilidades de núcleo compartidas por los módulos del SDK.
"""

from .token_cache import EXPIRY_MARGIN_SECONDS, TokenCache, mask_token

__all__ = ["EXPIRY_MARGIN_SECONDS", "TokenCache", "mask_token"]
