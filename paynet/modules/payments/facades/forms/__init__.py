# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/forms/__init__.py

Formularios HTML de redirección (GetEcom / SetEcom).
"""

from .ecom_forms import (
    DEFAULT_LANG,
    DEFAULT_SIGN_VERSION,
    build_get_ecom_form,
    build_set_ecom_form,
)
from .form_fields import flatten_form_data, iter_form_fields
from .html_form import FORM_ID, build_form, escape_html

__all__ = [
    "DEFAULT_LANG",
    "DEFAULT_SIGN_VERSION",
    "build_get_ecom_form",
    "build_set_ecom_form",
    "flatten_form_data",
    "iter_form_fields",
    "FORM_ID",
    "build_form",
    "escape_html",
]
