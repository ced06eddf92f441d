# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/forms/html_form.py

Render del formulario HTML auto-enviable hacia el portal de Paynet.

Salida:
    <form id="paynet-form" method="POST" action="...">
      <input type="hidden" name="..." value="...">
    </form>

Fecha: 2025-12-03
"""

from __future__ import annotations

from typing import Any, Mapping

from .form_fields import flatten_form_data

FORM_ID = "paynet-form"

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape_html(text: Any) -> str:
    """Escapa los caracteres especiales de HTML (incluye comillas simples)."""
    return str(text).translate(_HTML_ESCAPES)


def render_hidden_input(name: str, value: str) -> str:
    return f'  <input type="hidden" name="{escape_html(name)}" value="{escape_html(value)}">'


def build_form(action: str, data: Mapping[str, Any]) -> str:
    """
    Construye el HTML del formulario.

    Args:
        action: URL destino del POST
        data: Campos de nivel superior; registros y arreglos se aplanan

    Returns:
        HTML del formulario (sin <script> de auto-submit)
    """
    lines = [f'<form id="{FORM_ID}" method="POST" action="{escape_html(action)}">']
    lines.extend(render_hidden_input(name, value) for name, value in flatten_form_data(data))
    lines.append("</form>")
    return "\n".join(lines)


__all__ = ["FORM_ID", "escape_html", "render_hidden_input", "build_form"]

# Fin del archivo paynet/modules/payments/facades/forms/html_form.py
