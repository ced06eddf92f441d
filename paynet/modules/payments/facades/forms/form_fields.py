# -*- coding: utf-8 -*-
"""
paynet/modules/payments/facades/forms/form_fields.py

Aplanado de valores en árbol a campos de formulario HTML.

El valor se recorre recursivamente como un árbol de tres tipos de nodo:
- registro (mapping o modelo Pydantic)  -> ``prefijo.clave``
- arreglo  (list / tuple)               -> ``prefijo[i]``
- escalar                               -> un campo

Así ``Services[0].Products[1].Code`` se obtiene a cualquier profundidad.
Los escalares None se omiten; el resto se renderiza con canonical_scalar.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from paynet.modules.payments.schemas import PaynetModel
from paynet.modules.payments.services.signatures import canonical_scalar


def _join(prefix: str, key: Any) -> str:
    return f"{prefix}.{key}" if prefix else str(key)


def iter_form_fields(name: str, value: Any) -> Iterator[tuple[str, str]]:
    """Genera pares (nombre_de_campo, valor_texto) para un nodo del árbol."""
    if value is None:
        return
    if isinstance(value, PaynetModel):
        value = value.to_api()

    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from iter_form_fields(_join(name, key), item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from iter_form_fields(f"{name}[{index}]", item)
    else:
        yield name, canonical_scalar(value)


def flatten_form_data(data: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Aplana un mapping de nivel superior preservando el orden de inserción."""
    fields: list[tuple[str, str]] = []
    for key, value in data.items():
        fields.extend(iter_form_fields(key, value))
    return fields


__all__ = ["iter_form_fields", "flatten_form_data"]
