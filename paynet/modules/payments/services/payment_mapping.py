# -*- coding: utf-8 -*-
"""
paynet/modules/payments/services/payment_mapping.py

Mapeo del modelo de dominio al body de POST /api/Payments/Send.

- Invoice se sustituye por ExternalID cuando viene informado.
- LinkUrlSucces (typo de la API) se envía con el valor de cualquiera de
  las dos grafías.
- Si un servicio no trae Amount se calcula a partir de sus productos.
- LineNo se completa con la posición (base 1) del producto.

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any

from paynet.modules.payments.schemas import Number, Payment, Product, Service


def product_amount(product: Product) -> Number:
    """
    Monto de una línea de producto.

    Prioridad: TotalAmount -> Amount -> cantidad * UnitPrice, donde la
    cantidad es Quantity, si no UnitProduct / 100, si no 1.
    """
    if product.total_amount is not None:
        return product.total_amount
    if product.amount is not None:
        return product.amount
    if product.quantity is not None:
        quantity = product.quantity
    elif product.unit_product:
        quantity = product.unit_product / 100
    else:
        quantity = 1
    return quantity * (product.unit_price or 0)


def normalize_service(service: Service) -> Service:
    """Devuelve una copia del servicio con Amount y LineNo completos."""
    amount = service.amount or 0
    if service.products and not service.amount:
        amount = sum(product_amount(p) for p in service.products)

    products = [
        p if p.line_no is not None else p.model_copy(update={"line_no": index + 1})
        for index, p in enumerate(service.products)
    ]
    return Service(
        name=service.name,
        description=service.description,
        amount=amount,
        products=products,
    )


def build_create_payment_body(payment: Payment) -> dict[str, Any]:
    """Body JSON (con nombres de la API) para registrar un pago."""
    body = payment.to_api()
    body["Invoice"] = payment.external_invoice
    body["Services"] = [normalize_service(s).to_api() for s in payment.services]
    if payment.link_url_success:
        body["LinkUrlSucces"] = payment.link_url_success
    return body


__all__ = ["product_amount", "normalize_service", "build_create_payment_body"]

# Fin del archivo paynet/modules/payments/services/payment_mapping.py
