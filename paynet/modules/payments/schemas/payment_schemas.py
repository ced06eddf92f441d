# -*- coding: utf-8 -*-
"""
paynet/modules/payments/schemas/payment_schemas.py

Modelos Pydantic del dominio de pagos de Paynet.

Convenciones:
- Atributos Python en snake_case; cada campo lleva como alias el nombre
  exacto que usa la API (PascalCase, y ``email`` en minúsculas).
- Se aceptan ambos nombres al construir (populate_by_name) y se serializa
  siempre con alias (``to_api()``).
- Aquí vive la capa de mapeo de variantes de la API:
    * PaymentID / PaymentId  -> payment_id
    * LinkUrlSuccess / LinkUrlSucces (typo documentado de la API)
      -> link_url_success, serializado como ``LinkUrlSucces``.

Montos en unidades menores (12.34 -> 1234).

Fecha: 2025-12-02
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from paynet.modules.payments.enums import PaymentStatus

# Campos firmados: sin coerción desde texto ("012345" no es 12345)
Number = Union[StrictInt, StrictFloat]


class PaynetModel(BaseModel):
    """Base común: acepta alias o nombre de campo, ignora campos desconocidos."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_api(self) -> dict[str, Any]:
        """Serializa con los nombres de campo de la API, omitiendo nulos."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Customer(PaynetModel):
    """Cliente en el sistema del comercio."""

    code: str = Field(alias="Code", description="Código del cliente en el sistema del comercio")
    name: Optional[str] = Field(default=None, alias="Name")
    name_first: Optional[str] = Field(default=None, alias="NameFirst")
    name_last: Optional[str] = Field(default=None, alias="NameLast")
    phone_number: Optional[str] = Field(default=None, alias="PhoneNumber")
    email: Optional[str] = Field(default=None, alias="email")
    country: Optional[str] = Field(default=None, alias="Country")
    city: Optional[str] = Field(default=None, alias="City")
    address: Optional[str] = Field(default=None, alias="Address")


class Product(PaynetModel):
    """Línea de producto dentro de un servicio."""

    amount: Optional[Number] = Field(default=None, alias="Amount")
    total_amount: Optional[Number] = Field(
        default=None,
        alias="TotalAmount",
        description="Alternativa a Amount",
    )
    barcode: Optional[StrictInt] = Field(default=None, alias="Barcode")
    code: str = Field(alias="Code", description="SKU del producto")
    name: str = Field(alias="Name")
    description: Optional[str] = Field(default=None, alias="Description")
    group_id: Optional[StrictInt] = Field(default=None, alias="GroupId")
    group_name: Optional[str] = Field(default=None, alias="GroupName")
    line_no: Optional[StrictInt] = Field(default=None, alias="LineNo")
    unit_price: Optional[Number] = Field(default=None, alias="UnitPrice")
    unit_product: Optional[Number] = Field(
        default=None,
        alias="UnitProduct",
        description="Cantidad en formato de unidades menores (100 = 1 unidad)",
    )
    quantity: Optional[Number] = Field(
        default=None,
        alias="Quantity",
        description="Alternativa a UnitProduct (cantidad en unidades)",
    )
    qualities_concat: Optional[str] = Field(default=None, alias="QualitiesConcat")
    dimensions: Optional[str] = Field(default=None, alias="Dimensions")
    qualities: Optional[Any] = Field(default=None, alias="Qualities")


class Service(PaynetModel):
    """Servicio del pago; puede agrupar varios productos."""

    name: str = Field(alias="Name")
    description: str = Field(alias="Description")
    amount: Optional[Number] = Field(default=None, alias="Amount")
    products: list[Product] = Field(default_factory=list, alias="Products")


class MoneyType(PaynetModel):
    """Instrumento de pago (p.ej. "PAYNET")."""

    code: str = Field(alias="Code")


class Payment(PaynetModel):
    """
    Modelo de dominio de un pago.

    Los campos de bookkeeping (status, timestamps, payment_id) los rellena
    la API y no participan en la firma.
    """

    payment_id: Optional[int] = Field(
        default=None,
        alias="PaymentID",
        validation_alias=AliasChoices("PaymentID", "PaymentId", "payment_id"),
    )
    invoice: StrictInt = Field(alias="Invoice", description="ID del pago en el sistema del comercio")
    external_id: Optional[int] = Field(
        default=None,
        alias="ExternalID",
        description="Nombre alternativo de Invoice; tiene prioridad al enviar",
    )
    merchant_code: str = Field(alias="MerchantCode")
    sale_area_code: Optional[str] = Field(default=None, alias="SaleAreaCode")
    currency: StrictInt = Field(alias="Currency", description="ISO 4217 numérico (498 = MDL)")
    expiry_date: str = Field(alias="ExpiryDate", description="ISO 8601")
    external_date: Optional[str] = Field(default=None, alias="ExternalDate")
    customer: Customer = Field(alias="Customer")
    payer: Optional[Customer] = Field(default=None, alias="Payer")
    services: list[Service] = Field(default_factory=list, alias="Services")
    money_type: Optional[MoneyType] = Field(default=None, alias="MoneyType")
    link_url_success: Optional[str] = Field(
        default=None,
        alias="LinkUrlSucces",
        validation_alias=AliasChoices("LinkUrlSucces", "LinkUrlSuccess", "link_url_success"),
    )
    link_url_cancel: Optional[str] = Field(default=None, alias="LinkUrlCancel")
    lang: Optional[str] = Field(default=None, alias="Lang")
    status: Optional[PaymentStatus] = Field(default=None, alias="Status")
    registered: Optional[str] = Field(default=None, alias="Registered")
    confirmed: Optional[str] = Field(default=None, alias="Confirmed")
    processed: Optional[str] = Field(default=None, alias="Processed")
    canceled: Optional[str] = Field(default=None, alias="Canceled")
    signature: Optional[str] = Field(default=None, alias="Signature")
    sign_version: Optional[str] = Field(default=None, alias="SignVersion")

    @property
    def external_invoice(self) -> int:
        """ExternalID si viene informado, si no Invoice."""
        return self.external_id or self.invoice


class SearchCriteria(PaynetModel):
    """Criterios de búsqueda de pagos (GET /api/Payments)."""

    invoice: Optional[int] = Field(default=None, alias="Invoice")
    from_: Optional[str] = Field(default=None, alias="from", description="Inicio del rango (ISO 8601)")
    to: Optional[str] = Field(default=None, alias="to", description="Fin del rango (ISO 8601)")

    def to_query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.invoice is not None:
            params["Invoice"] = str(self.invoice)
        if self.from_:
            params["from"] = self.from_
        if self.to:
            params["to"] = self.to
        return params


__all__ = [
    "Number",
    "PaynetModel",
    "Customer",
    "Product",
    "Service",
    "MoneyType",
    "Payment",
    "SearchCriteria",
]

# Fin del archivo paynet/modules/payments/schemas/payment_schemas.py
