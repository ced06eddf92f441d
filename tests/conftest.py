# -*- coding: utf-8 -*-
"""
tests/conftest.py

Config global de tests del SDK de Paynet.

- Aísla variables PAYNET_* del shell del dev y limpia el singleton de settings.
- Fixtures de pagos/notificaciones de ejemplo.
- Helper para montar un httpx.AsyncClient sobre httpx.MockTransport.
"""

import os
from typing import Callable

import httpx
import pytest

from paynet.modules.payments.schemas import Payment, PaymentNotificationRequest
from paynet.shared.config.settings_paynet import reset_paynet_settings

SECRET_KEY = "secret"


@pytest.fixture(autouse=True)
def _isolate_paynet_env(monkeypatch):
    """Evita heredar PAYNET_* del entorno y resetea el singleton."""
    for k in list(os.environ.keys()):
        if k.startswith("PAYNET_"):
            monkeypatch.delenv(k, raising=False)
    reset_paynet_settings()
    yield
    reset_paynet_settings()


@pytest.fixture
def secret_key() -> str:
    return SECRET_KEY


@pytest.fixture
def minimal_payment_data() -> dict:
    """Pago mínimo con nombres de campo de la API."""
    return {
        "Currency": 498,
        "Invoice": 12345,
        "MerchantCode": "123456",
        "ExpiryDate": "2024-01-01T00:00:00Z",
        "Customer": {"Code": "CUST001"},
        "Services": [
            {"Name": "S", "Description": "D", "Amount": 1000, "Products": []},
        ],
    }


@pytest.fixture
def minimal_payment(minimal_payment_data) -> Payment:
    return Payment.model_validate(minimal_payment_data)


@pytest.fixture
def full_payment() -> Payment:
    """Pago con cliente completo, MoneyType y productos."""
    return Payment.model_validate(
        {
            "Currency": 498,
            "Invoice": 777,
            "MerchantCode": "M-01",
            "ExpiryDate": "2025-06-30T12:00:00",
            "ExternalDate": "2025-06-29T12:00:00",
            "Customer": {
                "Code": "C-9",
                "NameFirst": "Ion",
                "NameLast": "Popescu",
                "PhoneNumber": "+37360000000",
                "email": "ion@example.md",
                "Country": "MD",
                "City": "Chisinau",
                "Address": "Str. 1",
            },
            "MoneyType": {"Code": "PAYNET"},
            "Services": [
                {
                    "Name": "Order",
                    "Description": "Order #777",
                    "Amount": 2500,
                    "Products": [
                        {
                            "Code": "SKU-1",
                            "Name": "Widget",
                            "Amount": 1500,
                            "Barcode": 4840000000011,
                            "Description": "Blue widget",
                            "GroupId": 7,
                            "GroupName": "Widgets",
                            "LineNo": 1,
                            "UnitPrice": 1500,
                            "UnitProduct": 100,
                        },
                        {
                            "Code": "SKU-2",
                            "Name": "Gadget",
                            "Amount": 1000,
                            "LineNo": 2,
                            "UnitPrice": 500,
                            "UnitProduct": 200,
                        },
                    ],
                }
            ],
        }
    )


@pytest.fixture
def notification_data() -> dict:
    """Notificación PAID sin firma."""
    return {
        "EventID": 9001,
        "EventType": "PAID",
        "EventDate": "2025-06-30T12:05:00",
        "Payment": {
            "ID": 555,
            "ExternalID": 777,
            "Merchant": "M-01",
            "Customer": "C-9",
            "StatusDate": "2025-06-30T12:04:59",
            "Amount": 2500,
        },
    }


@pytest.fixture
def notification(notification_data) -> PaymentNotificationRequest:
    return PaymentNotificationRequest.model_validate(notification_data)


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Crea un httpx.AsyncClient cuyas respuestas las decide ``handler``."""
    def _factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory
