# -*- coding: utf-8 -*-
"""
tests/modules/payments/services/signatures/test_canonical.py

Tests de la serialización canónica de pagos y notificaciones.

Valida:
1. Orden fijo de campos (pago y notificación)
2. Campos ausentes -> "" en su posición
3. Aplanado de servicios/productos en orden de lista
4. Render de escalares (números sin .0, booleanos, None)
5. Input estructuralmente mal formado -> PaynetValidationError
"""

from decimal import Decimal

import pytest

from paynet.modules.payments.enums import PaymentStatus
from paynet.modules.payments.errors import PaynetValidationError
from paynet.modules.payments.schemas import PaymentNotificationRequest
from paynet.modules.payments.services.signatures.canonical import (
    canonical_notification_string,
    canonical_payment_string,
    canonical_scalar,
    notification_signature_values,
    payment_signature_values,
)


class TestCanonicalScalar:
    """Render de escalares."""

    def test_none_is_empty_string(self):
        assert canonical_scalar(None) == ""

    def test_int_is_base10(self):
        assert canonical_scalar(498) == "498"
        assert canonical_scalar(-5) == "-5"

    def test_integral_float_has_no_decimal_part(self):
        """1000.0 se renderiza como 1000 (igual que la API)."""
        assert canonical_scalar(1000.0) == "1000"

    def test_fractional_float(self):
        assert canonical_scalar(10.5) == "10.5"
        assert canonical_scalar(0.1) == "0.1"

    def test_float_exponent_notation_matches_api(self):
        """Notación exponencial solo fuera de [1e-6, 1e21), con formato 1e-7 / 1e+21."""
        assert canonical_scalar(1e-7) == "1e-7"
        assert canonical_scalar(1.5e-7) == "1.5e-7"
        assert canonical_scalar(0.000001) == "0.000001"
        assert canonical_scalar(1e20) == "100000000000000000000"
        assert canonical_scalar(1e21) == "1e+21"
        assert canonical_scalar(1.23e22) == "1.23e+22"
        assert canonical_scalar(-2.5e-8) == "-2.5e-8"

    def test_float_zero_and_special_values(self):
        assert canonical_scalar(0.0) == "0"
        assert canonical_scalar(-0.0) == "0"
        assert canonical_scalar(float("nan")) == "NaN"
        assert canonical_scalar(float("-inf")) == "-Infinity"

    def test_decimal(self):
        assert canonical_scalar(Decimal("150.00")) == "150"
        assert canonical_scalar(Decimal("12.50")) == "12.5"

    def test_bool_is_lowercase_literal(self):
        assert canonical_scalar(True) == "true"
        assert canonical_scalar(False) == "false"

    def test_string_unchanged(self):
        assert canonical_scalar(" a b ") == " a b "
        assert canonical_scalar("") == ""

    def test_enum_uses_value(self):
        assert canonical_scalar(PaymentStatus.PAID) == "4"


class TestPaymentSchedule:
    """Orden y contenido de la cadena canónica de un pago."""

    def test_minimal_payment_exact_string(self, minimal_payment):
        """Escenario de referencia: campos omitidos aportan "" en su lugar."""
        assert (
            canonical_payment_string(minimal_payment)
            == "498CUST0012024-01-01T00:00:00Z123451234561000DS"
        )

    def test_full_payment_values_in_schedule_order(self, full_payment):
        assert payment_signature_values(full_payment) == [
            498,
            "Str. 1",
            "Chisinau",
            "C-9",
            "MD",
            "ion@example.md",
            "Ion",
            "Popescu",
            "+37360000000",
            "2025-06-30T12:00:00",
            777,
            "M-01",
            "PAYNET",
            # Servicio
            2500,
            "Order #777",
            "Order",
            # Producto 1
            1500,
            4840000000011,
            "SKU-1",
            "Blue widget",
            7,
            "Widgets",
            1,
            "Widget",
            1500,
            100,
            # Producto 2 (opcionales ausentes)
            1000,
            None,
            "SKU-2",
            None,
            None,
            None,
            2,
            "Gadget",
            500,
            200,
        ]

    def test_full_payment_string_concatenates_without_separator(self, full_payment):
        expected = (
            "498Str. 1ChisinauC-9MDion@example.mdIonPopescu+37360000000"
            "2025-06-30T12:00:00777M-01PAYNET"
            "2500Order #777Order"
            "15004840000000011SKU-1Blue widget7Widgets1Widget1500100"
            "1000SKU-22Gadget500200"
        )
        assert canonical_payment_string(full_payment) == expected

    def test_schedule_is_not_alphabetical_or_model_order(self, full_payment):
        """Currency va primero aunque el modelo declare antes otros campos."""
        values = payment_signature_values(full_payment)
        assert values[0] == full_payment.currency
        assert values[10] == full_payment.invoice

    def test_signature_uses_invoice_not_external_id(self, minimal_payment_data):
        data = dict(minimal_payment_data, ExternalID=999)
        assert "12345" in canonical_payment_string(data)
        assert "999" not in canonical_payment_string(data)

    def test_missing_email_equals_empty_email(self, minimal_payment_data):
        with_empty = dict(minimal_payment_data, Customer={"Code": "CUST001", "email": ""})
        assert canonical_payment_string(minimal_payment_data) == canonical_payment_string(with_empty)

    def test_missing_money_type_contributes_empty_slot(self, minimal_payment_data):
        values = payment_signature_values(minimal_payment_data)
        assert values[12] is None
        assert len(values) == 13 + 3

    def test_services_flattened_in_list_order(self, minimal_payment_data):
        data = dict(
            minimal_payment_data,
            Services=[
                {"Name": "A", "Description": "first", "Amount": 1},
                {"Name": "B", "Description": "second", "Amount": 2},
            ],
        )
        assert payment_signature_values(data)[13:] == [1, "first", "A", 2, "second", "B"]

    def test_swapping_services_changes_string(self, minimal_payment_data):
        a = {"Name": "A", "Description": "x", "Amount": 1}
        b = {"Name": "B", "Description": "y", "Amount": 2}
        first = canonical_payment_string(dict(minimal_payment_data, Services=[a, b]))
        second = canonical_payment_string(dict(minimal_payment_data, Services=[b, a]))
        assert first != second

    def test_no_services_only_header_fields(self, minimal_payment_data):
        data = dict(minimal_payment_data, Services=[])
        assert canonical_payment_string(data) == "498CUST0012024-01-01T00:00:00Z12345123456"

    def test_accepts_mapping_or_model(self, minimal_payment_data, minimal_payment):
        assert canonical_payment_string(minimal_payment_data) == canonical_payment_string(minimal_payment)

    def test_float_amount_rendered_as_integer(self, minimal_payment_data):
        data = dict(
            minimal_payment_data,
            Services=[{"Name": "S", "Description": "D", "Amount": 1000.0}],
        )
        assert canonical_payment_string(data).endswith("1000DS")

    def test_does_not_mutate_input(self, full_payment):
        before = full_payment.model_dump()
        canonical_payment_string(full_payment)
        assert full_payment.model_dump() == before

    def test_deterministic(self, full_payment):
        assert canonical_payment_string(full_payment) == canonical_payment_string(full_payment)


class TestPaymentMalformed:
    """Sub-registros requeridos ausentes -> error, no defaults silenciosos."""

    def test_mapping_without_customer_raises(self, minimal_payment_data):
        data = dict(minimal_payment_data)
        del data["Customer"]
        with pytest.raises(PaynetValidationError):
            canonical_payment_string(data)

    def test_model_without_customer_raises(self, minimal_payment):
        broken = minimal_payment.model_copy(update={"customer": None})
        with pytest.raises(PaynetValidationError):
            payment_signature_values(broken)

    def test_wrong_type_raises(self):
        with pytest.raises(PaynetValidationError):
            canonical_payment_string(["not", "a", "payment"])

    @pytest.mark.parametrize("field, value", [("Invoice", "012345"), ("Currency", "498")])
    def test_numeric_text_in_signed_int_field_is_rejected(self, minimal_payment_data, field, value):
        """No se firma un valor distinto del recibido ("012345" != 12345)."""
        with pytest.raises(PaynetValidationError):
            canonical_payment_string(dict(minimal_payment_data, **{field: value}))

    def test_numeric_text_in_amount_is_rejected(self, minimal_payment_data):
        data = dict(
            minimal_payment_data,
            Services=[{"Name": "S", "Description": "D", "Amount": "1000.00"}],
        )
        with pytest.raises(PaynetValidationError):
            canonical_payment_string(data)


class TestNotificationSchedule:
    """Orden literal de la notificación."""

    def test_values_in_literal_order(self, notification):
        assert notification_signature_values(notification) == [
            "2025-06-30T12:05:00",
            9001,
            "PAID",
            2500,
            "C-9",
            777,
            555,
            "M-01",
            "2025-06-30T12:04:59",
        ]

    def test_string(self, notification):
        assert (
            canonical_notification_string(notification)
            == "2025-06-30T12:05:009001PAID2500C-9777555M-012025-06-30T12:04:59"
        )

    def test_missing_scalar_fields_are_empty(self):
        n = PaymentNotificationRequest.model_validate({"EventID": 1, "Payment": {"ID": 2}})
        assert canonical_notification_string(n) == "1" + "2"

    def test_signature_field_is_not_part_of_string(self, notification_data):
        signed = dict(notification_data, Signature="abc", SignVersion="v05")
        assert canonical_notification_string(signed) == canonical_notification_string(notification_data)

    def test_string_ids_are_preserved_verbatim(self, notification_data):
        data = dict(notification_data, Payment=dict(notification_data["Payment"], ExternalID="0777"))
        assert "0777" in canonical_notification_string(data)

    def test_missing_payment_record_raises(self, notification_data):
        data = dict(notification_data)
        del data["Payment"]
        with pytest.raises(PaynetValidationError):
            canonical_notification_string(data)

    def test_numeric_customer_and_merchant_are_signed_as_received(self, notification_data):
        data = dict(
            notification_data,
            Payment=dict(notification_data["Payment"], Customer=12345, Merchant=67),
        )
        assert canonical_notification_string(data) == (
            "2025-06-30T12:05:009001PAID250012345777555" + "672025-06-30T12:04:59"
        )

    def test_string_amount_keeps_its_text(self, notification_data):
        data = dict(notification_data, Payment=dict(notification_data["Payment"], Amount="100.50"))
        values = notification_signature_values(data)
        assert values[3] == "100.50"
        assert "PAID100.50C-9" in canonical_notification_string(data)

    def test_float_amount(self, notification_data):
        data = dict(notification_data, Payment=dict(notification_data["Payment"], Amount=100.5))
        assert "PAID100.5C-9" in canonical_notification_string(data)
