"""Tests for request validation and normalization."""

from datetime import date

import pytest

from storefront.application.schemas import parse_lookup_email, parse_place_order
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Gender
from storefront.domain.model.order import PaymentMethod, ShippingMethod


def _payload(**overrides) -> dict:
    payload = {
        "customer_name": "Le Hoang Cuong",
        "customer_email": "Cuong.Le@Gmail.com",
        "customer_phone": "0987654321",
        "shipping_address": "7 Tran Phu, Hai Chau, Da Nang",
        "items": [{"product_id": 1, "quantity": 2}],
    }
    payload.update(overrides)
    return payload


def _fields(exc: ValidationError) -> set[str]:
    return {e["field"] for e in exc.errors}


class TestParsePlaceOrder:

    def test_minimal_payload_uses_defaults(self):
        command = parse_place_order(_payload())

        assert command.contact.email == "cuong.le@gmail.com"
        assert command.payment_method == PaymentMethod.QR_CODE
        assert command.shipping_method == ShippingMethod.STANDARD
        assert command.notes is None
        assert [(line.product_id, line.quantity) for line in command.items] == [(1, 2)]

    def test_optional_profile_fields(self):
        command = parse_place_order(
            _payload(
                city="Da Nang",
                country="Vietnam",
                date_of_birth="1992-04-30",
                gender="male",
                payment_method="cod",
                shipping_method="express",
                notes="Call before delivery",
            )
        )
        assert command.contact.city == "Da Nang"
        assert command.contact.date_of_birth == date(1992, 4, 30)
        assert command.contact.gender == Gender.MALE
        assert command.payment_method == PaymentMethod.COD
        assert command.shipping_method == ShippingMethod.EXPRESS
        assert command.notes == "Call before delivery"

    def test_blank_optional_fields_become_missing(self):
        command = parse_place_order(
            _payload(city="  ", gender="", date_of_birth="", payment_method="", notes="")
        )
        assert command.contact.city is None
        assert command.contact.gender is None
        assert command.contact.date_of_birth is None
        assert command.payment_method == PaymentMethod.QR_CODE
        assert command.notes is None

    def test_whitespace_is_stripped(self):
        command = parse_place_order(_payload(customer_name="  Le Hoang Cuong  "))
        assert command.contact.name == "Le Hoang Cuong"

    def test_every_invalid_field_is_reported(self):
        with pytest.raises(ValidationError) as info:
            parse_place_order(
                _payload(customer_email="not-an-email", customer_phone="123", items=[])
            )
        assert {"customer_email", "customer_phone", "items"} <= _fields(info.value)

    def test_missing_required_field(self):
        payload = _payload()
        del payload["shipping_address"]
        with pytest.raises(ValidationError) as info:
            parse_place_order(payload)
        assert "shipping_address" in _fields(info.value)

    def test_short_address_rejected(self):
        with pytest.raises(ValidationError) as info:
            parse_place_order(_payload(shipping_address="Hanoi"))
        assert "shipping_address" in _fields(info.value)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError) as info:
            parse_place_order(_payload(items=[{"product_id": 1, "quantity": quantity}]))
        assert "items.0.quantity" in _fields(info.value)

    @pytest.mark.parametrize("field", ["product_id", "quantity"])
    def test_value_beyond_sql_integer_rejected(self, field):
        item = {"product_id": 1, "quantity": 1}
        item[field] = 2**63
        with pytest.raises(ValidationError) as info:
            parse_place_order(_payload(items=[item]))
        assert f"items.0.{field}" in _fields(info.value)

    def test_largest_sql_integer_id_accepted(self):
        command = parse_place_order(_payload(items=[{"product_id": 2**63 - 1, "quantity": 1}]))
        assert command.items[0].product_id == 2**63 - 1

    def test_unknown_payment_method_rejected(self):
        with pytest.raises(ValidationError) as info:
            parse_place_order(_payload(payment_method="crypto"))
        assert "payment_method" in _fields(info.value)

    def test_missing_body_rejected(self):
        with pytest.raises(ValidationError, match="Invalid order request"):
            parse_place_order(None)


class TestParseLookupEmail:

    def test_normalizes_case_and_whitespace(self):
        assert parse_lookup_email("  Cuong.Le@Gmail.com ") == "cuong.le@gmail.com"

    @pytest.mark.parametrize("email", [None, "", "cuong"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError, match="Valid email is required"):
            parse_lookup_email(email)
