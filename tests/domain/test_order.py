"""Unit tests for the Order aggregate."""

import pytest

from storefront.domain.exceptions import EmptyCartError, ValidationError
from storefront.domain.model.customer import ContactDetails
from storefront.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentMethod,
    ShippingMethod,
)
from storefront.domain.model.value_objects import Money, Quantity


def _contact() -> ContactDetails:
    return ContactDetails(
        name="Tran Thi Binh",
        email="binh.tran@gmail.com",
        phone="0912345678",
        address="45 Nguyen Hue, District 1",
    )


def _item(product_id: int = 1, qty: int = 1, price: str = "1000000") -> OrderLineItem:
    return OrderLineItem(product_id=product_id, quantity=Quantity(qty), unit_price=Money.of(price))


class TestOrderCreate:

    def test_new_order_is_pending(self):
        order = Order.create("RP123456001", _contact(), [_item()])
        assert order.id is None
        assert order.status == OrderStatus.PENDING

    def test_defaults_for_payment_and_shipping(self):
        order = Order.create("RP123456001", _contact(), [_item()])
        assert order.payment_method == PaymentMethod.QR_CODE
        assert order.shipping_method == ShippingMethod.STANDARD

    def test_contact_snapshot_is_copied(self):
        contact = _contact()
        order = Order.create("RP123456001", contact, [_item()])
        assert order.customer_name == contact.name
        assert order.customer_email == contact.email
        assert order.customer_phone == contact.phone
        assert order.shipping_address == contact.address

    def test_blank_notes_stored_as_none(self):
        order = Order.create("RP123456001", _contact(), [_item()], notes="")
        assert order.notes is None

    def test_empty_items_rejected(self):
        with pytest.raises(EmptyCartError):
            Order.create("RP123456001", _contact(), [])

    def test_missing_order_number_rejected(self):
        with pytest.raises(ValidationError, match="Order number is required"):
            Order.create("", _contact(), [_item()])


class TestOrderTotal:

    def test_total_sums_line_totals(self):
        order = Order.create(
            "RP123456001",
            _contact(),
            [_item(1, 2, "1000000"), _item(2, 3, "450000")],
        )
        assert order.total == Money.of("3350000")

    def test_line_total(self):
        assert _item(qty=4, price="250000").line_total == Money.of("1000000")
