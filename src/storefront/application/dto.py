"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP surfaces and the application
layer without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.customer import ContactDetails
from storefront.domain.model.order import PaymentMethod, ShippingMethod


@dataclass(frozen=True)
class CartLine:
    """Input: one cart entry (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class PlaceOrderCommand:
    """Input: everything needed to place an order."""

    contact: ContactDetails
    items: list[CartLine]
    payment_method: PaymentMethod = PaymentMethod.QR_CODE
    shipping_method: ShippingMethod = ShippingMethod.STANDARD
    notes: str | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item.

    ``product_name`` and ``product_image`` come from the catalog at read
    time and are None when that lookup was not possible.
    """

    id: int | None
    product_id: int
    quantity: int
    price_at_purchase: Decimal
    line_total: Decimal
    product_name: str | None = None
    product_image: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order."""

    id: int
    order_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    shipping_address: str
    total_amount: Decimal
    payment_method: str
    shipping_method: str
    notes: str | None
    status: str
    created_at: datetime
    items: list[OrderLineItemDTO] = field(default_factory=list)


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry."""

    id: int
    name: str
    price: Decimal
    stock_quantity: int
    is_active: bool
    primary_image: str | None
