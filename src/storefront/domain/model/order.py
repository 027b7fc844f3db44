"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.  It carries a
*copy* of the customer's contact details taken when it was placed, so
later edits to the Customer never rewrite order history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import EmptyCartError, ValidationError
from storefront.domain.model.customer import ContactDetails
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPING = "shipping"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    QR_CODE = "qr_code"
    BANK_TRANSFER = "bank_transfer"
    COD = "cod"


class ShippingMethod(Enum):
    STANDARD = "standard"
    EXPRESS = "express"


@dataclass
class OrderLineItem:
    """Captures the price of a product at order-placement time.

    ``unit_price`` is never updated afterwards, even when the catalog
    price changes.
    """

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at placement time
    id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    order_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    shipping_address: str
    items: list[OrderLineItem]
    payment_method: PaymentMethod = PaymentMethod.QR_CODE
    shipping_method: ShippingMethod = ShippingMethod.STANDARD
    notes: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_number: str,
        contact: ContactDetails,
        items: list[OrderLineItem],
        payment_method: PaymentMethod = PaymentMethod.QR_CODE,
        shipping_method: ShippingMethod = ShippingMethod.STANDARD,
        notes: str | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not order_number:
            raise ValidationError("Order number is required")
        if not items:
            raise EmptyCartError()

        return Order(
            id=None,
            order_number=order_number,
            customer_name=contact.name,
            customer_email=contact.email,
            customer_phone=contact.phone,
            shipping_address=contact.address,
            items=list(items),
            payment_method=payment_method,
            shipping_method=shipping_method,
            notes=notes or None,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
