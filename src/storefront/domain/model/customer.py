"""Customer aggregate and loyalty tiers.

A customer is keyed by email and is created implicitly by the first
order placed with that email.  Every later order refreshes the contact
details and accumulates the lifetime totals that drive the VIP tier.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class VipStatus(Enum):
    STANDARD = "standard"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @staticmethod
    def for_lifetime_spend(total_spent: Money) -> VipStatus:
        """Return the tier for a cumulative spend.

        Thresholds are checked from the top down.  Diamond needs strictly
        more than its threshold; every other tier includes its boundary.
        """
        if total_spent > DIAMOND_THRESHOLD:
            return VipStatus.DIAMOND
        if total_spent >= PLATINUM_THRESHOLD:
            return VipStatus.PLATINUM
        if total_spent >= GOLD_THRESHOLD:
            return VipStatus.GOLD
        if total_spent >= SILVER_THRESHOLD:
            return VipStatus.SILVER
        return VipStatus.STANDARD


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Tier thresholds (VND)
# ---------------------------------------------------------------------------
SILVER_THRESHOLD = Money(Decimal("10000000"))
GOLD_THRESHOLD = Money(Decimal("25000000"))
PLATINUM_THRESHOLD = Money(Decimal("50000000"))
DIAMOND_THRESHOLD = Money(Decimal("70000000"))


@dataclass(frozen=True)
class ContactDetails:
    """Who placed the order and where it ships.

    ``name``, ``email``, ``phone`` and ``address`` are required; the rest
    are optional and may be ``None``.
    """

    name: str
    email: str
    phone: str
    address: str
    city: str | None = None
    country: str | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None

    def __post_init__(self) -> None:
        for label, value in (
            ("Customer name", self.name),
            ("Customer email", self.email),
            ("Customer phone", self.phone),
            ("Shipping address", self.address),
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")


@dataclass
class Customer:
    """Aggregate root for a shopper, identified by email.

    Use ``Customer.register()`` for a first order and ``record_order()``
    for every order after that.  Plain ``__init__`` is for repositories
    reconstituting stored rows.
    """

    id: int | None
    email: str
    name: str
    phone: str
    address: str
    city: str | None = None
    country: str | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None
    total_orders: int = 0
    total_spent: Money = Money.zero()
    vip_status: VipStatus = VipStatus.STANDARD
    updated_at: datetime | None = None

    @staticmethod
    def register(
        contact: ContactDetails,
        order_total: Money,
        default_country: str | None = None,
    ) -> Customer:
        """Create the customer record for a first order."""
        return Customer(
            id=None,
            email=contact.email,
            name=contact.name,
            phone=contact.phone,
            address=contact.address,
            city=_blank_to_none(contact.city),
            country=_blank_to_none(contact.country) or default_country,
            date_of_birth=contact.date_of_birth,
            gender=contact.gender,
            total_orders=1,
            total_spent=order_total,
            vip_status=VipStatus.for_lifetime_spend(order_total),
            updated_at=datetime.now(timezone.utc),
        )

    def record_order(self, contact: ContactDetails, order_total: Money) -> None:
        """Fold another order into this customer.

        Required contact fields are overwritten with the latest submission.
        Optional ones only change when the new value is non-empty.
        """
        if contact.email != self.email:
            raise ValidationError(
                f"Order for {contact.email} cannot be recorded on {self.email}"
            )
        self.name = contact.name
        self.phone = contact.phone
        self.address = contact.address
        self.city = _blank_to_none(contact.city) or self.city
        self.country = _blank_to_none(contact.country) or self.country
        self.date_of_birth = contact.date_of_birth or self.date_of_birth
        self.gender = contact.gender or self.gender

        self.total_orders += 1
        self.total_spent = self.total_spent + order_total
        self.vip_status = VipStatus.for_lifetime_spend(self.total_spent)
        self.updated_at = datetime.now(timezone.utc)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value
