"""Request schemas for the order endpoints.

Pydantic models validate and normalize raw payloads (HTTP JSON bodies,
CLI options) before anything touches the store.  Emails are lower-cased
here; the rest of the application compares them as given.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic import ValidationError as SchemaError

from storefront.application.dto import CartLine, PlaceOrderCommand
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import ContactDetails, Gender
from storefront.domain.model.order import PaymentMethod, ShippingMethod


# largest value an SQLite INTEGER column can bind
MAX_SQL_INTEGER = 2**63 - 1


class CartItemRequest(BaseModel):
    product_id: int = Field(..., ge=1, le=MAX_SQL_INTEGER)
    quantity: int = Field(..., ge=1, le=MAX_SQL_INTEGER)


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    customer_name: str = Field(..., min_length=2, max_length=255)
    customer_email: EmailStr
    customer_phone: str = Field(..., min_length=10, max_length=20)
    shipping_address: str = Field(..., min_length=10)
    items: list[CartItemRequest] = Field(..., min_length=1)
    payment_method: PaymentMethod = PaymentMethod.QR_CODE
    shipping_method: ShippingMethod = ShippingMethod.STANDARD
    notes: str | None = None

    # optional customer profile fields
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    date_of_birth: date | None = None
    gender: Gender | None = None

    @field_validator("customer_email")
    @classmethod
    def _lower_email(cls, value: str) -> str:
        return value.lower()

    @field_validator(
        "payment_method", "shipping_method", "notes", "city", "country",
        "date_of_birth", "gender",
        mode="before",
    )
    @classmethod
    def _blank_is_missing(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value

    def to_command(self) -> PlaceOrderCommand:
        contact = ContactDetails(
            name=self.customer_name,
            email=self.customer_email,
            phone=self.customer_phone,
            address=self.shipping_address,
            city=self.city,
            country=self.country,
            date_of_birth=self.date_of_birth,
            gender=self.gender,
        )
        return PlaceOrderCommand(
            contact=contact,
            items=[CartLine(i.product_id, i.quantity) for i in self.items],
            payment_method=self.payment_method,
            shipping_method=self.shipping_method,
            notes=self.notes,
        )


class OrderLookupRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr

    @field_validator("email")
    @classmethod
    def _lower_email(cls, value: str) -> str:
        return value.lower()


def parse_place_order(payload: Mapping[str, Any] | None) -> PlaceOrderCommand:
    """Validate a raw order payload and turn it into a command.

    Raises ``ValidationError`` listing every offending field.
    """
    try:
        request = PlaceOrderRequest.model_validate(payload)
    except SchemaError as exc:
        raise ValidationError("Invalid order request", errors=_field_errors(exc)) from exc
    return request.to_command()


def parse_lookup_email(email: str | None) -> str:
    try:
        return OrderLookupRequest(email=email).email
    except SchemaError as exc:
        raise ValidationError("Valid email is required", errors=_field_errors(exc)) from exc


def _field_errors(exc: SchemaError) -> list[dict]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
