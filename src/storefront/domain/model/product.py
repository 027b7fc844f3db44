"""Product aggregate.

Products live independently of orders.  The catalog owns them; order
placement only ever reads them and decrements their stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import (
    InsufficientStockError,
    ProductUnavailableError,
    ValidationError,
)
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``stock_quantity`` never goes below zero as an effect of order
    placement; the store backs this with a conditional decrement.
    """

    id: int | None
    name: str
    price: Money
    stock_quantity: int = 0
    is_active: bool = True
    image_urls: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.stock_quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.stock_quantity}"
            )

    @property
    def primary_image(self) -> str | None:
        return self.image_urls[0] if self.image_urls else None

    def ensure_can_supply(self, quantity: int) -> None:
        """Raise if this product cannot be sold in the requested quantity."""
        if not self.is_active:
            raise ProductUnavailableError(self.name)
        if self.stock_quantity < quantity:
            raise InsufficientStockError(self.name, self.stock_quantity)
