"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (SQL, in-memory) live in
the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_ids(self, product_ids: list[int]) -> list[Product]:
        """Return every product whose ID is in *product_ids*, in one lookup.

        Unknown IDs are simply absent from the result.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Atomically take *quantity* units off the product's stock.

        The update happens at the row (``stock = stock - quantity``) and
        only when enough stock remains.  Returns False when no row was
        updated, i.e. the product is gone or would go below zero.
        """
