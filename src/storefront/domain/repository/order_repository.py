"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderLineItem


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert the order header and assign its ID.

        Line items are written separately with ``add_line_item`` so each
        one can be paired with its stock decrement.
        """

    @abstractmethod
    def add_line_item(self, order: Order, item: OrderLineItem) -> None:
        """Insert one line item belonging to an already-added order."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Return an order by its public order number, or None."""

    @abstractmethod
    def list_by_email(self, email: str) -> list[Order]:
        """Return every order placed with *email*, newest first."""
