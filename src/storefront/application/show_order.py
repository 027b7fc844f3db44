"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.order_views import load_order_views
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import Store


class ShowOrderHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, order_number: str) -> OrderDTO:
        with self._store.read() as view:
            order = view.orders.get_by_order_number(order_number)
            if order is None:
                raise EntityNotFoundError(f"Order {order_number} not found")
            return load_order_views(view, [order])[0]
