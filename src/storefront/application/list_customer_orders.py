"""Application service: List a customer's orders (query).

The email must already be normalized; see ``schemas.parse_lookup_email``.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.order_views import load_order_views
from storefront.domain.repository.unit_of_work import Store


class ListCustomerOrdersHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, email: str) -> list[OrderDTO]:
        with self._store.read() as view:
            orders = view.orders.list_by_email(email)
            return load_order_views(view, orders)
