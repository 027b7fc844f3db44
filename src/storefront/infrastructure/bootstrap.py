"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.add_product import AddProductHandler
from storefront.application.list_customer_orders import ListCustomerOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.config import Settings
from storefront.domain.repository.unit_of_work import Store
from storefront.domain.service.order_number_generator import OrderNumberGenerator
from storefront.infrastructure.persistence.sql_store import SqlStore


def open_store(settings: Settings) -> SqlStore:
    sql_store = SqlStore.from_url(settings.database_url, timeout=settings.db_timeout)
    sql_store.create_schema()
    return sql_store


def place_order_handler(store: Store, settings: Settings) -> PlaceOrderHandler:
    return PlaceOrderHandler(
        store=store,
        order_numbers=OrderNumberGenerator(prefix=settings.order_number_prefix),
        max_order_number_attempts=settings.order_number_attempts,
        default_country=settings.default_country,
    )


def show_order_handler(store: Store) -> ShowOrderHandler:
    return ShowOrderHandler(store)


def list_customer_orders_handler(store: Store) -> ListCustomerOrdersHandler:
    return ListCustomerOrdersHandler(store)


def add_product_handler(store: Store) -> AddProductHandler:
    return AddProductHandler(store)


def list_products_handler(store: Store) -> ListProductsHandler:
    return ListProductsHandler(store)
