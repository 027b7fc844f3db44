"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO
from storefront.application.list_products import to_product_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import Store

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(
        self,
        name: str,
        price: str,
        stock_quantity: int,
        is_active: bool = True,
        image_urls: list[str] | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=None,
            name=name.strip(),
            price=Money.of(price),
            stock_quantity=stock_quantity,
            is_active=is_active,
            image_urls=list(image_urls or []),
        )
        self._store.run_in_transaction(lambda uow: uow.products.save(product))
        logger.info("Added product #%s %s (stock %d)", product.id, product.name, stock_quantity)
        return to_product_dto(product)
