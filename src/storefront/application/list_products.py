"""Application service: List the catalog (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import Store


class ListProductsHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> list[ProductDTO]:
        with self._store.read() as view:
            products = view.products.list_all()
        return [to_product_dto(p) for p in sorted(products, key=lambda p: p.id or 0)]


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=product.price.amount,
        stock_quantity=product.stock_quantity,
        is_active=product.is_active,
        primary_image=product.primary_image,
    )
