"""SQL implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.sql_tables import ProductRecord


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        stmt = (
            select(ProductRecord)
            .where(ProductRecord.id == product_id)
            .execution_options(populate_existing=True)
        )
        record = self._session.scalars(stmt).first()
        return self._to_domain(record) if record else None

    def find_by_ids(self, product_ids: list[int]) -> list[Product]:
        if not product_ids:
            return []
        stmt = (
            select(ProductRecord)
            .where(ProductRecord.id.in_(product_ids))
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(r) for r in self._session.scalars(stmt)]

    def list_all(self) -> list[Product]:
        stmt = select(ProductRecord).order_by(ProductRecord.id)
        return [self._to_domain(r) for r in self._session.scalars(stmt)]

    def save(self, product: Product) -> None:
        record = None
        if product.id is not None:
            record = self._session.get(ProductRecord, product.id)
        if record is None:
            record = ProductRecord(id=product.id)
            self._session.add(record)
        record.name = product.name
        record.price = product.price.amount
        record.stock_quantity = product.stock_quantity
        record.is_active = product.is_active
        record.image_urls = list(product.image_urls)
        self._session.flush()
        product.id = record.id

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        stmt = (
            update(ProductRecord)
            .where(
                ProductRecord.id == product_id,
                ProductRecord.stock_quantity >= quantity,
            )
            .values(
                stock_quantity=ProductRecord.stock_quantity - quantity,
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self._session.execute(stmt)
        return result.rowcount == 1

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            price=Money(record.price),
            stock_quantity=record.stock_quantity,
            is_active=bool(record.is_active),
            image_urls=list(record.image_urls or []),
        )
