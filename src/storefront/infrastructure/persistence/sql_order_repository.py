"""SQL implementation of OrderRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentMethod,
    ShippingMethod,
)
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.sql_tables import OrderItemRecord, OrderRecord


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        record = OrderRecord(
            order_number=order.order_number,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            customer_phone=order.customer_phone,
            shipping_address=order.shipping_address,
            total_amount=order.total.amount,
            payment_method=order.payment_method.value,
            shipping_method=order.shipping_method.value,
            notes=order.notes,
            status=order.status.value,
            created_at=order.created_at,
        )
        self._session.add(record)
        self._session.flush()
        order.id = record.id

    def add_line_item(self, order: Order, item: OrderLineItem) -> None:
        record = OrderItemRecord(
            order_id=order.id,
            product_id=item.product_id,
            quantity=item.quantity.value,
            price_at_purchase=item.unit_price.amount,
        )
        self._session.add(record)
        self._session.flush()
        item.id = record.id

    def get_by_id(self, order_id: int) -> Order | None:
        record = self._session.get(OrderRecord, order_id)
        return self._to_domain(record) if record else None

    def get_by_order_number(self, order_number: str) -> Order | None:
        stmt = select(OrderRecord).where(OrderRecord.order_number == order_number)
        record = self._session.scalars(stmt).first()
        return self._to_domain(record) if record else None

    def list_by_email(self, email: str) -> list[Order]:
        stmt = (
            select(OrderRecord)
            .where(OrderRecord.customer_email == email)
            .order_by(OrderRecord.created_at.desc(), OrderRecord.id.desc())
        )
        return [self._to_domain(r) for r in self._session.scalars(stmt)]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: OrderRecord) -> Order:
        items = [
            OrderLineItem(
                id=i.id,
                product_id=i.product_id,
                quantity=Quantity(i.quantity),
                unit_price=Money(i.price_at_purchase),
            )
            for i in record.items
        ]
        created_at = record.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; everything is stored in UTC
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=record.id,
            order_number=record.order_number,
            customer_name=record.customer_name,
            customer_email=record.customer_email,
            customer_phone=record.customer_phone,
            shipping_address=record.shipping_address,
            items=items,
            payment_method=PaymentMethod(record.payment_method),
            shipping_method=ShippingMethod(record.shipping_method),
            notes=record.notes,
            status=OrderStatus(record.status),
            created_at=created_at,
        )
