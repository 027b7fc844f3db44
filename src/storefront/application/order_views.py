"""Read-side assembly of OrderDTOs.

Joins order line items to the catalog for display name and primary
image.  Shared by every use case that returns orders.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineItemDTO
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork


def to_order_dto(order: Order, products: dict[int, Product] | None = None) -> OrderDTO:
    products = products or {}
    items = []
    for item in order.items:
        product = products.get(item.product_id)
        items.append(
            OrderLineItemDTO(
                id=item.id,
                product_id=item.product_id,
                quantity=item.quantity.value,
                price_at_purchase=item.unit_price.amount,
                line_total=item.line_total.amount,
                product_name=product.name if product else None,
                product_image=product.primary_image if product else None,
            )
        )
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
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
        items=items,
    )


def load_order_views(reader: UnitOfWork, orders: list[Order]) -> list[OrderDTO]:
    """Build DTOs for *orders* with one catalog lookup for all of them."""
    product_ids = sorted({item.product_id for order in orders for item in order.items})
    products = {p.id: p for p in reader.products.find_by_ids(product_ids)}
    return [to_order_dto(order, products) for order in orders]
