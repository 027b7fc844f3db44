"""Application service: Place Order use case.

Turns a cart into a persisted order in one all-or-nothing transaction:

1. Advisory pre-check against committed state (outside the write
   transaction) so the shopper gets a precise message early.
2. One write transaction that re-reads prices, upserts the customer,
   inserts the order and its line items, and decrements stock with a
   conditional row update.
3. A read-only re-read of the committed order, joined to the catalog
   for display.  This step may degrade but never fails the placement.

The pre-check result is never used for the mutation itself; the
conditional decrement inside the transaction is the only thing that
guarantees stock stays at or above zero.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartLine, OrderDTO, PlaceOrderCommand
from storefront.application.order_views import load_order_views, to_order_dto
from storefront.domain.exceptions import (
    DomainException,
    DuplicateOrderNumberError,
    EmptyCartError,
    InsufficientStockError,
    IntegrityViolationError,
    ProductUnavailableError,
    ProductsNotFoundError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import Store, UnitOfWork
from storefront.domain.service.customer_aggregation_service import (
    CustomerAggregationService,
)
from storefront.domain.service.order_number_generator import OrderNumberGenerator

logger = logging.getLogger(__name__)

DEFAULT_ORDER_NUMBER_ATTEMPTS = 3


class PlaceOrderHandler:

    def __init__(
        self,
        store: Store,
        order_numbers: OrderNumberGenerator,
        max_order_number_attempts: int = DEFAULT_ORDER_NUMBER_ATTEMPTS,
        default_country: str | None = None,
    ) -> None:
        if max_order_number_attempts < 1:
            raise ValueError("max_order_number_attempts must be at least 1")
        self._store = store
        self._order_numbers = order_numbers
        self._max_attempts = max_order_number_attempts
        self._default_country = default_country

    def handle(self, command: PlaceOrderCommand) -> OrderDTO:
        requested = self._requested_quantities(command.items)
        self._precheck(requested)

        order = self._place_with_retries(command, requested)
        logger.info(
            "Placed order %s for %s: %d item(s), total %s",
            order.order_number,
            order.customer_email,
            len(order.items),
            order.total,
        )
        return self._view(order)

    # --- Step 1: advisory pre-check -------------------------------------------

    @staticmethod
    def _requested_quantities(lines: list[CartLine]) -> dict[int, int]:
        """Total quantity per distinct product, in first-seen order."""
        requested: dict[int, int] = {}
        for line in lines:
            Quantity(line.quantity)
            requested[line.product_id] = requested.get(line.product_id, 0) + line.quantity
        if not requested:
            raise EmptyCartError()
        return requested

    def _precheck(self, requested: dict[int, int]) -> None:
        with self._store.read() as view:
            found = view.products.find_by_ids(list(requested))
        products = {p.id: p for p in found}

        missing = [pid for pid in requested if pid not in products]
        if missing:
            logger.info("Rejected cart: unknown product ids %s", missing)
            raise ProductsNotFoundError(missing)

        for product_id, quantity in requested.items():
            try:
                products[product_id].ensure_can_supply(quantity)
            except ValidationError as exc:
                logger.info("Rejected cart: %s", exc)
                raise

    # --- Step 2: the write transaction ----------------------------------------

    def _place_with_retries(
        self, command: PlaceOrderCommand, requested: dict[int, int]
    ) -> Order:
        for attempt in range(1, self._max_attempts + 1):
            try:
                return self._store.run_in_transaction(
                    lambda uow: self._place(uow, command, requested)
                )
            except DuplicateOrderNumberError:
                if attempt == self._max_attempts:
                    raise
                logger.warning(
                    "Order number collision, retrying (attempt %d of %d)",
                    attempt,
                    self._max_attempts,
                )
        raise AssertionError("unreachable")

    def _place(
        self, uow: UnitOfWork, command: PlaceOrderCommand, requested: dict[int, int]
    ) -> Order:
        products = self._fresh_products(uow, requested)

        items = [
            OrderLineItem(
                product_id=line.product_id,
                quantity=Quantity(line.quantity),
                unit_price=products[line.product_id].price,  # <-- price snapshot
            )
            for line in command.items
        ]
        order = Order.create(
            order_number=self._order_numbers.next(),
            contact=command.contact,
            items=items,
            payment_method=command.payment_method,
            shipping_method=command.shipping_method,
            notes=command.notes,
        )

        customers = CustomerAggregationService(uow.customers, self._default_country)
        customers.record_order(command.contact, order.total)

        uow.orders.add(order)
        for item in order.items:
            uow.orders.add_line_item(order, item)
            if not uow.products.decrement_stock(item.product_id, item.quantity.value):
                raise self._decrement_failure(uow, item.product_id)
        return order

    @staticmethod
    def _fresh_products(uow: UnitOfWork, requested: dict[int, int]) -> dict[int, Product]:
        """Re-read the cart's products inside the transaction."""
        products = {p.id: p for p in uow.products.find_by_ids(list(requested))}
        missing = [pid for pid in requested if pid not in products]
        if missing:
            raise IntegrityViolationError(
                "Products removed while placing the order: "
                + ", ".join(str(pid) for pid in missing)
            )
        for product_id in requested:
            if not products[product_id].is_active:
                raise ProductUnavailableError(products[product_id].name)
        return products

    @staticmethod
    def _decrement_failure(uow: UnitOfWork, product_id: int) -> DomainException:
        current = uow.products.get_by_id(product_id)
        if current is None:
            return IntegrityViolationError(f"Product {product_id} no longer exists")
        return InsufficientStockError(current.name, current.stock_quantity)

    # --- Step 3: post-commit view ---------------------------------------------

    def _view(self, order: Order) -> OrderDTO:
        try:
            with self._store.read() as view:
                stored = view.orders.get_by_id(order.id)  # type: ignore[arg-type]
                return load_order_views(view, [stored or order])[0]
        except Exception:
            logger.warning(
                "Order %s was placed but could not be re-read for display",
                order.order_number,
                exc_info=True,
            )
            return to_order_dto(order)
