"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in dicts.  No file I/O, no side effects.

``FakeStore`` gives each unit of work a deep copy of the committed
state; commit swaps the copy in, rollback throws it away.  Failures can
be injected into any repository method of write transactions with
``store.fail_on("orders.add_line_item", SomeError())``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace

from storefront.domain.exceptions import (
    DomainException,
    DuplicateOrderNumberError,
    EntityNotFoundError,
    IntegrityViolationError,
)
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.unit_of_work import Store, UnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return copy.deepcopy(self._store.get(product_id))

    def find_by_ids(self, product_ids: list[int]) -> list[Product]:
        return [copy.deepcopy(self._store[pid]) for pid in product_ids if pid in self._store]

    def list_all(self) -> list[Product]:
        return [copy.deepcopy(p) for p in self._store.values()]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = copy.deepcopy(product)

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        product = self._store.get(product_id)
        if product is None or product.stock_quantity < quantity:
            return False
        self._store[product_id] = replace(
            product, stock_quantity=product.stock_quantity - quantity
        )
        return True

    def remove(self, product_id: int) -> None:
        del self._store[product_id]


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        self._next_id = 1
        for c in customers or []:
            self.add(c)

    def get_by_email(self, email: str) -> Customer | None:
        return copy.deepcopy(self._store.get(email))

    def add(self, customer: Customer) -> None:
        if customer.email in self._store:
            raise DomainException(f"Duplicate customer email {customer.email}")
        customer.id = self._next_id
        self._next_id += 1
        self._store[customer.email] = copy.deepcopy(customer)

    def update(self, customer: Customer) -> None:
        if customer.email not in self._store:
            raise EntityNotFoundError(f"Customer #{customer.id} not found")
        self._store[customer.email] = copy.deepcopy(customer)

    def list_all(self) -> list[Customer]:
        return [copy.deepcopy(c) for c in self._store.values()]


class FakeOrderRepository(OrderRepository):
    """Enforces the unique order number and the product foreign key."""

    def __init__(self, products: FakeProductRepository) -> None:
        self._products = products
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_item_id = 1

    def add(self, order: Order) -> None:
        if any(o.order_number == order.order_number for o in self._store.values()):
            raise DuplicateOrderNumberError(
                f"UNIQUE constraint failed: orders.order_number ({order.order_number})"
            )
        order.id = self._next_id
        self._next_id += 1
        self._store[order.id] = replace(copy.deepcopy(order), items=[])

    def add_line_item(self, order: Order, item: OrderLineItem) -> None:
        if self._products.get_by_id(item.product_id) is None:
            raise IntegrityViolationError("FOREIGN KEY constraint failed")
        item.id = self._next_item_id
        self._next_item_id += 1
        self._store[order.id].items.append(copy.deepcopy(item))  # type: ignore[index]

    def get_by_id(self, order_id: int) -> Order | None:
        return copy.deepcopy(self._store.get(order_id))

    def get_by_order_number(self, order_number: str) -> Order | None:
        for order in self._store.values():
            if order.order_number == order_number:
                return copy.deepcopy(order)
        return None

    def list_by_email(self, email: str) -> list[Order]:
        matches = [o for o in self._store.values() if o.customer_email == email]
        matches.sort(key=lambda o: (o.created_at, o.id), reverse=True)
        return copy.deepcopy(matches)

    def list_all(self) -> list[Order]:
        return copy.deepcopy(list(self._store.values()))


@dataclass
class FakeState:
    products: FakeProductRepository
    customers: FakeCustomerRepository
    orders: FakeOrderRepository


def _raising(error: Exception):
    def method(*args, **kwargs):
        raise error
    return method


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, store: FakeStore, read_only: bool = False) -> None:
        self._store = store
        self.read_only = read_only
        self._working = copy.deepcopy(store.state)
        self.products = self._working.products
        self.customers = self._working.customers
        self.orders = self._working.orders

        self._injected: list[tuple[object, str]] = []
        failures = store.read_failures if read_only else store.write_failures
        for target, error in failures.items():
            repo_name, method_name = target.split(".")
            repo = getattr(self, repo_name)
            setattr(repo, method_name, _raising(error))
            self._injected.append((repo, method_name))

    def commit(self) -> None:
        if self.read_only:
            raise AssertionError("read-only unit of work must not commit")
        for repo, method_name in self._injected:
            delattr(repo, method_name)
        self._store.state = self._working
        self._store.commits += 1

    def rollback(self) -> None:
        if not self.read_only:
            self._store.rollbacks += 1


class FakeStore(Store):

    def __init__(
        self,
        products: list[Product] | None = None,
        customers: list[Customer] | None = None,
    ) -> None:
        product_repo = FakeProductRepository(products)
        self.state = FakeState(
            products=product_repo,
            customers=FakeCustomerRepository(customers),
            orders=FakeOrderRepository(product_repo),
        )
        self.write_failures: dict[str, Exception] = {}
        self.read_failures: dict[str, Exception] = {}
        self.transactions = 0
        self.commits = 0
        self.rollbacks = 0

    def begin(self) -> FakeUnitOfWork:
        self.transactions += 1
        return FakeUnitOfWork(self)

    def read(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(self, read_only=True)

    # --- Test helpers ---------------------------------------------------------

    def fail_on(self, target: str, error: Exception) -> None:
        """Make ``repo.method`` raise *error* in write transactions."""
        self.write_failures[target] = error

    def fail_reads_on(self, target: str, error: Exception) -> None:
        self.read_failures[target] = error

    def snapshot(self) -> dict:
        """Comparable view of everything committed."""
        return {
            "products": {p.id: p.stock_quantity for p in self.state.products.list_all()},
            "customers": self.state.customers.list_all(),
            "orders": self.state.orders.list_all(),
        }
