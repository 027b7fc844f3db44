"""Unit of Work and Store abstractions.

A ``Store`` hands out transactions; nothing holds a connection at module
level.  ``Store.begin()`` returns a ``UnitOfWork`` that the caller owns
for the duration of the write: used as a context manager it commits
when the block finishes normally and rolls back when it raises.

Only one write transaction is open against the store at a time.
Readers obtained from ``Store.read()`` see committed state only and
never commit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

T = TypeVar("T")


class UnitOfWork(ABC):
    """Repositories bound to a single transaction."""

    products: ProductRepository
    customers: CustomerRepository
    orders: OrderRepository
    read_only: bool = False

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and not self.read_only:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write in this unit visible atomically."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every write in this unit."""


class Store(ABC):

    @abstractmethod
    def begin(self) -> UnitOfWork:
        """Open the write transaction."""

    @abstractmethod
    def read(self) -> UnitOfWork:
        """Open a read-only view of committed state."""

    def run_in_transaction(self, work: Callable[[UnitOfWork], T]) -> T:
        """Run *work* inside a write transaction.

        Commits if *work* returns, rolls back and re-raises if it raises.
        """
        with self.begin() as uow:
            return work(uow)
