"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return the customer with exactly this email, or None."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Insert a new customer and assign its ID."""

    @abstractmethod
    def update(self, customer: Customer) -> None:
        """Write back an existing customer."""
