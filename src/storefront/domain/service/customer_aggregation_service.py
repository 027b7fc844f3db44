"""Domain service: Customer Aggregation.

Folds a freshly placed order into the customer record keyed by the
order's email: creates the customer on a first order, otherwise
refreshes contact details, accumulates totals and recomputes the tier.
Must run inside the same unit of work as the order it aggregates.
"""

from __future__ import annotations

from storefront.domain.model.customer import ContactDetails, Customer
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository


class CustomerAggregationService:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        default_country: str | None = None,
    ) -> None:
        self._customer_repo = customer_repo
        self._default_country = default_country

    def record_order(self, contact: ContactDetails, order_total: Money) -> Customer:
        """Upsert the customer for *contact* and return it.

        The email is matched exactly as supplied; normalizing case is the
        caller's job.
        """
        customer = self._customer_repo.get_by_email(contact.email)
        if customer is None:
            customer = Customer.register(contact, order_total, self._default_country)
            self._customer_repo.add(customer)
        else:
            customer.record_order(contact, order_total)
            self._customer_repo.update(customer)
        return customer
