"""SQL implementation of CustomerRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.customer import Customer, Gender, VipStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.infrastructure.persistence.sql_tables import CustomerRecord


class SqlCustomerRepository(CustomerRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_email(self, email: str) -> Customer | None:
        stmt = select(CustomerRecord).where(CustomerRecord.email == email)
        record = self._session.scalars(stmt).first()
        return self._to_domain(record) if record else None

    def add(self, customer: Customer) -> None:
        record = CustomerRecord(email=customer.email)
        self._apply(customer, record)
        self._session.add(record)
        self._session.flush()
        customer.id = record.id

    def update(self, customer: Customer) -> None:
        record = self._session.get(CustomerRecord, customer.id)
        if record is None:
            raise EntityNotFoundError(f"Customer #{customer.id} not found")
        self._apply(customer, record)
        self._session.flush()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _apply(customer: Customer, record: CustomerRecord) -> None:
        record.name = customer.name
        record.phone = customer.phone
        record.address = customer.address
        record.city = customer.city
        record.country = customer.country
        record.date_of_birth = customer.date_of_birth
        record.gender = customer.gender.value if customer.gender else None
        record.total_orders = customer.total_orders
        record.total_spent = customer.total_spent.amount
        record.vip_status = customer.vip_status.value
        record.updated_at = customer.updated_at

    @staticmethod
    def _to_domain(record: CustomerRecord) -> Customer:
        return Customer(
            id=record.id,
            email=record.email,
            name=record.name,
            phone=record.phone or "",
            address=record.address or "",
            city=record.city,
            country=record.country,
            date_of_birth=record.date_of_birth,
            gender=Gender(record.gender) if record.gender else None,
            total_orders=record.total_orders or 0,
            total_spent=Money(record.total_spent or Money.zero().amount),
            vip_status=VipStatus(record.vip_status),
            updated_at=record.updated_at,
        )
