"""Translation of SQLAlchemy errors into the domain failure taxonomy."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront.domain.exceptions import (
    DomainException,
    DuplicateOrderNumberError,
    IntegrityViolationError,
    PersistenceFailure,
)

ORDER_NUMBER_UNIQUE = "UNIQUE constraint failed: orders.order_number"
FOREIGN_KEY_FAILED = "FOREIGN KEY constraint failed"


def translate_error(exc: SQLAlchemyError) -> DomainException:
    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, IntegrityError):
        if ORDER_NUMBER_UNIQUE in message:
            return DuplicateOrderNumberError(message)
        if FOREIGN_KEY_FAILED in message:
            return IntegrityViolationError(message)
    return PersistenceFailure(message)
