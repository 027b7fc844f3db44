"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.  Each class carries a stable ``code`` and a
``params`` dict that the message catalogues use to render localized text.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "domain_error"

    def __init__(self, message: str = "", **params: object) -> None:
        super().__init__(message)
        self.params = params


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "validation_error"

    def __init__(self, message: str = "", errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "not_found"


# ---------------------------------------------------------------------------
# Order placement failures
# ---------------------------------------------------------------------------


class EmptyCartError(ValidationError):
    """The cart resolved to zero line items."""

    code = "empty_cart"

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class ProductsNotFoundError(EntityNotFoundError):
    """One or more requested products do not exist.  Lists every missing id."""

    code = "products_not_found"

    def __init__(self, product_ids: list[int]) -> None:
        self.product_ids = list(product_ids)
        joined = ", ".join(str(pid) for pid in self.product_ids)
        super().__init__(f"Products not found: {joined}", product_ids=joined)


class ProductUnavailableError(ValidationError):
    """The product exists but is no longer sold."""

    code = "product_unavailable"

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Product '{product_name}' is no longer available")
        self.product_name = product_name
        self.params = {"product_name": product_name}


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds the stock on hand."""

    code = "insufficient_stock"

    def __init__(self, product_name: str, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} (only {available} left)"
        )
        self.product_name = product_name
        self.available = available
        self.params = {"product_name": product_name, "available": available}


class IntegrityViolationError(DomainException):
    """Referential integrity failed inside the transaction.

    Typically a product removed between the pre-check and the commit.
    """

    code = "integrity_violation"


class DuplicateOrderNumberError(DomainException):
    """The generated order number collided with an existing one."""

    code = "duplicate_order_number"


class PersistenceFailure(DomainException):
    """Any other store error.  The transaction has been rolled back."""

    code = "persistence_failure"
