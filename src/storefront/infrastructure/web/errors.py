"""Mapping of domain failures to HTTP responses."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import (
    DomainException,
    DuplicateOrderNumberError,
    EntityNotFoundError,
    IntegrityViolationError,
    PersistenceFailure,
    ProductsNotFoundError,
    ValidationError,
)
from storefront.infrastructure.web import messages

logger = logging.getLogger(__name__)

# most specific first
STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ProductsNotFoundError, 400),
    (EntityNotFoundError, 404),
    (ValidationError, 400),
    (IntegrityViolationError, 400),
    (DuplicateOrderNumberError, 400),
    (PersistenceFailure, 500),
]


def status_for(exc: DomainException) -> int:
    for error_type, status in STATUS_CODES:
        if isinstance(exc, error_type):
            return status
    return 400


def error_body(exc: DomainException, locale: str, show_detail: bool) -> tuple[dict, int]:
    status = status_for(exc)
    title, message = messages.render(exc.code, exc.params, locale)
    body: dict = {"error": title, "message": message}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    if status >= 500:
        logger.error("Request failed: %s", exc, exc_info=exc)
        if show_detail:
            body["detail"] = str(exc)
    return body, status


def unexpected_error_body(exc: Exception, locale: str, show_detail: bool) -> tuple[dict, int]:
    logger.error("Unhandled error", exc_info=exc)
    title, message = messages.render(PersistenceFailure.code, {}, locale)
    body: dict = {"error": title, "message": message}
    if show_detail:
        body["detail"] = f"{type(exc).__name__}: {exc}"
    return body, 500
