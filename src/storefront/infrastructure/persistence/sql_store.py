"""SQLAlchemy-backed Store and Unit of Work.

On SQLite every write transaction starts with ``BEGIN IMMEDIATE``, which
takes the database's write lock up front: one writer at a time, and
readers keep seeing the last committed state.  Foreign keys are switched
on for every connection.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.repository.unit_of_work import Store, UnitOfWork
from storefront.infrastructure.persistence.sql_customer_repository import (
    SqlCustomerRepository,
)
from storefront.infrastructure.persistence.sql_errors import translate_error
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from storefront.infrastructure.persistence.sql_tables import Base

logger = logging.getLogger(__name__)

_BEGIN_OPTION = "storefront_begin"


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, session: Session, read_only: bool = False) -> None:
        self._session = session
        self.read_only = read_only
        self.products = SqlProductRepository(session)
        self.customers = SqlCustomerRepository(session)
        self.orders = SqlOrderRepository(session)

    def __enter__(self) -> SqlUnitOfWork:
        try:
            # acquire the connection now so BEGIN is issued before any work
            self._session.connection()
        except SQLAlchemyError as exc:
            self._session.close()
            raise translate_error(exc) from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._session.close()
        if exc is not None and not self.read_only:
            logger.warning("Transaction rolled back after %s: %s", exc_type.__name__, exc)
        if isinstance(exc, SQLAlchemyError):
            raise translate_error(exc) from exc

    def commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            self.rollback()
            raise translate_error(exc) from exc

    def rollback(self) -> None:
        try:
            self._session.rollback()
        except SQLAlchemyError:
            logger.exception("Failed to roll back transaction")


class SqlStore(Store):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        writer = engine.execution_options(**{_BEGIN_OPTION: "IMMEDIATE"})
        self._write_sessions = sessionmaker(bind=writer, expire_on_commit=False)
        self._read_sessions = sessionmaker(bind=engine, expire_on_commit=False)

    @staticmethod
    def from_url(url: str, timeout: float = 5.0) -> SqlStore:
        return SqlStore(create_store_engine(url, timeout))

    def create_schema(self) -> None:
        """Create any missing tables.  Safe to call on every start."""
        Base.metadata.create_all(self._engine)

    def begin(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self._write_sessions())

    def read(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self._read_sessions(), read_only=True)

    def dispose(self) -> None:
        self._engine.dispose()


def create_store_engine(url: str, timeout: float = 5.0) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url)

    if parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        url, connect_args={"timeout": timeout, "check_same_thread": False}
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:
        # let the begin hook below issue BEGIN instead of the driver
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn) -> None:
        mode = conn.get_execution_options().get(_BEGIN_OPTION, "DEFERRED")
        conn.exec_driver_sql(f"BEGIN {mode}")

    return engine
