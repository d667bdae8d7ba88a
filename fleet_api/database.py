# fleet_api/database.py
"""
Store connection, request dependency, and table creation.
The Store wraps one SQLAlchemy engine and runs plain SQL with positional
`?` parameters, so it needs a qmark-paramstyle driver (SQLite).
It is opened by the application lifespan and handed to every handler
through get_store(); nothing here holds a global handle.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from fleet_api.errors import StoreError
from fleet_api.utils.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _run(conn: Connection, sql: str, params: Optional[Sequence[Any]]):
    try:
        return conn.exec_driver_sql(sql, tuple(params) if params else None)
    except IntegrityError as e:
        logger.warning(f"Constraint violation: {e.orig}")
        raise StoreError(str(e.orig), integrity=True) from e
    except DBAPIError as e:
        logger.warning(f"Store rejected statement: {e.orig}")
        raise StoreError(str(e.orig)) from e
    except OverflowError as e:
        # sqlite3 refuses ints outside the signed 64-bit range before running anything
        logger.warning(f"Store rejected parameter: {e}")
        raise StoreError(str(e)) from e


class StoreConnection:
    """execute/query_all bound to a single connection (one transaction)."""

    def __init__(self, conn: Connection):
        self._conn = conn

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        return _run(self._conn, sql, params).rowcount

    def query_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        result = _run(self._conn, sql, params)
        return [dict(row) for row in result.mappings()]


class Store:
    def __init__(self, url: str, echo: bool = False):
        kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            # FastAPI runs sync handlers in a threadpool
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool  # One shared in-memory database
        self.engine = create_engine(url, **kwargs)

    @contextmanager
    def transaction(self) -> Iterator[StoreConnection]:
        """Commits on normal exit, rolls back if the block raises."""
        with self.engine.begin() as conn:
            yield StoreConnection(conn)

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a write statement in its own transaction. Returns the rowcount."""
        with self.transaction() as conn:
            return conn.execute(sql, params)

    def query_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """Run a read statement and return every row as a dict."""
        with self.engine.connect() as conn:
            return StoreConnection(conn).query_all(sql, params)

    def create_tables(self):
        """
        Creates all tables and indexes. Safe to call multiple times.
        Import all models here so SQLAlchemy knows about them.
        """
        from fleet_api.models.brand import Brand        # noqa
        from fleet_api.models.driver import Driver      # noqa
        from fleet_api.models.vehicle import Vehicle    # noqa
        from fleet_api.models.usage import Usage        # noqa

        Base.metadata.create_all(bind=self.engine)

    def close(self):
        self.engine.dispose()


def get_store(request: Request) -> Store:
    """FastAPI dependency: the Store opened by the application lifespan."""
    return request.app.state.store
