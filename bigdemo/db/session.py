"""Database dialect resolution and probe engine construction.

This module centralizes SQLAlchemy engine primitives so the probe service
never builds engines or driver arguments on its own.
"""

import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import NullPool


@dataclass(frozen=True)
class DatabaseDialect:
    """Supported relational dialect and its SQLAlchemy driver scheme.

    Attributes:
        name: Dialect label used in diagnostics.
        url_prefix: Prefix of `DATABASE_URL` values selecting this dialect.
        driver_scheme: SQLAlchemy URL scheme including the DBAPI driver.
    """

    name: str
    url_prefix: str
    driver_scheme: str


POSTGRES_DIALECT = DatabaseDialect(name="postgres", url_prefix="postgres", driver_scheme="postgresql+psycopg")
MYSQL_DIALECT = DatabaseDialect(name="mysql", url_prefix="mysql", driver_scheme="mysql+pymysql")

# The first entry is the fallback for unrecognized prefixes.
SUPPORTED_DIALECTS: tuple[DatabaseDialect, ...] = (POSTGRES_DIALECT, MYSQL_DIALECT)


def db_resolve_dialect(database_url: str) -> DatabaseDialect:
    """Select the dialect whose prefix starts the database URL.

    Unrecognized prefixes fall back to PostgreSQL rather than failing.

    Args:
        database_url: Raw `DATABASE_URL` value.

    Returns:
        DatabaseDialect: Matching dialect, or the default dialect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    for dialect in SUPPORTED_DIALECTS:
        if database_url.startswith(dialect.url_prefix):
            return dialect
    return SUPPORTED_DIALECTS[0]


def db_build_engine_url(database_url: str, dialect: DatabaseDialect) -> str:
    """Rewrite the URL scheme to the SQLAlchemy driver scheme of a dialect.

    Values without a `scheme://` part are returned unchanged and left for
    SQLAlchemy to reject.

    Args:
        database_url: Raw `DATABASE_URL` value.
        dialect: Resolved dialect.

    Returns:
        str: URL accepted by `sqlalchemy.create_engine`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if "://" not in database_url:
        return database_url
    _, remainder = database_url.split("://", 1)
    return f"{dialect.driver_scheme}://{remainder}"


def db_build_connect_args(dialect: DatabaseDialect, timeout_seconds: float) -> dict[str, Any]:
    """Build DBAPI connect arguments that bound connect and query time.

    Args:
        dialect: Resolved dialect.
        timeout_seconds: Probe deadline in seconds.

    Returns:
        dict[str, Any]: Driver-specific keyword arguments.

    Raises:
        ValueError: Raised when timeout_seconds is not positive.
    """

    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be > 0")

    if dialect == MYSQL_DIALECT:
        return {
            "connect_timeout": timeout_seconds,
            "read_timeout": timeout_seconds,
            "write_timeout": timeout_seconds,
        }
    # libpq accepts whole seconds only
    return {
        "connect_timeout": max(1, math.ceil(timeout_seconds)),
        "options": f"-c statement_timeout={int(timeout_seconds * 1000)}",
    }


def db_create_probe_engine(engine_url: str, dialect: DatabaseDialect, timeout_seconds: float) -> Engine:
    """Create a pool-less SQLAlchemy engine for one probe attempt.

    Args:
        engine_url: SQLAlchemy database URL.
        dialect: Resolved dialect used for driver arguments.
        timeout_seconds: Probe deadline in seconds.

    Returns:
        Engine: Engine that opens a fresh connection per checkout.

    Raises:
        sqlalchemy.exc.ArgumentError: Raised when the URL cannot be parsed.
        ImportError: Raised when the DBAPI driver is not installed.
    """

    return create_engine(
        engine_url,
        poolclass=NullPool,
        connect_args=db_build_connect_args(dialect, timeout_seconds),
    )
