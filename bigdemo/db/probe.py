"""Relational store probe backed by SQLAlchemy connectivity checks."""

import logging
from typing import Callable, Final

from sqlalchemy import Engine, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from bigdemo.config import ConfigValueProvider
from bigdemo.domain import StatusInfo

from .interfaces import DatabaseProbePort
from .session import DatabaseDialect, db_build_engine_url, db_create_probe_engine, db_resolve_dialect

logger = logging.getLogger(__name__)

DATABASE_URL_VARIABLE: Final[str] = "DATABASE_URL"

EngineFactory = Callable[[str, DatabaseDialect, float], Engine]


def _db_describe_error(error: Exception) -> str:
    # DBAPI wrappers carry the SQL statement and a docs link; the driver error is enough.
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig).strip()
    return str(error)


class SQLAlchemyDatabaseProbeService(DatabaseProbePort):
    """Database probe opening one short-lived connection per check."""

    def __init__(
        self,
        config_provider: ConfigValueProvider,
        timeout_seconds: float = 3.0,
        engine_factory: EngineFactory | None = None,
    ):
        """Initialize database probe service.

        Args:
            config_provider: Source of the `DATABASE_URL` value.
            timeout_seconds: Connect and query deadline in seconds.
            engine_factory: Optional engine builder replacing the default.

        Raises:
            ValueError: Raised when dependencies or timeout are invalid.
        """

        if config_provider is None:
            raise ValueError("config_provider must not be None")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._config_provider = config_provider
        self._timeout_seconds = timeout_seconds
        self._engine_factory = engine_factory or db_create_probe_engine

    def db_check_status(self) -> StatusInfo:
        """Verify database connectivity using a lightweight `SELECT 1` query.

        The engine is disposed on every exit path after it was created.

        Returns:
            StatusInfo: Not-configured, unreachable or healthy status.

        Raises:
            RuntimeError: This implementation captures client failures in the status.
        """

        database_url = self._config_provider.config_get_value(DATABASE_URL_VARIABLE)
        if not database_url:
            return StatusInfo.not_configured(f"{DATABASE_URL_VARIABLE} not set")

        dialect = db_resolve_dialect(database_url)
        try:
            engine = self._engine_factory(
                db_build_engine_url(database_url, dialect),
                dialect,
                self._timeout_seconds,
            )
        except (SQLAlchemyError, ImportError, ValueError) as error:
            logger.warning("Database engine for dialect %s could not be created: %s", dialect.name, error)
            return StatusInfo.unreachable(f"Failed to open: {_db_describe_error(error)}")

        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as error:
            logger.warning("Database ping failed for dialect %s: %s", dialect.name, error)
            return StatusInfo.unreachable(f"Ping failed: {_db_describe_error(error)}")
        finally:
            engine.dispose()

        return StatusInfo.healthy()
