"""Database layer package for relational store probing."""

from .interfaces import DatabaseProbePort
from .probe import DATABASE_URL_VARIABLE, SQLAlchemyDatabaseProbeService
from .session import (
    MYSQL_DIALECT,
    POSTGRES_DIALECT,
    SUPPORTED_DIALECTS,
    DatabaseDialect,
    db_build_connect_args,
    db_build_engine_url,
    db_create_probe_engine,
    db_resolve_dialect,
)

__all__ = [
    "DATABASE_URL_VARIABLE",
    "DatabaseDialect",
    "DatabaseProbePort",
    "MYSQL_DIALECT",
    "POSTGRES_DIALECT",
    "SQLAlchemyDatabaseProbeService",
    "SUPPORTED_DIALECTS",
    "db_build_connect_args",
    "db_build_engine_url",
    "db_create_probe_engine",
    "db_resolve_dialect",
]
