"""Typed interfaces for database-layer services.

All SQL and ORM access must remain in the db package and its submodules.
"""

from typing import Protocol

from bigdemo.domain import StatusInfo


class DatabaseProbePort(Protocol):
    """Port definition for relational store connectivity verification."""

    def db_check_status(self) -> StatusInfo:
        """Probe the configured database and classify the outcome.

        Returns:
            StatusInfo: Not-configured, unreachable or healthy status.

        Raises:
            RuntimeError: Raised only for failures outside the database client.
        """
