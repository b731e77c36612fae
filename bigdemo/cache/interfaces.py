"""Typed interfaces for cache-layer services."""

from typing import Protocol

from bigdemo.domain import StatusInfo


class CacheProbePort(Protocol):
    """Port definition for cache store connectivity verification."""

    def cache_check_status(self) -> StatusInfo:
        """Check the configured cache and classify the outcome.

        Returns:
            StatusInfo: Not-configured, unreachable or healthy status.

        Raises:
            RuntimeError: Raised only for failures outside the cache client.
        """
