"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from bigdemo.domain import MetadataFetchResult


class MetadataAdapterPort(Protocol):
    """Port definition for fetching container orchestrator task metadata."""

    def adapter_fetch_metadata(self) -> MetadataFetchResult:
        """Fetch task metadata from the configured upstream source.

        Returns:
            MetadataFetchResult: Metadata on success, failure reason otherwise.

        Raises:
            RuntimeError: Raised only for failures outside the HTTP client.
        """
