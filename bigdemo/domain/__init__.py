"""Domain models used across application layer boundaries."""

from .models import (
    CONNECTED_MESSAGE,
    ContainerInfo,
    EnvVar,
    MetadataFetchResult,
    OrchestratorMetadata,
    PageSnapshot,
    StatusInfo,
)

__all__ = [
    "CONNECTED_MESSAGE",
    "ContainerInfo",
    "EnvVar",
    "MetadataFetchResult",
    "OrchestratorMetadata",
    "PageSnapshot",
    "StatusInfo",
]
