"""Typed domain models shared across runtime layers.

Every model is immutable and scoped to a single request: probes build them,
the aggregator combines them into a `PageSnapshot`, and the renderer reads it.
"""

from dataclasses import dataclass
from typing import Final

CONNECTED_MESSAGE: Final[str] = "Connected and responding"


@dataclass(frozen=True)
class EnvVar:
    """One displayed configuration variable.

    Attributes:
        name: Variable name.
        value: Variable value, empty when unset.
    """

    name: str
    value: str


@dataclass(frozen=True)
class StatusInfo:
    """Outcome of one dependency probe.

    Attributes:
        present: Whether the dependency connection setting is configured.
        connected: Whether the dependency answered its liveness check.
        message: Diagnostic message shown next to the status indicator.

    Raises:
        ValueError: Raised when `connected` is set without `present`.
    """

    present: bool
    connected: bool
    message: str

    def __post_init__(self) -> None:
        if self.connected and not self.present:
            raise ValueError("connected status requires present status")

    @classmethod
    def not_configured(cls, message: str) -> "StatusInfo":
        return cls(present=False, connected=False, message=message)

    @classmethod
    def unreachable(cls, message: str) -> "StatusInfo":
        return cls(present=True, connected=False, message=message)

    @classmethod
    def healthy(cls) -> "StatusInfo":
        return cls(present=True, connected=True, message=CONNECTED_MESSAGE)


@dataclass(frozen=True)
class ContainerInfo:
    """One container entry of the running orchestrator task.

    Attributes:
        image_id: Container image identifier.
        name: Container name.
    """

    image_id: str
    name: str


@dataclass(frozen=True)
class OrchestratorMetadata:
    """Task metadata reported by the container orchestrator.

    Attributes:
        availability_zone: Availability zone of the task, possibly empty.
        containers: Containers of the task in reported order.
    """

    availability_zone: str
    containers: tuple[ContainerInfo, ...]


@dataclass(frozen=True)
class MetadataFetchResult:
    """Result contract for orchestrator metadata fetches.

    Exactly one of `metadata` and `error` is set.

    Attributes:
        metadata: Decoded task metadata on success.
        error: Human-readable failure reason otherwise.
    """

    metadata: OrchestratorMetadata | None
    error: str | None

    def __post_init__(self) -> None:
        if (self.metadata is None) == (self.error is None):
            raise ValueError("exactly one of metadata and error must be set")


@dataclass(frozen=True)
class PageSnapshot:
    """Complete data set rendered by the status page for one request.

    Attributes:
        env_vars: Display variables in fixed order.
        db_status: Relational store probe outcome.
        cache_status: Cache store probe outcome.
        uptime: Host uptime text.
        memory_used: Process memory text.
        metadata: Orchestrator metadata when available.
        metadata_error: Reason the metadata is unavailable.
    """

    env_vars: tuple[EnvVar, ...]
    db_status: StatusInfo
    cache_status: StatusInfo
    uptime: str
    memory_used: str
    metadata: OrchestratorMetadata | None
    metadata_error: str | None
