"""Status page aggregation of independent diagnostic checks."""

from dataclasses import dataclass

from bigdemo.adapters import MetadataAdapterPort
from bigdemo.cache import CacheProbePort
from bigdemo.config import ConfigValueProvider
from bigdemo.db import DatabaseProbePort
from bigdemo.domain import PageSnapshot
from bigdemo.system import HostMetricsPort

from .environment import status_build_environment_report


@dataclass(frozen=True)
class StatusPageAggregator:
    """Compose every diagnostic check into one `PageSnapshot`.

    Checks run sequentially. Each one captures its own failures, so a broken
    dependency only degrades its own section of the snapshot.

    Attributes:
        config_provider: Source of display variable values.
        db_probe: Relational store probe.
        cache_probe: Cache store probe.
        host_metrics: Uptime and memory reader.
        metadata_adapter: Orchestrator task metadata source.
    """

    config_provider: ConfigValueProvider
    db_probe: DatabaseProbePort
    cache_probe: CacheProbePort
    host_metrics: HostMetricsPort
    metadata_adapter: MetadataAdapterPort

    def __post_init__(self) -> None:
        for field_name in ("config_provider", "db_probe", "cache_probe", "host_metrics", "metadata_adapter"):
            if getattr(self, field_name) is None:
                raise ValueError(f"{field_name} must not be None")

    def status_build_snapshot(self) -> PageSnapshot:
        """Run all checks once and assemble the page snapshot.

        Returns:
            PageSnapshot: Immutable data for a single page render.

        Raises:
            RuntimeError: Raised only when a check fails outside its own error handling.
        """

        metadata_result = self.metadata_adapter.adapter_fetch_metadata()
        return PageSnapshot(
            env_vars=status_build_environment_report(self.config_provider),
            db_status=self.db_probe.db_check_status(),
            cache_status=self.cache_probe.cache_check_status(),
            uptime=self.host_metrics.system_read_uptime(),
            memory_used=self.host_metrics.system_read_memory_used(),
            metadata=metadata_result.metadata,
            metadata_error=metadata_result.error,
        )
