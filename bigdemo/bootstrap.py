"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from bigdemo.adapters import EcsTaskMetadataAdapter
from bigdemo.api import create_api_application
from bigdemo.cache import RedisCacheProbeService
from bigdemo.config import AppSettings, ConfigValueProvider, ProcessEnvironmentProvider, config_load_settings
from bigdemo.db import SQLAlchemyDatabaseProbeService
from bigdemo.status import StatusPageAggregator
from bigdemo.system import HostMetricsService


def bootstrap_create_aggregator(
    settings: AppSettings,
    config_provider: ConfigValueProvider | None = None,
) -> StatusPageAggregator:
    """Build the status aggregator with every diagnostic check wired in.

    Args:
        settings: Validated settings supplying timeouts and source paths.
        config_provider: Optional per-request value source; defaults to the process environment.

    Returns:
        StatusPageAggregator: Fully wired aggregator instance.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    provider = config_provider or ProcessEnvironmentProvider()
    return StatusPageAggregator(
        config_provider=provider,
        db_probe=SQLAlchemyDatabaseProbeService(
            config_provider=provider,
            timeout_seconds=settings.probe_timeout_seconds,
        ),
        cache_probe=RedisCacheProbeService(
            config_provider=provider,
            timeout_seconds=settings.probe_timeout_seconds,
        ),
        host_metrics=HostMetricsService(uptime_source_path=settings.uptime_source_path),
        metadata_adapter=EcsTaskMetadataAdapter(
            config_provider=provider,
            timeout_seconds=settings.probe_timeout_seconds,
        ),
    )


def bootstrap_create_application(
    settings: AppSettings | None = None,
    config_provider: ConfigValueProvider | None = None,
) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.
        config_provider: Optional per-request value source.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        aggregator=bootstrap_create_aggregator(resolved_settings, config_provider=config_provider),
    )
