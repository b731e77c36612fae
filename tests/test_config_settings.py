"""Tests for startup settings loading and per-request value providers."""

from __future__ import annotations

import logging

import pytest

from bigdemo.config import (
    AppSettings,
    MappingConfigValueProvider,
    ProcessEnvironmentProvider,
    SettingsLoadError,
    config_configure_logging,
    config_load_settings,
)


def test_config_settings_default_port_is_80(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use port 80 when `PORT` is not set.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate defaults.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("APPLICATION_PORT", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.application_port == 80
    assert settings.application_host == "0.0.0.0"
    assert settings.probe_timeout_seconds == 3.0
    assert settings.uptime_source_path == "/proc/uptime"


def test_config_settings_reads_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read listen port from the `PORT` variable.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate env mapping.

    Raises:
        AssertionError: Raised when port is not mapped.
    """

    monkeypatch.setenv("PORT", "8080")

    settings = AppSettings(_env_file=None)

    assert settings.application_port == 8080


def test_config_load_settings_wraps_validation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for an out-of-range port.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when the error type differs.
    """

    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_settings_normalizes_log_level() -> None:
    settings = AppSettings(_env_file=None, log_level=" debug ")

    assert settings.log_level == "DEBUG"


def test_config_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        AppSettings(_env_file=None, log_level="chatty")


def test_config_configure_logging_installs_single_root_handler() -> None:
    """Replace root handlers with one console handler at the configured level.

    Returns:
        None: Assertions validate logger state.

    Raises:
        AssertionError: Raised when handler setup differs.
    """

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    try:
        settings = AppSettings(_env_file=None, log_level="WARNING")
        config_configure_logging(settings)
        project_logger = config_configure_logging(settings)

        assert project_logger.name == "bigdemo"
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.WARNING
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        for handler in original_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(original_level)


def test_config_process_environment_provider_reads_live_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return current environment values and empty string when unset.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate lookups.

    Raises:
        AssertionError: Raised when lookups differ.
    """

    provider = ProcessEnvironmentProvider()
    monkeypatch.delenv("TAP_APP_NAME", raising=False)
    assert provider.config_get_value("TAP_APP_NAME") == ""

    monkeypatch.setenv("TAP_APP_NAME", "first")
    assert provider.config_get_value("TAP_APP_NAME") == "first"

    monkeypatch.setenv("TAP_APP_NAME", "second")
    assert provider.config_get_value("TAP_APP_NAME") == "second"


def test_config_mapping_provider_returns_empty_for_missing_names() -> None:
    provider = MappingConfigValueProvider({"REDIS_URL": "redis://cache:6379/0"})

    assert provider.config_get_value("REDIS_URL") == "redis://cache:6379/0"
    assert provider.config_get_value("DATABASE_URL") == ""
