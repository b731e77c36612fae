"""Configuration package for runtime settings, value providers and logging."""

from .log_setup import config_configure_logging
from .provider import ConfigValueProvider, MappingConfigValueProvider, ProcessEnvironmentProvider
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "AppSettings",
    "ConfigValueProvider",
    "MappingConfigValueProvider",
    "ProcessEnvironmentProvider",
    "SettingsLoadError",
    "config_configure_logging",
    "config_load_settings",
]
