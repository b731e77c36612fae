"""Configuration value providers for per-request diagnostic inputs."""

import os
from collections.abc import Mapping
from typing import Protocol


class ConfigValueProvider(Protocol):
    """Port definition for reading one named configuration value."""

    def config_get_value(self, name: str) -> str:
        """Return the configured value for a name.

        Args:
            name: Configuration variable name.

        Returns:
            str: Configured value, or an empty string when unset.

        Raises:
            RuntimeError: Raised when the configuration source is unavailable.
        """


class ProcessEnvironmentProvider:
    """Provider reading the live process environment on every lookup."""

    def config_get_value(self, name: str) -> str:
        """Return an environment variable value with empty string as unset.

        Args:
            name: Environment variable name.

        Returns:
            str: Variable value or empty string.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return os.environ.get(name, "")


class MappingConfigValueProvider:
    """Provider backed by a fixed mapping, used by tests and local tooling."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    def config_get_value(self, name: str) -> str:
        return self._values.get(name, "")
