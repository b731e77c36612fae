"""Display-only environment variable report."""

from collections.abc import Sequence
from typing import Final

from bigdemo.config import ConfigValueProvider
from bigdemo.domain import EnvVar

DISPLAY_VARIABLE_NAMES: Final[tuple[str, ...]] = (
    "TAP_DEPLOY_NUMBER",
    "TAP_DOCKER_TAG",
    "TAP_APP_URL",
    "TAP_APP_NAME",
    "TAP_TEAM_NAME",
)


def status_build_environment_report(
    config_provider: ConfigValueProvider,
    names: Sequence[str] = DISPLAY_VARIABLE_NAMES,
) -> tuple[EnvVar, ...]:
    """Read each named variable in order, with empty values for unset names.

    Args:
        config_provider: Source of configuration values.
        names: Variable names in display order.

    Returns:
        tuple[EnvVar, ...]: One entry per name, preserving input order.

    Raises:
        ValueError: Raised when config_provider is None.
    """

    if config_provider is None:
        raise ValueError("config_provider must not be None")
    return tuple(EnvVar(name=name, value=config_provider.config_get_value(name)) for name in names)
