"""Status aggregation package combining diagnostic checks."""

from .aggregator import StatusPageAggregator
from .environment import DISPLAY_VARIABLE_NAMES, status_build_environment_report

__all__ = ["DISPLAY_VARIABLE_NAMES", "StatusPageAggregator", "status_build_environment_report"]
