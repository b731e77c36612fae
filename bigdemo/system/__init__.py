"""System metrics package for host and process statistics."""

from .interfaces import HostMetricsPort
from .metrics import HostMetricsService

__all__ = ["HostMetricsPort", "HostMetricsService"]
