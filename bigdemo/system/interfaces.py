"""Typed interfaces for host and process statistics readers."""

from typing import Protocol


class HostMetricsPort(Protocol):
    """Port definition for host and process statistics readers."""

    def system_read_memory_used(self) -> str:
        """Return current process memory usage for display.

        Returns:
            str: `<alloc> MB (Alloc) / <sys> MB (Sys)` with two decimals.

        Raises:
            RuntimeError: Raised when process statistics are unavailable.
        """

    def system_read_uptime(self) -> str:
        """Return host uptime for display.

        Returns:
            str: `<seconds> seconds`, or a read/parse failure message.

        Raises:
            RuntimeError: Implementations capture source failures in the text.
        """
