"""Host uptime and process memory readers."""

import logging
from pathlib import Path
from typing import Final

import psutil

from .interfaces import HostMetricsPort

logger = logging.getLogger(__name__)

_BYTES_PER_MEGABYTE: Final[float] = 1024.0 * 1024.0


class HostMetricsService(HostMetricsPort):
    """Reader for host uptime and current process memory statistics."""

    def __init__(self, uptime_source_path: str = "/proc/uptime", process: psutil.Process | None = None):
        """Initialize host metrics service.

        Args:
            uptime_source_path: File whose first field is host uptime in seconds.
            process: Optional process handle; defaults to the current process.

        Raises:
            ValueError: Raised when uptime_source_path is blank.
        """

        if not uptime_source_path.strip():
            raise ValueError("uptime_source_path must not be blank")
        self._uptime_source_path = Path(uptime_source_path)
        self._process = process or psutil.Process()

    def system_read_memory_used(self) -> str:
        """Return resident and virtual memory of this process in megabytes.

        Returns:
            str: Text shaped as `X.XX MB (Alloc) / Y.YY MB (Sys)`.

        Raises:
            psutil.Error: Raised when the process cannot be inspected.
        """

        memory_info = self._process.memory_info()
        allocated_megabytes = memory_info.rss / _BYTES_PER_MEGABYTE
        reserved_megabytes = memory_info.vms / _BYTES_PER_MEGABYTE
        return f"{allocated_megabytes:.2f} MB (Alloc) / {reserved_megabytes:.2f} MB (Sys)"

    def system_read_uptime(self) -> str:
        """Return host uptime from the uptime source.

        Returns:
            str: `<seconds> seconds`, or a read/parse failure message.

        Raises:
            RuntimeError: This implementation captures read failures in the text.
        """

        try:
            uptime_text = self._uptime_source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            logger.warning("Uptime source %s could not be read: %s", self._uptime_source_path, error)
            return f"Unable to read: {error}"

        fields = uptime_text.split()
        if not fields:
            return "Unable to parse"
        try:
            float(fields[0])
        except ValueError:
            return "Unable to parse"
        return f"{fields[0]} seconds"
