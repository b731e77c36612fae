"""Root logger configuration for the diagnostics process."""

import logging

from .settings import AppSettings


def config_configure_logging(settings: AppSettings) -> logging.Logger:
    """Install a single console handler on the root logger.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        settings: Validated settings providing level and format.

    Returns:
        logging.Logger: Project logger named `bigdemo`.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(settings.log_format))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)

    return logging.getLogger("bigdemo")
