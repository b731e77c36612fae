"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import uvicorn

from bigdemo.bootstrap import bootstrap_create_application
from bigdemo.config import config_configure_logging, config_load_settings


def main() -> None:
    """Serve the diagnostics page on the configured host and port.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings()
    logger = config_configure_logging(settings)
    application = bootstrap_create_application(settings=settings)

    logger.info("BigDemo listening on :%s", settings.application_port)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
