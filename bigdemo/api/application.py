"""FastAPI application factory for the diagnostics page service.

This module defines API application composition used by the runtime.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from bigdemo.status import StatusPageAggregator

from .routers import PRODUCT_NAME, api_create_status_page_router

DEFAULT_TEMPLATE_DIRECTORY = Path(__file__).resolve().parent.parent / "templates"


def api_create_templates(directory: Path | str | None = None) -> Jinja2Templates:
    """Create the Jinja2 template environment with autoescaping enabled.

    Args:
        directory: Optional template directory; defaults to the packaged templates.

    Returns:
        Jinja2Templates: Template environment for page rendering.

    Raises:
        ValueError: Raised when the directory does not exist.
    """

    template_directory = Path(directory) if directory is not None else DEFAULT_TEMPLATE_DIRECTORY
    if not template_directory.is_dir():
        raise ValueError(f"template directory does not exist: {template_directory}")
    return Jinja2Templates(directory=str(template_directory))


def create_api_application(
    aggregator: StatusPageAggregator,
    templates: Jinja2Templates | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Interactive documentation routes are disabled so `/` is the only route.

    Args:
        aggregator: Snapshot builder used by the status page.
        templates: Optional template environment; defaults to packaged templates.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    application = FastAPI(
        title=PRODUCT_NAME,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(
        api_create_status_page_router(
            aggregator=aggregator,
            templates=templates or api_create_templates(),
        )
    )
    return application
