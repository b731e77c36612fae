"""Status page router composition for the diagnostics HTML page."""

import logging
from typing import Final

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from bigdemo.status import StatusPageAggregator

logger = logging.getLogger(__name__)

PRODUCT_NAME: Final[str] = "BigDemo"
STATUS_PAGE_TEMPLATE: Final[str] = "status_page.html"


def api_create_status_page_router(
    aggregator: StatusPageAggregator,
    templates: Jinja2Templates,
    template_name: str = STATUS_PAGE_TEMPLATE,
) -> APIRouter:
    """Create router rendering the diagnostics page at `/`.

    Args:
        aggregator: Snapshot builder invoked once per request.
        templates: Jinja2 template environment holding the page template.
        template_name: Template file rendered for the page.

    Returns:
        APIRouter: Router exposing the `/` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if aggregator is None:
        raise ValueError("aggregator must not be None")
    if templates is None:
        raise ValueError("templates must not be None")
    if not template_name.strip():
        raise ValueError("template_name must not be blank")

    router = APIRouter(tags=["status"])

    @router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
    def api_status_page(request: Request) -> Response:
        """Render the diagnostics page for the current state of all dependencies.

        Dependency failures are shown inside their own card. Only template
        failures fail the request.

        Args:
            request: Incoming request passed to the template context.

        Returns:
            Response: HTML page, or plain-text 500 response on template failure.

        Raises:
            RuntimeError: Raised only when a check fails outside its own error handling.
        """

        snapshot = aggregator.status_build_snapshot()
        try:
            return templates.TemplateResponse(
                request,
                template_name,
                {"product_name": PRODUCT_NAME, "snapshot": snapshot},
            )
        except TemplateError as error:
            logger.error("Status page template %s failed to render: %s", template_name, error)
            return PlainTextResponse(
                content=f"Template error: {error}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    return router
