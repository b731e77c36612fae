"""API router package for endpoint composition."""

from .status_page import PRODUCT_NAME, STATUS_PAGE_TEMPLATE, api_create_status_page_router

__all__ = ["PRODUCT_NAME", "STATUS_PAGE_TEMPLATE", "api_create_status_page_router"]
