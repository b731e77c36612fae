"""API layer package for FastAPI application and route composition."""

from .application import api_create_templates, create_api_application

__all__ = ["api_create_templates", "create_api_application"]
