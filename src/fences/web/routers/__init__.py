"""API routers for the REST API."""

from fences.web.routers.layout import router as layout_router
from fences.web.routers.validate import router as validate_router

__all__ = [
    "layout_router",
    "validate_router",
]
