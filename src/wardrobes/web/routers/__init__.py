"""API routers for the REST API."""

from wardrobes.web.routers.suggest import router as suggest_router
from wardrobes.web.routers.types import router as types_router
from wardrobes.web.routers.validate import router as validate_router

__all__ = [
    "suggest_router",
    "types_router",
    "validate_router",
]
