"""API routers for the REST API."""

from cladding.web.routers.calculate import router as calculate_router
from cladding.web.routers.classify import router as classify_router
from cladding.web.routers.presets import router as presets_router
from cladding.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "classify_router",
    "presets_router",
    "validate_router",
]
