"""API routers for the REST API."""

from rackmount.web.routers.export import router as export_router
from rackmount.web.routers.generate import router as generate_router
from rackmount.web.routers.solve import router as solve_router
from rackmount.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "generate_router",
    "solve_router",
    "validate_router",
]
