"""FastAPI application factory for the enclosure API."""

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rackmount.infrastructure.exporters import ExporterRegistry
from rackmount.web.exceptions import register_exception_handlers
from rackmount.web.routers import (
    export_router,
    generate_router,
    solve_router,
    validate_router,
)

API_PREFIX = "/api/v1"
API_VERSION = "0.1.0"


def create_app(cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Build the API: generate, solve, validate and export under ``/api/v1``.

    Args:
        cors_origins: Origins allowed to call the API from a browser.
    """
    app = FastAPI(
        title="Rack-Mount Enclosure API",
        description=(
            "Generate 3D-printable rack-mount enclosures for stacked network "
            "switches as OpenSCAD, JSON operation trees, STL previews or DXF "
            "panel templates."
        ),
        version=API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (generate_router, solve_router, validate_router, export_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check() -> dict[str, object]:
        """Health check; also lists the export formats this build supports."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "formats": ExporterRegistry.available_formats(),
        }

    return app


# Application instance for ASGI servers
app = create_app()
