"""API errors and the handlers that turn them into JSON responses.

Every error body has the same shape::

    {"error": str, "error_type": str, "details": ...}

Schema failures use ``error_type="validation"``, refused parameter sets use
``"configuration"`` and formats that cannot be served use
``"unsupported_format"``.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rackmount.application.config import ConfigError
from rackmount.domain import ConfigurationError


class GenerationError(Exception):
    """The parameters violate structural preconditions; nothing was built."""

    def __init__(self, errors: list[ConfigurationError]) -> None:
        self.errors = errors
        names = ", ".join(e.parameter for e in errors)
        super().__init__(f"Enclosure generation refused ({names})")


class UnsupportedFormatError(Exception):
    """The requested format is unknown, or cannot be returned from this endpoint."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Format '{format_name}' is not available here "
            f"(choose one of: {', '.join(available)})"
        )


def _error_body(message: str, error_type: str, details: Any) -> dict[str, Any]:
    return {"error": message, "error_type": error_type, "details": details}


def _parameter_details(errors: list[ConfigurationError]) -> list[dict[str, str]]:
    return [{"parameter": e.parameter, "message": e.message} for e in errors]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the enclosure error handlers to ``app``."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        details = [{"path": d.get("path"), "message": d["message"]} for d in exc.details]
        return JSONResponse(
            status_code=422, content=_error_body(exc.message, exc.error_type, details)
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(str(exc), "configuration", _parameter_details([exc])),
        )

    @app.exception_handler(GenerationError)
    async def generation_error_handler(
        request: Request, exc: GenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(str(exc), "configuration", _parameter_details(exc.errors)),
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body(
                str(exc),
                "unsupported_format",
                {"format": exc.format_name, "available": exc.available},
            ),
        )
