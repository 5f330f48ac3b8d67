"""Enclosure generation endpoint."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from rackmount.application.config import config_to_parameters, load_config_from_dict
from rackmount.infrastructure.exporters import JsonTreeExporter, ScadExporter
from rackmount.web.dependencies import GenerateCommandDep
from rackmount.web.exceptions import GenerationError, UnsupportedFormatError
from rackmount.web.schemas.requests import GenerateRequest

router = APIRouter(prefix="/generate", tags=["generate"])

# Formats that can be returned inline; binary formats go through /export.
INLINE_FORMATS = ("json", "scad")


@router.post("")
async def generate_enclosure(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> Response:
    """Generate an enclosure from a full configuration.

    Returns the operation tree and solved dimensions as JSON, or the
    OpenSCAD source of the finished solid as text.

    Raises:
        UnsupportedFormatError: If the format cannot be returned inline.
        GenerationError: If the parameters violate a structural precondition.
    """
    config = load_config_from_dict(request.config)
    fmt = request.format or config.output.format
    if fmt not in INLINE_FORMATS:
        raise UnsupportedFormatError(fmt, list(INLINE_FORMATS))

    output = command.execute(config_to_parameters(config))
    if not output.is_valid:
        raise GenerationError(output.errors)

    if fmt == "json":
        return JSONResponse(content=JsonTreeExporter().build(output.model))
    return PlainTextResponse(content=ScadExporter().export_string(output.model))
