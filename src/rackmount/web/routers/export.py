"""File export endpoints."""

import tempfile
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import Response

from rackmount.application.config import config_to_parameters, load_config_from_dict
from rackmount.infrastructure.exporters import ExporterRegistry
from rackmount.web.dependencies import GenerateCommandDep
from rackmount.web.exceptions import GenerationError, UnsupportedFormatError
from rackmount.web.schemas.requests import ConfigRequest

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "scad": "text/plain",
    "json": "application/json",
    "stl": "application/octet-stream",
    "dxf": "application/dxf",
}


@router.post("/{format_name}")
async def export_enclosure(
    format_name: str,
    request: ConfigRequest,
    command: GenerateCommandDep,
) -> Response:
    """Export the enclosure in any registered format as a file download.

    STL exports use output.stl_part from the configuration.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    config = load_config_from_dict(request.config)
    output = command.execute(config_to_parameters(config))
    if not output.is_valid:
        raise GenerationError(output.errors)

    options = {"part": config.output.stl_part} if format_name == "stl" else {}
    exporter = ExporterRegistry.create(format_name, **options)

    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir) / f"enclosure.{exporter.file_extension}"
        exporter.export(output.model, tmp_path)
        data = tmp_path.read_bytes()

    return Response(
        content=data,
        media_type=MEDIA_TYPES.get(format_name, "application/octet-stream"),
        headers={
            "Content-Disposition": (
                f"attachment; filename=enclosure.{exporter.file_extension}"
            )
        },
    )
