"""STL format exporter for enclosure previews."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from rackmount.infrastructure.exporters.base import ExporterRegistry
from rackmount.infrastructure.stl_exporter import CsgMeshBuilder
from rackmount.infrastructure.stl_exporter import StlExporter as StlExporterImpl

if TYPE_CHECKING:
    from rackmount.domain import EnclosureModel


@ExporterRegistry.register("stl")
class StlPreviewExporter:
    """Exports a tessellated preview to STL.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(self, mesh_builder: CsgMeshBuilder | None = None, part: str = "body") -> None:
        """Initialize the STL exporter.

        Args:
            mesh_builder: Optional mesh builder for dependency injection.
            part: "body" for the positive chassis, "cutters" for the union
                of every cutout.
        """
        if part not in StlExporterImpl.PARTS:
            raise ValueError(f"Invalid part: {part}. Must be 'body' or 'cutters'")
        self._exporter = StlExporterImpl(mesh_builder=mesh_builder)
        self.part = part

    def export(self, model: EnclosureModel, path: Path) -> None:
        self._exporter.export_to_file(model, path, part=self.part)

    def export_string(self, model: EnclosureModel) -> str:
        """STL output is binary and has no string form.

        Raises:
            NotImplementedError: Always raises this exception.
        """
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )


__all__ = ["StlPreviewExporter", "StlExporterImpl", "CsgMeshBuilder"]
