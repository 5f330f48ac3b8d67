"""JSON exporter with the operation tree, solved dimensions and features.

Exports:
- The input parameters (all defaults resolved)
- Solved dimensions
- Emitted mounting holes, ventilation cells, zip-tie and wire positions
- Degenerate-geometry warnings
- The oriented CSG operation tree
"""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from rackmount.domain.csg import count_primitives, to_dict
from rackmount.infrastructure.exporters.base import ExporterRegistry
from rackmount.infrastructure.formatters import (
    dimensions_to_dict,
    mounting_hole_to_dict,
    vent_cell_to_dict,
    warning_to_dict,
)

if TYPE_CHECKING:
    from rackmount.domain import EnclosureModel


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonTreeExporter:
    """JSON exporter for the whole generation result.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(
        self,
        include_tree: bool = True,
        include_vent_cells: bool = True,
        indent: int | None = 2,
    ) -> None:
        """Initialize the JSON exporter.

        Args:
            include_tree: Whether to include the CSG operation tree.
            include_vent_cells: Whether to list every ventilation cell.
            indent: JSON indentation level (None for compact output).
        """
        self.include_tree = include_tree
        self.include_vent_cells = include_vent_cells
        self.indent = indent

    def export(self, model: EnclosureModel, path: Path) -> None:
        path.write_text(self.export_string(model), encoding="utf-8")
        logger.info(f"Exported JSON to {path}")

    def export_string(self, model: EnclosureModel) -> str:
        return json.dumps(self.build(model), indent=self.indent)

    def build(self, model: EnclosureModel) -> dict[str, Any]:
        """Build the complete JSON structure."""
        result: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "parameters": dataclasses.asdict(model.params),
            "dimensions": dimensions_to_dict(model.dims),
            "generators": list(model.generators),
            "mounting_holes": [mounting_hole_to_dict(h) for h in model.mounting_holes],
            "zip_tie_x": list(model.zip_tie_x),
            "wire_holes": [list(position) for position in model.wire_holes],
            "vent_cell_count": len(model.vent_cells),
            "warnings": [warning_to_dict(w) for w in model.warnings],
            "primitive_counts": count_primitives(model.solid),
        }
        if self.include_vent_cells:
            result["vent_cells"] = [vent_cell_to_dict(c) for c in model.vent_cells]
        if self.include_tree:
            result["tree"] = to_dict(model.solid)
        return result
