"""OpenSCAD source exporter.

The CSG tree maps one to one onto OpenSCAD modules, so the output can be
rendered to a mesh by OpenSCAD itself.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from rackmount.domain.csg import (
    Box,
    Circle,
    Cylinder,
    Difference,
    Hull,
    LinearExtrude,
    Node,
    Rotate,
    Translate,
    Union,
)
from rackmount.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from rackmount.domain import EnclosureModel

logger = logging.getLogger(__name__)

INDENT = "  "


def format_number(value: float) -> str:
    """Compact fixed-point rendering with trailing zeros stripped."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_vector(values: tuple[float, ...]) -> str:
    return "[" + ", ".join(format_number(v) for v in values) + "]"


def _fn_suffix(segments: int | None) -> str:
    return "" if segments is None else f", $fn={segments}"


def node_to_scad(node: Node, depth: int = 0) -> list[str]:
    """Render a node and its subtree as indented OpenSCAD lines."""
    pad = INDENT * depth
    if isinstance(node, Circle):
        return [f"{pad}circle(r={format_number(node.radius)}{_fn_suffix(node.segments)});"]
    if isinstance(node, Box):
        return [f"{pad}cube({format_vector(node.size)});"]
    if isinstance(node, Cylinder):
        return [
            f"{pad}cylinder(h={format_number(node.height)}, "
            f"r={format_number(node.radius)}{_fn_suffix(node.segments)});"
        ]
    if isinstance(node, LinearExtrude):
        return [f"{pad}linear_extrude(height={format_number(node.height)})"] + node_to_scad(
            node.child, depth + 1
        )
    if isinstance(node, Translate):
        return [f"{pad}translate({format_vector(node.offset)})"] + node_to_scad(
            node.child, depth + 1
        )
    if isinstance(node, Rotate):
        return [f"{pad}rotate({format_vector(node.angles)})"] + node_to_scad(
            node.child, depth + 1
        )
    if isinstance(node, (Hull, Union, Difference)):
        lines = [f"{pad}{node.kind}() {{"]
        for child in node.children:
            lines.extend(node_to_scad(child, depth + 1))
        lines.append(f"{pad}}}")
        return lines
    raise TypeError(f"Unknown CSG node: {type(node).__name__}")


@ExporterRegistry.register("scad")
class ScadExporter:
    """Exports the finished solid as OpenSCAD source.

    Attributes:
        format_name: "scad"
        file_extension: "scad"
    """

    format_name: ClassVar[str] = "scad"
    file_extension: ClassVar[str] = "scad"

    def __init__(self, segments: int = 48) -> None:
        """Initialize the exporter.

        Args:
            segments: Global ``$fn`` for round primitives without an
                explicit segment count.
        """
        if segments < 3:
            raise ValueError("segments must be at least 3")
        self.segments = segments

    def export(self, model: EnclosureModel, path: Path) -> None:
        path.write_text(self.export_string(model), encoding="utf-8")
        logger.info(f"Exported OpenSCAD source to {path}")

    def export_string(self, model: EnclosureModel) -> str:
        dims = model.dims
        header = [
            "// Rack-mount switch enclosure",
            f"// rack width {format_number(dims.rack_width)} mm, "
            f"{dims.adjusted_rack_units:.3f}U, {model.params.switch_count} switch(es)",
            f"// chassis {format_number(dims.chassis_width)} x "
            f"{format_number(dims.total_chassis_height)} x {format_number(dims.chassis_depth)} mm",
            f"$fn = {self.segments};",
            "",
        ]
        return "\n".join(header + node_to_scad(model.solid)) + "\n"
