"""DXF format exporter for the front-panel template.

Generates a 2D DXF drawing (R2010 format) of the front face: the rounded
panel outline, the rack mounting slots, the switch openings through the
lip and the wire pass-through holes. Useful for laser-cutting a panel or
checking rail alignment before printing.
"""

from __future__ import annotations

import logging
import math
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import units

from rackmount.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from rackmount.domain import EnclosureModel


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7},  # White - panel outline
    "HOLES": {"color": 3},  # Green - mounting slots and wire holes
    "OPENINGS": {"color": 1},  # Red - switch openings
}

# Bulge of a quarter-circle arc segment
QUARTER_BULGE = math.tan(math.radians(90) / 4)


@ExporterRegistry.register("dxf")
class DxfPanelExporter:
    """Exports the front panel as a 2D DXF template, in millimetres.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, include_openings: bool = True, include_wire_holes: bool = True) -> None:
        self.include_openings = include_openings
        self.include_wire_holes = include_wire_holes

    def export(self, model: EnclosureModel, path: Path) -> None:
        doc = self.build_document(model)
        doc.saveas(path)
        logger.info(f"Exported front panel DXF to {path}")

    def export_string(self, model: EnclosureModel) -> str:
        doc = self.build_document(model)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, model: EnclosureModel) -> Drawing:
        """Create a DXF document containing the whole template."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, props in LAYERS.items():
            doc.layers.add(name, color=cast(int, props["color"]))

        msp = doc.modelspace()
        self._draw_outline(msp, model)
        self._draw_mounting_slots(msp, model)
        if self.include_openings:
            self._draw_openings(msp, model)
        if self.include_wire_holes:
            self._draw_wire_holes(msp, model)
        return doc

    def _draw_outline(self, msp: Modelspace, model: EnclosureModel) -> None:
        w = model.dims.rack_width
        h = model.dims.total_height_mm
        r = min(max(model.params.panel_corner_radius, 0.0), w / 2, h / 2)
        if r <= 0:
            points = [(0, 0), (w, 0), (w, h), (0, h)]
            msp.add_lwpolyline(points, close=True, dxfattribs={"layer": "OUTLINE"})
            return
        points = [
            (r, 0, 0),
            (w - r, 0, QUARTER_BULGE),
            (w, r, 0),
            (w, h - r, QUARTER_BULGE),
            (w - r, h, 0),
            (r, h, QUARTER_BULGE),
            (0, h - r, 0),
            (0, r, QUARTER_BULGE),
        ]
        msp.add_lwpolyline(points, format="xyb", close=True, dxfattribs={"layer": "OUTLINE"})

    def _draw_mounting_slots(self, msp: Modelspace, model: EnclosureModel) -> None:
        standard = model.params.rack_standard
        radius = standard.slot_height / 2
        half_span = max(standard.slot_length / 2 - radius, 0.0)
        for hole in model.mounting_holes:
            cx, cy = hole.x_position, hole.y_position
            if half_span == 0:
                msp.add_circle((cx, cy), radius, dxfattribs={"layer": "HOLES"})
                continue
            points = [
                (cx - half_span, cy - radius, 0),
                (cx + half_span, cy - radius, 1),
                (cx + half_span, cy + radius, 0),
                (cx - half_span, cy + radius, 1),
            ]
            msp.add_lwpolyline(points, format="xyb", close=True, dxfattribs={"layer": "HOLES"})

    def _draw_openings(self, msp: Modelspace, model: EnclosureModel) -> None:
        params = model.params
        width = params.cutout_width - 2 * params.lip_thickness
        height = params.cutout_height - 2 * params.lip_thickness
        left = model.dims.rack_center - width / 2
        for y_center in model.dims.y_centers:
            bottom = y_center - height / 2
            points = [
                (left, bottom),
                (left + width, bottom),
                (left + width, bottom + height),
                (left, bottom + height),
            ]
            msp.add_lwpolyline(points, close=True, dxfattribs={"layer": "OPENINGS"})

    def _draw_wire_holes(self, msp: Modelspace, model: EnclosureModel) -> None:
        radius = model.params.wire_diameter / 2
        for x, y in model.wire_holes:
            msp.add_circle((x, y), radius, dxfattribs={"layer": "HOLES"})
