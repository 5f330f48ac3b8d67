"""Outer solid body: front panel plus the extruded chassis block."""

from __future__ import annotations

from ..csg import Node, translate, union
from ..parameters import EnclosureParameters
from ..primitives import rounded_block
from .dimension_solver import SolvedDimensions


class ChassisProfileBuilder:
    """Builds the positive body every cutout is subtracted from.

    The front panel spans the whole rack width and solved height. The chassis
    block sits behind it, centred in width and height. The two use separate
    corner radii.
    """

    def build(self, params: EnclosureParameters, dims: SolvedDimensions) -> Node:
        return union(self.front_panel(params, dims), self.chassis_block(params, dims))

    def front_panel(self, params: EnclosureParameters, dims: SolvedDimensions) -> Node:
        return rounded_block(
            dims.rack_width,
            dims.total_height_mm,
            params.front_thickness,
            params.panel_corner_radius,
        )

    def chassis_block(self, params: EnclosureParameters, dims: SolvedDimensions) -> Node:
        block = rounded_block(
            dims.chassis_width,
            dims.total_chassis_height,
            dims.chassis_depth - params.front_thickness,
            params.chassis_corner_radius,
        )
        return translate(
            block, dims.chassis_left, dims.chassis_bottom, params.front_thickness
        )
