"""Switch-bay cutouts with a front retention lip."""

from __future__ import annotations

from ..csg import Box, Node, translate
from ..parameters import CUT_CLEARANCE
from .context import GenerationContext
from .registry import cutout_registry
from .results import CutoutResult


@cutout_registry.register("cutout.switch_bay")
class SwitchBayGenerator:
    """Carves one stepped opening per switch.

    Each bay is two concentric boxes. The inner box is smaller by the lip on
    every side and only punches through the front lip. The outer box is the
    full cutout size; it starts ``lip_depth`` behind the front face and runs
    out through the back, so a switch slid in from the rear seats against
    the ledge.
    """

    def is_enabled(self, context: GenerationContext) -> bool:
        return True

    def generate(self, context: GenerationContext) -> CutoutResult:
        solids: list[Node] = []
        for y_center in context.dims.y_centers:
            solids.append(self.inner_cutout(context, y_center))
            solids.append(self.outer_cutout(context, y_center))
        return CutoutResult(
            solids=tuple(solids),
            metadata={"y_centers": list(context.dims.y_centers)},
        )

    def inner_cutout(self, context: GenerationContext, y_center: float) -> Node:
        params = context.params
        width = params.cutout_width - 2 * params.lip_thickness
        height = params.cutout_height - 2 * params.lip_thickness
        z_start = -(params.tolerance + CUT_CLEARANCE)
        depth = params.lip_depth - z_start + CUT_CLEARANCE
        return translate(
            Box(size=(width, height, depth)),
            context.dims.rack_center - width / 2,
            y_center - height / 2,
            z_start,
        )

    def outer_cutout(self, context: GenerationContext, y_center: float) -> Node:
        params = context.params
        width = params.cutout_width
        height = params.cutout_height
        depth = context.dims.chassis_depth - params.lip_depth + CUT_CLEARANCE
        return translate(
            Box(size=(width, height, depth)),
            context.dims.rack_center - width / 2,
            y_center - height / 2,
            params.lip_depth,
        )
