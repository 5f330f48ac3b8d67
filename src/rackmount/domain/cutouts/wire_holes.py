"""Wire pass-through channels beside each switch bay."""

from __future__ import annotations

from ..csg import Cylinder, Node, translate
from ..parameters import CUT_CLEARANCE
from ..value_objects import EnclosureFeature
from .context import GenerationContext
from .registry import cutout_registry
from .results import CutoutResult


def wire_hole_positions(
    rack_center: float, switch_width: float, wire_diameter: float, y_centers: tuple[float, ...]
) -> list[tuple[float, float]]:
    """(x, y) centres of the two channels per bay.

    The horizontal offset from the rack centre is ``switch_width/2 + wire_diameter/5``.
    """
    offset = switch_width / 2 + wire_diameter / 5
    positions: list[tuple[float, float]] = []
    for y in y_centers:
        positions.append((rack_center - offset, y))
        positions.append((rack_center + offset, y))
    return positions


@cutout_registry.register("cutout.wire_holes")
class WirePassThroughGenerator:
    """Round channels running front to back along both sides of each bay."""

    def is_enabled(self, context: GenerationContext) -> bool:
        return context.feature_enabled(EnclosureFeature.WIRE_PASS_THROUGH)

    def generate(self, context: GenerationContext) -> CutoutResult:
        params = context.params
        dims = context.dims
        positions = wire_hole_positions(
            dims.rack_center, params.switch_width, params.wire_diameter, dims.y_centers
        )
        channel = Cylinder(
            height=dims.chassis_depth + 2 * CUT_CLEARANCE, radius=params.wire_diameter / 2
        )
        solids: list[Node] = [translate(channel, x, y, -CUT_CLEARANCE) for x, y in positions]
        return CutoutResult(solids=tuple(solids), metadata={"wire_holes": positions})
