"""Zip-tie slots and flush indents behind the switches."""

from __future__ import annotations

from ..csg import Box, Node, translate
from ..parameters import CUT_CLEARANCE, EnclosureParameters
from .context import GenerationContext
from .registry import cutout_registry
from .results import CutoutResult


def zip_tie_positions(switch_left: float, switch_width: float, count: int) -> list[float]:
    """X centres of ``count`` slots spread evenly across the switch width."""
    spacing = switch_width / (count + 1)
    return [switch_left + spacing * (i + 1) for i in range(count)]


def zip_tie_plane(params: EnclosureParameters) -> float:
    """Z centre of the zip-tie band, directly behind the seated switch."""
    return (
        params.lip_depth
        + params.switch_depth
        + params.tolerance
        + params.zip_tie_hole_length / 2
    )


@cutout_registry.register("cutout.zip_tie")
class ZipTieGenerator:
    """Vertical slots through the whole chassis plus top and bottom recesses.

    A zip tie threads down through every slot behind the switch stack; the
    recesses let its loop lie flush with the outer faces.
    """

    def is_enabled(self, context: GenerationContext) -> bool:
        return context.params.zip_tie_hole_count > 0

    def generate(self, context: GenerationContext) -> CutoutResult:
        params = context.params
        dims = context.dims
        xs = zip_tie_positions(dims.switch_left, params.switch_width, params.zip_tie_hole_count)
        z_center = zip_tie_plane(params)
        z_start = z_center - params.zip_tie_hole_length / 2

        slot_height = dims.total_chassis_height + 2 * CUT_CLEARANCE
        solids: list[Node] = [
            translate(
                Box(size=(params.zip_tie_hole_width, slot_height, params.zip_tie_hole_length)),
                x - params.zip_tie_hole_width / 2,
                dims.chassis_bottom - CUT_CLEARANCE,
                z_start,
            )
            for x in xs
        ]
        solids.extend(self.indents(context, z_start))
        return CutoutResult(solids=tuple(solids), metadata={"zip_tie_x": xs})

    def indents(self, context: GenerationContext, z_start: float) -> list[Node]:
        params = context.params
        dims = context.dims
        depth = params.zip_tie_indent_depth
        if depth <= 0:
            return []
        indent = Box(
            size=(params.switch_width, depth + CUT_CLEARANCE, params.zip_tie_hole_length)
        )
        return [
            translate(indent, dims.switch_left, dims.chassis_top - depth, z_start),
            translate(indent, dims.switch_left, dims.chassis_bottom - CUT_CLEARANCE, z_start),
        ]
