"""Rack mounting slots on the front panel."""

from __future__ import annotations

import logging
import math

from ..csg import Node, translate
from ..parameters import CUT_CLEARANCE
from ..primitives import extruded_capsule
from ..value_objects import (
    HOLE_OFFSETS_MM,
    RACK_UNIT_MM,
    HoleVisibility,
    MountingHole,
    RackStandard,
    Side,
)
from .context import GenerationContext
from .registry import cutout_registry
from .results import CutoutResult

logger = logging.getLogger(__name__)


def classify_hole(
    hole_y: float, slot_height: float, total_height: float
) -> HoleVisibility:
    """Classify a slot centre against the panel's vertical extent.

    Fully inside when the slot's whole height fits on the panel, partially
    inside when it overlaps the panel but crosses the top or bottom edge.
    """
    half = slot_height / 2
    if half <= hole_y <= total_height - half:
        return HoleVisibility.FULLY_INSIDE
    if hole_y + half > 0 and hole_y - half < total_height:
        return HoleVisibility.PARTIALLY_INSIDE
    return HoleVisibility.HIDDEN


def plan_mounting_holes(
    standard: RackStandard, adjusted_units: float, total_height: float
) -> list[MountingHole]:
    """Every slot candidate on both rails, hidden ones included.

    Candidates are visited unit by unit from the top of the panel. The top or
    bottom unit is often truncated because the solved height need not be a
    whole number of units.
    """
    holes: list[MountingHole] = []
    for u_index in range(math.ceil(adjusted_units)):
        for offset in HOLE_OFFSETS_MM:
            hole_y = total_height - (u_index * RACK_UNIT_MM + offset)
            visibility = classify_hole(hole_y, standard.slot_height, total_height)
            for side, x in ((Side.LEFT, standard.left_hole_x), (Side.RIGHT, standard.right_hole_x)):
                holes.append(
                    MountingHole(
                        side=side,
                        u_index=u_index,
                        slot_offset=offset,
                        x_position=x,
                        y_position=hole_y,
                        visibility=visibility,
                    )
                )
    return holes


def should_emit(hole: MountingHole, half_height_allowed: bool) -> bool:
    if hole.visibility is HoleVisibility.FULLY_INSIDE:
        return True
    return hole.visibility is HoleVisibility.PARTIALLY_INSIDE and half_height_allowed


@cutout_registry.register("cutout.mounting_holes")
class MountingHoleGenerator:
    """Capsule slots through the front panel at the rack-standard positions."""

    def is_enabled(self, context: GenerationContext) -> bool:
        return True

    def generate(self, context: GenerationContext) -> CutoutResult:
        standard = context.rack
        candidates = plan_mounting_holes(
            standard, context.dims.adjusted_rack_units, context.dims.total_height_mm
        )
        emitted = [
            hole
            for hole in candidates
            if should_emit(hole, context.params.half_height_holes)
        ]
        skipped = len(candidates) - len(emitted)
        if skipped:
            logger.debug(f"Skipped {skipped} mounting slot candidates off the panel")

        depth = context.params.front_thickness + 2 * CUT_CLEARANCE
        slot = extruded_capsule(standard.slot_length, standard.slot_height, depth)
        solids: list[Node] = [
            translate(slot, hole.x_position, hole.y_position, -CUT_CLEARANCE)
            for hole in emitted
        ]
        return CutoutResult(
            solids=tuple(solids),
            metadata={"mounting_holes": emitted, "candidates": candidates},
        )
