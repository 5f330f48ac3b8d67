"""Cutout generators subtracted from the chassis body.

Importing this package registers every built-in generator with
``cutout_registry``:

- cutout.switch_bay: stepped bay openings with a retention lip
- cutout.mounting_holes: rack-standard capsule slots
- cutout.zip_tie: zip-tie slots and flush indents
- cutout.wire_holes: wire pass-through channels (optional)
- cutout.ventilation: staggered hex ventilation grid (optional)
"""

from .context import GenerationContext
from .mounting_holes import (
    MountingHoleGenerator,
    classify_hole,
    plan_mounting_holes,
    should_emit,
)
from .protocol import CutoutGenerator
from .registry import CutoutRegistry, cutout_registry
from .results import CutoutResult
from .switch_bay import SwitchBayGenerator
from .ventilation import FaceArea, VentilationGridGenerator, face_areas, plan_vent_cells
from .wire_holes import WirePassThroughGenerator, wire_hole_positions
from .zip_tie import ZipTieGenerator, zip_tie_plane, zip_tie_positions

# Order in which the assembler runs the generators.
GENERATION_ORDER: tuple[str, ...] = (
    "cutout.switch_bay",
    "cutout.mounting_holes",
    "cutout.zip_tie",
    "cutout.wire_holes",
    "cutout.ventilation",
)

__all__ = [
    "GENERATION_ORDER",
    "CutoutGenerator",
    "CutoutRegistry",
    "CutoutResult",
    "FaceArea",
    "GenerationContext",
    "MountingHoleGenerator",
    "SwitchBayGenerator",
    "VentilationGridGenerator",
    "WirePassThroughGenerator",
    "ZipTieGenerator",
    "classify_hole",
    "cutout_registry",
    "face_areas",
    "plan_mounting_holes",
    "plan_vent_cells",
    "should_emit",
    "wire_hole_positions",
    "zip_tie_plane",
    "zip_tie_positions",
]
