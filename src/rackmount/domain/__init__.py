"""Domain layer - enclosure geometry."""

from .exceptions import ConfigurationError, DegenerateGeometryWarning
from .parameters import (
    CUT_CLEARANCE,
    EnclosureParameters,
    ensure_valid,
    find_configuration_errors,
)
from .services import (
    ChassisProfileBuilder,
    DimensionSolver,
    EnclosureAssembler,
    EnclosureModel,
    SolvedDimensions,
    required_height_mm,
    solve_rack_height,
    switch_y_centers,
)
from .value_objects import (
    HOLE_OFFSETS_MM,
    RACK_STANDARDS,
    RACK_UNIT_MM,
    EnclosureFeature,
    HoleVisibility,
    MountingHole,
    RackStandard,
    RackWidth,
    Side,
    VentCell,
    VentFace,
)

__all__ = [
    "CUT_CLEARANCE",
    "HOLE_OFFSETS_MM",
    "RACK_STANDARDS",
    "RACK_UNIT_MM",
    "ChassisProfileBuilder",
    "ConfigurationError",
    "DegenerateGeometryWarning",
    "DimensionSolver",
    "EnclosureAssembler",
    "EnclosureFeature",
    "EnclosureModel",
    "EnclosureParameters",
    "HoleVisibility",
    "MountingHole",
    "RackStandard",
    "RackWidth",
    "Side",
    "SolvedDimensions",
    "VentCell",
    "VentFace",
    "ensure_valid",
    "find_configuration_errors",
    "required_height_mm",
    "solve_rack_height",
    "switch_y_centers",
]
