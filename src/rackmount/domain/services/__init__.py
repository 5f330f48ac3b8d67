"""Domain services: dimension solving, body construction and assembly."""

from .dimension_solver import (
    DimensionSolver,
    SolvedDimensions,
    required_height_mm,
    solve_rack_height,
    switch_y_centers,
)
from .chassis_profile import ChassisProfileBuilder
from .assembler import EnclosureAssembler, EnclosureModel, orient

__all__ = [
    "ChassisProfileBuilder",
    "DimensionSolver",
    "EnclosureAssembler",
    "EnclosureModel",
    "SolvedDimensions",
    "orient",
    "required_height_mm",
    "solve_rack_height",
    "switch_y_centers",
]
