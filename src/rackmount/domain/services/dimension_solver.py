"""Dimension solver: derives all secondary geometry from the raw parameters."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..parameters import EnclosureParameters, ensure_valid
from ..value_objects import RACK_UNIT_MM

logger = logging.getLogger(__name__)


def required_height_mm(
    switch_count: int, switch_height: float, case_thickness: float
) -> float:
    """Height needed for the switch stack plus top/bottom walls and dividers.

    Wall and divider thickness are both the case thickness.
    """
    return (
        2 * case_thickness
        + switch_count * switch_height
        + (switch_count - 1) * case_thickness
    )


def solve_rack_height(
    switch_count: int,
    switch_height: float,
    case_thickness: float,
    requested_units: float,
    half_height_allowed: bool,
) -> float:
    """Reconcile the requested rack height with what the stack needs.

    A multi-switch stack that does not fit grows to the exact required height
    when half-height holes are allowed, otherwise to the next whole unit. A
    single switch never triggers growth.

    Returns:
        The adjusted rack height in rack units.
    """
    required_units = (
        required_height_mm(switch_count, switch_height, case_thickness) / RACK_UNIT_MM
    )
    if switch_count > 1 and required_units > requested_units:
        adjusted = required_units if half_height_allowed else float(math.ceil(required_units))
        logger.debug(
            f"Stack needs {required_units:.3f}U, requested {requested_units:g}U; "
            f"growing to {adjusted:.3f}U"
        )
        return adjusted
    return requested_units


@dataclass(frozen=True)
class SolvedDimensions:
    """Derived geometry shared read-only by every builder.

    Attributes:
        rack_width: Front panel width.
        chassis_width: Width of the chassis block.
        chassis_depth: Front face to back face.
        requested_rack_units: Height asked for in the configuration.
        adjusted_rack_units: Height after reconciling with the stack.
        total_height_mm: Front panel height.
        required_height_mm: Height the stack needs including walls.
        total_switch_area_mm: Switches plus dividers, without outer walls.
        total_chassis_height: Chassis block height (switch area plus walls).
        chassis_left: X of the chassis block's left face.
        chassis_bottom: Y of the chassis block's bottom face.
        switch_left: X of the switch's left side (not the cutout).
        y_centers: Vertical centre of each switch bay, bottom bay first.
    """

    rack_width: float
    chassis_width: float
    chassis_depth: float
    requested_rack_units: float
    adjusted_rack_units: float
    total_height_mm: float
    required_height_mm: float
    total_switch_area_mm: float
    total_chassis_height: float
    chassis_left: float
    chassis_bottom: float
    switch_left: float
    y_centers: tuple[float, ...]

    @property
    def rack_center(self) -> float:
        return self.rack_width / 2

    @property
    def chassis_top(self) -> float:
        return self.chassis_bottom + self.total_chassis_height

    @property
    def chassis_right(self) -> float:
        return self.chassis_left + self.chassis_width

    @property
    def was_adjusted(self) -> bool:
        return self.adjusted_rack_units != self.requested_rack_units


def switch_y_centers(
    stack_bottom: float, switch_count: int, switch_height: float, divider_thickness: float
) -> tuple[float, ...]:
    """Vertical centre of every bay, stacking upward from ``stack_bottom``."""
    return tuple(
        stack_bottom + i * (switch_height + divider_thickness) + switch_height / 2
        for i in range(switch_count)
    )


class DimensionSolver:
    """Computes ``SolvedDimensions`` once per generation run."""

    def solve(self, params: EnclosureParameters) -> SolvedDimensions:
        """Validate the parameters and derive every secondary dimension.

        Raises:
            ConfigurationError: If a structural precondition fails.
        """
        ensure_valid(params)
        standard = params.rack_standard

        adjusted_units = solve_rack_height(
            params.switch_count,
            params.switch_height,
            params.case_thickness,
            params.rack_height,
            params.half_height_holes,
        )
        total_height = RACK_UNIT_MM * adjusted_units

        chassis_width = min(
            params.switch_width + 2 * params.case_thickness, standard.max_usable_width
        )
        switch_area = (
            params.switch_count * params.switch_height
            + (params.switch_count - 1) * params.case_thickness
        )
        chassis_height = switch_area + 2 * params.case_thickness
        chassis_bottom = (total_height - chassis_height) / 2
        stack_bottom = chassis_bottom + params.case_thickness

        dims = SolvedDimensions(
            rack_width=standard.width,
            chassis_width=chassis_width,
            chassis_depth=params.chassis_depth,
            requested_rack_units=params.rack_height,
            adjusted_rack_units=adjusted_units,
            total_height_mm=total_height,
            required_height_mm=required_height_mm(
                params.switch_count, params.switch_height, params.case_thickness
            ),
            total_switch_area_mm=switch_area,
            total_chassis_height=chassis_height,
            chassis_left=(standard.width - chassis_width) / 2,
            chassis_bottom=chassis_bottom,
            switch_left=standard.centerline - params.switch_width / 2,
            y_centers=switch_y_centers(
                stack_bottom,
                params.switch_count,
                params.switch_height,
                params.case_thickness,
            ),
        )
        logger.debug(
            f"Solved {dims.adjusted_rack_units:.3f}U ({dims.total_height_mm:.2f} mm), "
            f"chassis {dims.chassis_width:.2f} x {dims.total_chassis_height:.2f} "
            f"x {dims.chassis_depth:.2f} mm"
        )
        return dims
