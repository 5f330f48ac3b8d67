"""Immutable enclosure parameter set and its structural preconditions."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigurationError
from .value_objects import EnclosureFeature, RackStandard, RackWidth

# Cutters overshoot every face they pierce by this much.
CUT_CLEARANCE = 1.0


@dataclass(frozen=True)
class EnclosureParameters:
    """Every raw input of one generation run, in millimetres.

    Rack:
        rack_width: Rack panel width, 152.4 (6") or 254.0 (10").
        rack_height: Requested height in rack units, may be fractional.
        half_height_holes: Allow fractional solved height and partial edge holes.

    Switch stack:
        switch_width, switch_depth, switch_height: Per-unit switch size.
        switch_count: Number of stacked bays.
        case_thickness: Thickness of the outer walls and of bay dividers.
        tolerance: Clearance added on every side of a switch cutout.

    Chassis:
        front_thickness: Thickness of the front panel.
        lip_thickness: Width of the retention ledge around each bay opening.
        lip_depth: How far behind the front face the switch seats.
        panel_corner_radius: Corner rounding of the front panel.
        chassis_corner_radius: Corner rounding of the chassis block.

    Features:
        zip_tie_hole_count: Number of zip-tie slots across the switch width.
        zip_tie_hole_width: Slot size across the rack (X).
        zip_tie_hole_length: Slot size front to back (Z).
        zip_tie_indent_depth: Depth of the top and bottom zip-tie recesses.
        front_wire_holes: Cut wire pass-through channels beside each bay.
        wire_diameter: Pass-through diameter.
        air_holes: Cut honeycomb ventilation on the back and sides.
        air_hole_diameter: Corner-to-corner size of one hex hole.
        air_hole_spacing: Centre distance between neighbouring holes.
        air_hole_margin: Keep-out margin on every side of a vent face.

    Output:
        print_orientation: True keeps the print-bed orientation, False
            stands the enclosure up as installed.
    """

    rack_width: float = RackWidth.TEN_INCH.value
    rack_height: float = 1.0
    half_height_holes: bool = True

    switch_width: float = 200.0
    switch_depth: float = 120.0
    switch_height: float = 28.3
    switch_count: int = 1
    case_thickness: float = 6.0
    tolerance: float = 0.42

    front_thickness: float = 3.0
    lip_thickness: float = 1.5
    lip_depth: float = 1.5
    panel_corner_radius: float = 4.0
    chassis_corner_radius: float = 2.0

    zip_tie_hole_count: int = 2
    zip_tie_hole_width: float = 4.0
    zip_tie_hole_length: float = 2.0
    zip_tie_indent_depth: float = 1.0

    front_wire_holes: bool = False
    wire_diameter: float = 7.0

    air_holes: bool = True
    air_hole_diameter: float = 5.0
    air_hole_spacing: float = 7.0
    air_hole_margin: float = 3.0

    print_orientation: bool = True

    @property
    def rack_standard(self) -> RackStandard:
        return RackStandard.for_width(self.rack_width)

    @property
    def enabled_features(self) -> frozenset[EnclosureFeature]:
        """Optional features switched on by the boolean flags."""
        features: set[EnclosureFeature] = set()
        if self.front_wire_holes:
            features.add(EnclosureFeature.WIRE_PASS_THROUGH)
        if self.air_holes:
            features.add(EnclosureFeature.VENTILATION)
        return frozenset(features)

    @property
    def cutout_width(self) -> float:
        return self.switch_width + 2 * self.tolerance

    @property
    def cutout_height(self) -> float:
        return self.switch_height + 2 * self.tolerance

    @property
    def chassis_depth(self) -> float:
        """Front face to back face, including the zip-tie band behind the switch."""
        return (
            self.lip_depth
            + self.switch_depth
            + self.tolerance
            + self.zip_tie_hole_length
            + self.case_thickness
        )


def find_configuration_errors(params: EnclosureParameters) -> list[ConfigurationError]:
    """Check every structural precondition and collect the violations."""
    errors: list[ConfigurationError] = []

    standard: RackStandard | None = None
    try:
        standard = params.rack_standard
    except ConfigurationError as e:
        errors.append(e)

    if params.rack_height <= 0:
        errors.append(ConfigurationError("rack_height", "Rack height must be positive"))
    if params.switch_count < 1:
        errors.append(
            ConfigurationError("switch_count", "At least one switch is required")
        )
    for name in ("switch_width", "switch_depth"):
        if getattr(params, name) <= 0:
            errors.append(ConfigurationError(name, "Switch dimensions must be positive"))
    if params.switch_height <= 0:
        errors.append(
            ConfigurationError("switch_height", "Chassis interior height must be positive")
        )
    if params.case_thickness <= 0:
        errors.append(
            ConfigurationError("case_thickness", "Case thickness must be positive")
        )

    if params.tolerance < 0:
        errors.append(ConfigurationError("tolerance", "Tolerance cannot be negative"))
    elif params.case_thickness > 0 and params.tolerance >= params.case_thickness:
        errors.append(
            ConfigurationError(
                "tolerance",
                f"Tolerance {params.tolerance:g} mm leaves no wall "
                f"(case thickness {params.case_thickness:g} mm)",
            )
        )

    if standard is not None:
        chassis_width = min(
            params.switch_width + 2 * params.case_thickness, standard.max_usable_width
        )
        if chassis_width <= 0:
            errors.append(
                ConfigurationError("switch_width", "Chassis width must be positive")
            )

    if params.front_thickness <= 0:
        errors.append(
            ConfigurationError("front_thickness", "Front panel thickness must be positive")
        )
    if params.lip_thickness < 0:
        errors.append(
            ConfigurationError("lip_thickness", "Lip thickness cannot be negative")
        )
    elif params.lip_thickness * 2 >= min(params.cutout_width, params.cutout_height):
        errors.append(
            ConfigurationError("lip_thickness", "Lip closes the switch opening completely")
        )
    if params.lip_depth <= 0:
        errors.append(ConfigurationError("lip_depth", "Lip depth must be positive"))
    elif params.front_thickness >= params.chassis_depth:
        errors.append(
            ConfigurationError(
                "front_thickness",
                f"Front panel ({params.front_thickness:g} mm) is as deep as the "
                f"chassis ({params.chassis_depth:g} mm)",
            )
        )

    if params.zip_tie_hole_count < 0:
        errors.append(
            ConfigurationError("zip_tie_hole_count", "Zip-tie hole count cannot be negative")
        )
    for name in ("zip_tie_hole_width", "zip_tie_hole_length"):
        if getattr(params, name) <= 0:
            errors.append(ConfigurationError(name, "Zip-tie slot size must be positive"))
    if params.zip_tie_indent_depth < 0:
        errors.append(
            ConfigurationError("zip_tie_indent_depth", "Indent depth cannot be negative")
        )

    if params.front_wire_holes and params.wire_diameter <= 0:
        errors.append(
            ConfigurationError("wire_diameter", "Wire diameter must be positive")
        )
    if params.air_holes:
        if params.air_hole_diameter <= 0:
            errors.append(
                ConfigurationError("air_hole_diameter", "Air hole diameter must be positive")
            )
        elif params.air_hole_spacing < params.air_hole_diameter:
            errors.append(
                ConfigurationError(
                    "air_hole_spacing", "Air hole spacing must be at least the hole diameter"
                )
            )
        if params.air_hole_margin < 0:
            errors.append(
                ConfigurationError("air_hole_margin", "Air hole margin cannot be negative")
            )

    return errors


def ensure_valid(params: EnclosureParameters) -> None:
    """Raise the first structural violation, if any.

    Raises:
        ConfigurationError: If any precondition fails.
    """
    errors = find_configuration_errors(params)
    if errors:
        raise errors[0]
