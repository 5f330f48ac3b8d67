"""Validation structures and enclosure advisory checks.

Blocking errors are the domain's structural preconditions, reported against
configuration paths. Warnings flag configurations that generate but are
probably not what the user wants.
"""

from dataclasses import dataclass, field
from typing import Any

from rackmount.application.config.adapter import config_to_parameters, parameter_path
from rackmount.application.config.schema import EnclosureConfiguration
from rackmount.domain import (
    RACK_UNIT_MM,
    DimensionSolver,
    EnclosureParameters,
    VentFace,
    find_configuration_errors,
    required_height_mm,
)
from rackmount.domain.cutouts import GenerationContext, VentilationGridGenerator

# Wire channel reach beyond the switch side: offset d/5 plus radius d/2.
WIRE_REACH_FACTOR = 0.7


@dataclass(frozen=True)
class ValidationError:
    """Blocking problem: the configuration cannot be generated.

    Attributes:
        path: Configuration path of the offending field, e.g. "rack.width".
        message: What is wrong.
        value: The offending value, when there is a single one.
    """

    path: str
    message: str
    value: Any = None


@dataclass(frozen=True)
class ValidationWarning:
    """Advisory: the enclosure generates but is probably not what was meant."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected by the checks below.

    ``exit_code`` is what ``rackmount validate`` exits with: 1 with any
    error, 2 with warnings only, 0 when clean.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def merge(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def check_structural_errors(params: EnclosureParameters) -> ValidationResult:
    """Report every domain precondition violation against its config path."""
    result = ValidationResult()
    for error in find_configuration_errors(params):
        path = parameter_path(error.parameter)
        result.add_error(path, error.message, getattr(params, error.parameter, None))
    return result


def check_fit_advisories(params: EnclosureParameters) -> ValidationResult:
    """Warn about stacks and switches that do not fit the rack.

    A single switch never grows the rack height, so a tall single switch
    silently overflows the requested height; this is flagged here.
    """
    result = ValidationResult()
    standard = params.rack_standard

    required = required_height_mm(
        params.switch_count, params.switch_height, params.case_thickness
    )
    if params.switch_count == 1 and required / RACK_UNIT_MM > params.rack_height:
        result.add_warning(
            path="rack.height",
            message=(
                f"Switch needs {required:.1f} mm ({required / RACK_UNIT_MM:.2f}U) but the "
                f"requested height is {params.rack_height:g}U; a single switch is never "
                "grown automatically"
            ),
            suggestion=f"Set rack.height to at least {required / RACK_UNIT_MM:.2f}",
        )

    if params.cutout_width > standard.max_usable_width:
        through = "side walls"
        if params.cutout_width > standard.width:
            through += " and the front panel"
        result.add_warning(
            path="switch.width",
            message=(
                f"Switch opening of {params.cutout_width:g} mm is wider than the "
                f"{standard.max_usable_width:g} mm usable width; the bay breaks through "
                f"the {through}"
            ),
            suggestion="Use a wider rack or a narrower switch",
        )
    elif params.switch_width + 2 * params.case_thickness > standard.max_usable_width:
        result.add_warning(
            path="switch.width",
            message=(
                f"Switch width {params.switch_width:g} mm plus walls exceeds the usable "
                f"width of {standard.max_usable_width:g} mm; the side walls are thinned "
                "to fit between the rails"
            ),
            suggestion="Use a wider rack or a thinner case",
        )

    if params.front_wire_holes:
        chassis_width = min(
            params.switch_width + 2 * params.case_thickness, standard.max_usable_width
        )
        reach = params.switch_width / 2 + WIRE_REACH_FACTOR * params.wire_diameter
        if reach > chassis_width / 2:
            result.add_warning(
                path="features.wire_diameter",
                message=(
                    f"Wire channels of {params.wire_diameter:g} mm break through the "
                    "side walls"
                ),
                suggestion="Reduce the wire diameter or increase the case thickness",
            )
    return result


def check_ventilation_advisories(params: EnclosureParameters) -> ValidationResult:
    """Warn about faces where the ventilation grid does not fit."""
    result = ValidationResult()
    if not params.air_holes:
        return result
    dims = DimensionSolver().solve(params)
    context = GenerationContext(params=params, dims=dims)
    for warning in VentilationGridGenerator().generate(context).warnings:
        if warning.face == VentFace.BACK.value:
            # The back is open behind each bay; only the rear frame can be vented.
            result.add_warning(
                path="switch.case_thickness",
                message=warning.message,
                suggestion="Thicken the case to leave room for vents in the rear frame",
            )
        else:
            result.add_warning(
                path="features.air_hole_spacing",
                message=warning.message,
                suggestion="Reduce the air hole spacing or margin",
            )
    return result


def validate_config(config: EnclosureConfiguration) -> ValidationResult:
    """Perform full validation of an enclosure configuration.

    Advisory checks only run when there are no blocking errors, since they
    need solved dimensions.

    Args:
        config: An EnclosureConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    params = config_to_parameters(config)
    result = check_structural_errors(params)
    if not result.is_valid:
        return result

    result.merge(check_fit_advisories(params))
    result.merge(check_ventilation_advisories(params))
    return result
