"""Adapter to convert EnclosureConfiguration to domain objects.

The configuration schema is nested by concern (rack, switch, chassis,
features, output); the domain works from one flat, immutable
``EnclosureParameters`` value. This module maps between the two and back
from domain parameter names to configuration paths for error reporting.
"""

from rackmount.application.config.schema import EnclosureConfiguration
from rackmount.domain import EnclosureParameters

# Domain parameter name -> JSON path in the configuration file
PARAMETER_PATHS: dict[str, str] = {
    "rack_width": "rack.width",
    "rack_height": "rack.height",
    "half_height_holes": "rack.half_height_holes",
    "switch_width": "switch.width",
    "switch_depth": "switch.depth",
    "switch_height": "switch.height",
    "switch_count": "switch.count",
    "case_thickness": "switch.case_thickness",
    "tolerance": "switch.tolerance",
    "front_thickness": "chassis.front_thickness",
    "lip_thickness": "chassis.lip_thickness",
    "lip_depth": "chassis.lip_depth",
    "panel_corner_radius": "chassis.panel_corner_radius",
    "chassis_corner_radius": "chassis.chassis_corner_radius",
    "zip_tie_hole_count": "features.zip_tie_hole_count",
    "zip_tie_hole_width": "features.zip_tie_hole_width",
    "zip_tie_hole_length": "features.zip_tie_hole_length",
    "zip_tie_indent_depth": "features.zip_tie_indent_depth",
    "front_wire_holes": "features.front_wire_holes",
    "wire_diameter": "features.wire_diameter",
    "air_holes": "features.air_holes",
    "air_hole_diameter": "features.air_hole_diameter",
    "air_hole_spacing": "features.air_hole_spacing",
    "air_hole_margin": "features.air_hole_margin",
    "print_orientation": "output.print_orientation",
}


def parameter_path(parameter: str) -> str:
    """JSON path of a domain parameter, or the name itself if unmapped."""
    return PARAMETER_PATHS.get(parameter, parameter)


def config_to_parameters(config: EnclosureConfiguration) -> EnclosureParameters:
    """Convert a validated configuration into domain parameters.

    Example:
        >>> config = load_config(Path("enclosure.json"))
        >>> params = config_to_parameters(config)
        >>> EnclosureAssembler().build(params)
    """
    rack = config.rack
    switch = config.switch
    chassis = config.chassis
    features = config.features

    return EnclosureParameters(
        rack_width=rack.width,
        rack_height=rack.height,
        half_height_holes=rack.half_height_holes,
        switch_width=switch.width,
        switch_depth=switch.depth,
        switch_height=switch.height,
        switch_count=switch.count,
        case_thickness=switch.case_thickness,
        tolerance=switch.tolerance,
        front_thickness=chassis.front_thickness,
        lip_thickness=chassis.lip_thickness,
        lip_depth=chassis.lip_depth,
        panel_corner_radius=chassis.panel_corner_radius,
        chassis_corner_radius=chassis.chassis_corner_radius,
        zip_tie_hole_count=features.zip_tie_hole_count,
        zip_tie_hole_width=features.zip_tie_hole_width,
        zip_tie_hole_length=features.zip_tie_hole_length,
        zip_tie_indent_depth=features.zip_tie_indent_depth,
        front_wire_holes=features.front_wire_holes,
        wire_diameter=features.wire_diameter,
        air_holes=features.air_holes,
        air_hole_diameter=features.air_hole_diameter,
        air_hole_spacing=features.air_hole_spacing,
        air_hole_margin=features.air_hole_margin,
        print_orientation=config.output.print_orientation,
    )
