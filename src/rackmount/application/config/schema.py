"""Pydantic configuration schema models for enclosure specifications.

This module defines the configuration schema for JSON-based enclosure
configuration files. It uses Pydantic v2 for validation and serialization.

The schema checks types and signs only. Structural preconditions that
depend on several values at once (supported rack widths, lip versus
opening size, tolerance versus wall thickness) are checked by the domain
layer so they surface as ``ConfigurationError`` with the parameter name.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for configuration files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["scad", "json", "stl", "dxf"]


class RackConfig(BaseModel):
    """Rack frame the enclosure mounts into.

    Attributes:
        width: Rack panel width in mm, 152.4 (6") or 254.0 (10")
        height: Requested height in rack units, may be fractional
        half_height_holes: Allow a fractional solved height and partial edge holes
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=254.0, gt=0)
    height: float = Field(default=1.0, gt=0)
    half_height_holes: bool = True


class SwitchConfig(BaseModel):
    """Switch units stacked in the enclosure.

    Attributes:
        width: Switch width in mm
        depth: Switch depth in mm
        height: Switch height in mm
        count: Number of stacked switches
        case_thickness: Wall and divider thickness in mm
        tolerance: Clearance added on every side of a switch opening in mm
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=200.0, gt=0)
    depth: float = Field(default=120.0, gt=0)
    height: float = Field(default=28.3, gt=0)
    count: int = Field(default=1, ge=1, le=20)
    case_thickness: float = Field(default=6.0, gt=0)
    tolerance: float = Field(default=0.42, ge=0)


class ChassisConfig(BaseModel):
    """Front panel and chassis block shape."""

    model_config = ConfigDict(extra="forbid")

    front_thickness: float = Field(default=3.0, gt=0)
    lip_thickness: float = Field(default=1.5, ge=0)
    lip_depth: float = Field(default=1.5, gt=0)
    panel_corner_radius: float = Field(default=4.0, ge=0)
    chassis_corner_radius: float = Field(default=2.0, ge=0)


class FeaturesConfig(BaseModel):
    """Optional cable management and ventilation features.

    Attributes:
        front_wire_holes: Cut wire pass-through channels beside each bay
        wire_diameter: Pass-through diameter in mm
        air_holes: Cut honeycomb ventilation on the back and side faces
        air_hole_diameter: Corner-to-corner size of one hex hole in mm
        air_hole_spacing: Centre distance between neighbouring holes in mm
        air_hole_margin: Keep-out margin around each vent face in mm
        zip_tie_hole_count: Number of zip-tie slots behind each switch
        zip_tie_hole_width: Slot width across the rack in mm
        zip_tie_hole_length: Slot length front to back in mm
        zip_tie_indent_depth: Depth of the flush recesses in mm
    """

    model_config = ConfigDict(extra="forbid")

    front_wire_holes: bool = False
    wire_diameter: float = Field(default=7.0, gt=0)
    air_holes: bool = True
    air_hole_diameter: float = Field(default=5.0, gt=0)
    air_hole_spacing: float = Field(default=7.0, gt=0)
    air_hole_margin: float = Field(default=3.0, ge=0)
    zip_tie_hole_count: int = Field(default=2, ge=0, le=50)
    zip_tie_hole_width: float = Field(default=4.0, gt=0)
    zip_tie_hole_length: float = Field(default=2.0, gt=0)
    zip_tie_indent_depth: float = Field(default=1.0, ge=0)


class OutputConfig(BaseModel):
    """Configuration for output format and file path.

    Attributes:
        format: Export format name
        path: Output file path (optional; stdout for text formats)
        print_orientation: Keep the print-bed orientation instead of the
            installed one
        stl_part: Which part the STL preview tessellates
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "scad"
    path: str | None = None
    print_orientation: bool = True
    stl_part: Literal["body", "cutters"] = "body"


class EnclosureConfiguration(BaseModel):
    """Root configuration model for enclosure specifications.

    Every section has defaults, so ``{"schema_version": "1.0"}`` is a
    complete configuration for a single 1U switch in a 10" rack.

    Example:
        >>> config = EnclosureConfiguration(
        ...     schema_version="1.0",
        ...     switch=SwitchConfig(count=3, height=28.3),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    rack: RackConfig = Field(default_factory=RackConfig)
    switch: SwitchConfig = Field(default_factory=SwitchConfig)
    chassis: ChassisConfig = Field(default_factory=ChassisConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
