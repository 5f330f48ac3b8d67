"""Value objects for the rack enclosure domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import ConfigurationError

# Vertical pitch of one rack unit (EIA-310).
RACK_UNIT_MM = 44.45

# Hole centres within a rack unit, measured down from the top of the unit.
HOLE_OFFSETS_MM: tuple[float, float, float] = (6.35, 22.225, 38.1)


class RackWidth(float, Enum):
    """Supported rack panel widths in millimetres."""

    SIX_INCH = 152.4
    TEN_INCH = 254.0

    @classmethod
    def from_value(cls, value: float) -> RackWidth:
        """Look up a rack width, tolerating float round-off.

        Raises:
            ConfigurationError: If the value is not a supported standard.
        """
        for member in cls:
            if abs(member.value - value) < 1e-6:
                return member
        supported = ", ".join(f"{m.value:g}" for m in cls)
        raise ConfigurationError(
            "rack_width",
            f"Unsupported rack width {value:g} mm (supported: {supported})",
        )


@dataclass(frozen=True)
class RackStandard:
    """Fixed mounting geometry for one rack width.

    Attributes:
        width: Rack panel width in mm.
        hole_spacing: Centre-to-centre distance between left and right holes.
        slot_length: End-to-end length of the capsule mounting slot (X).
        slot_height: Height (diameter) of the capsule mounting slot (Y).
        max_usable_width: Widest chassis that fits between the rack rails.
    """

    width: float
    hole_spacing: float
    slot_length: float
    slot_height: float
    max_usable_width: float

    @property
    def centerline(self) -> float:
        """X coordinate of the rack centreline."""
        return self.width / 2

    @property
    def left_hole_x(self) -> float:
        return self.centerline - self.hole_spacing / 2

    @property
    def right_hole_x(self) -> float:
        return self.centerline + self.hole_spacing / 2

    @classmethod
    def for_width(cls, width: float | RackWidth) -> RackStandard:
        """Return the standard for a rack width.

        Raises:
            ConfigurationError: If the width is not 152.4 or 254.0 mm.
        """
        return RACK_STANDARDS[RackWidth.from_value(float(width))]


RACK_STANDARDS: dict[RackWidth, RackStandard] = {
    RackWidth.SIX_INCH: RackStandard(
        width=152.4,
        hole_spacing=136.526,
        slot_length=6.5,
        slot_height=3.25,
        max_usable_width=122.25,
    ),
    RackWidth.TEN_INCH: RackStandard(
        width=254.0,
        hole_spacing=236.525,
        slot_length=10.0,
        slot_height=7.0,
        max_usable_width=222.25,
    ),
}


class Side(str, Enum):
    """Rack rail side."""

    LEFT = "left"
    RIGHT = "right"


class HoleVisibility(str, Enum):
    """How much of a mounting slot lies on the front panel.

    Attributes:
        FULLY_INSIDE: The whole slot fits between the panel's top and bottom.
        PARTIALLY_INSIDE: The slot overlaps the panel but crosses an edge.
        HIDDEN: The slot is entirely off the panel.
    """

    FULLY_INSIDE = "fully_inside"
    PARTIALLY_INSIDE = "partially_inside"
    HIDDEN = "hidden"


class VentFace(str, Enum):
    """Chassis faces that carry a ventilation grid."""

    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class EnclosureFeature(str, Enum):
    """Optional cutout features toggled by configuration."""

    WIRE_PASS_THROUGH = "wire_pass_through"
    VENTILATION = "ventilation"


@dataclass(frozen=True)
class MountingHole:
    """A rack mounting slot candidate on the front panel.

    Attributes:
        side: Which rail the slot belongs to.
        u_index: Rack unit index counted from the top (0-based).
        slot_offset: Offset of the hole within its unit, from the unit top.
        x_position: X of the slot centre.
        y_position: Y of the slot centre (0 = panel bottom).
        visibility: Classification against the panel height.
    """

    side: Side
    u_index: int
    slot_offset: float
    x_position: float
    y_position: float
    visibility: HoleVisibility


@dataclass(frozen=True)
class VentCell:
    """One ventilation hole on a chassis face.

    Face-local coordinates: ``u`` runs horizontally along the face, ``v`` is
    the world Y coordinate.

    Attributes:
        face: Face the cell pierces.
        bay_index: Switch bay the face band belongs to.
        grid_row: Row index within the grid.
        grid_col: Column index within the grid.
        stagger_offset: Vertical shift applied to the cell's column.
        u: Horizontal face coordinate of the hole centre.
        v: Vertical coordinate of the hole centre.
    """

    face: VentFace
    bay_index: int
    grid_row: int
    grid_col: int
    stagger_offset: float
    u: float
    v: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.u, self.v)
