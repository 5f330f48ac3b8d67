"""Reusable shape builders composed from hulls of circles.

All builders take explicit geometric parameters and return CSG nodes; none
of them read configuration.
"""

from __future__ import annotations

from .csg import Circle, Cylinder, LinearExtrude, Node, hull, translate

# Hex holes are six-sided cylinders.
HEX_SEGMENTS = 6


def rounded_rectangle(width: float, height: float, radius: float) -> Node:
    """2D rectangle with its lower-left corner at the origin and rounded corners.

    The radius is clamped so the corner circles never overlap; a radius of
    zero or less degenerates to (almost) sharp corners.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Rounded rectangle dimensions must be positive")
    r = _clamp_radius(radius, width, height)
    corners = [
        (r, r),
        (width - r, r),
        (width - r, height - r),
        (r, height - r),
    ]
    return hull(*(translate(Circle(radius=r), x, y) for x, y in corners))


def capsule(length: float, height: float) -> Node:
    """2D stadium slot centred on the origin.

    Args:
        length: End-to-end length along X.
        height: Slot height along Y (diameter of the round ends).
    """
    if length <= 0 or height <= 0:
        raise ValueError("Capsule dimensions must be positive")
    r = height / 2
    half_span = max(length / 2 - r, 0.0)
    if half_span == 0:
        return Circle(radius=r)
    return hull(
        translate(Circle(radius=r), -half_span, 0),
        translate(Circle(radius=r), half_span, 0),
    )


def rounded_block(width: float, height: float, depth: float, radius: float) -> Node:
    """Box with rounded vertical edges, extruded along Z from the origin."""
    if depth <= 0:
        raise ValueError("Rounded block depth must be positive")
    return LinearExtrude(height=depth, child=rounded_rectangle(width, height, radius))


def extruded_capsule(length: float, height: float, depth: float) -> Node:
    return LinearExtrude(height=depth, child=capsule(length, height))


def hex_prism(diameter: float, length: float) -> Cylinder:
    """Hexagonal prism along +Z with the given corner-to-corner diameter."""
    return Cylinder(height=length, radius=diameter / 2, segments=HEX_SEGMENTS)


def _clamp_radius(radius: float, width: float, height: float) -> float:
    # Corner circles need a positive radius for the hull to be well formed.
    limit = min(width, height) / 2
    return min(max(radius, 1e-3), limit)
