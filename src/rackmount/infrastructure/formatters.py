"""Output formatters for enclosure reports."""

from __future__ import annotations

from typing import Any

from rackmount.domain import (
    DegenerateGeometryWarning,
    EnclosureParameters,
    HoleVisibility,
    MountingHole,
    SolvedDimensions,
    VentCell,
)


def dimensions_to_dict(dims: SolvedDimensions) -> dict[str, Any]:
    """Plain JSON-compatible view of the solved dimensions."""
    return {
        "rack_width": dims.rack_width,
        "rack_center": dims.rack_center,
        "requested_rack_units": dims.requested_rack_units,
        "adjusted_rack_units": dims.adjusted_rack_units,
        "was_adjusted": dims.was_adjusted,
        "total_height_mm": dims.total_height_mm,
        "required_height_mm": dims.required_height_mm,
        "total_switch_area_mm": dims.total_switch_area_mm,
        "chassis_width": dims.chassis_width,
        "chassis_depth": dims.chassis_depth,
        "total_chassis_height": dims.total_chassis_height,
        "chassis_left": dims.chassis_left,
        "chassis_bottom": dims.chassis_bottom,
        "switch_left": dims.switch_left,
        "y_centers": list(dims.y_centers),
    }


def mounting_hole_to_dict(hole: MountingHole) -> dict[str, Any]:
    return {
        "side": hole.side.value,
        "u_index": hole.u_index,
        "slot_offset": hole.slot_offset,
        "x": hole.x_position,
        "y": hole.y_position,
        "visibility": hole.visibility.value,
    }


def vent_cell_to_dict(cell: VentCell) -> dict[str, Any]:
    return {
        "face": cell.face.value,
        "bay_index": cell.bay_index,
        "row": cell.grid_row,
        "col": cell.grid_col,
        "stagger_offset": cell.stagger_offset,
        "u": cell.u,
        "v": cell.v,
    }


def warning_to_dict(warning: DegenerateGeometryWarning) -> dict[str, Any]:
    return {
        "generator": warning.generator,
        "message": warning.message,
        "face": warning.face,
        "bay_index": warning.bay_index,
    }


class DimensionReportFormatter:
    """Formats solved dimensions as a plain-text report."""

    def format(
        self, dims: SolvedDimensions, params: EnclosureParameters | None = None
    ) -> str:
        lines = [
            "ENCLOSURE DIMENSIONS",
            "=" * 50,
            f"{'Rack width:':<28} {dims.rack_width:.2f} mm",
            f"{'Requested height:':<28} {dims.requested_rack_units:g} U",
        ]
        adjusted = f"{dims.adjusted_rack_units:.3f} U ({dims.total_height_mm:.2f} mm)"
        if dims.was_adjusted:
            adjusted += "  [grown to fit the stack]"
        lines.append(f"{'Solved height:':<28} {adjusted}")
        lines.append(f"{'Required stack height:':<28} {dims.required_height_mm:.2f} mm")
        lines.append("-" * 50)
        lines.append(
            f"{'Chassis (W x H x D):':<28} {dims.chassis_width:.2f} x "
            f"{dims.total_chassis_height:.2f} x {dims.chassis_depth:.2f} mm"
        )
        lines.append(
            f"{'Chassis origin (X, Y):':<28} {dims.chassis_left:.2f}, {dims.chassis_bottom:.2f}"
        )
        if params is not None:
            lines.append(
                f"{'Switch opening (W x H):':<28} {params.cutout_width:.2f} x "
                f"{params.cutout_height:.2f} mm"
            )
        lines.append("-" * 50)
        for i, y in enumerate(dims.y_centers):
            lines.append(f"{f'Bay {i} centre Y:':<28} {y:.2f} mm")
        return "\n".join(lines)


class MountingHoleReportFormatter:
    """Formats mounting-hole candidates as a table.

    Hidden candidates are listed only when ``include_hidden`` is set.
    """

    def __init__(self, include_hidden: bool = False) -> None:
        self._include_hidden = include_hidden

    def format(self, holes: list[MountingHole]) -> str:
        rows = [
            hole
            for hole in holes
            if self._include_hidden or hole.visibility is not HoleVisibility.HIDDEN
        ]
        if not rows:
            return "No mounting holes."

        lines = [
            "MOUNTING HOLES",
            "=" * 64,
            f"{'Side':<7} {'U':<4} {'Offset':<9} {'X':<10} {'Y':<10} {'Visibility'}",
            "-" * 64,
        ]
        for hole in rows:
            lines.append(
                f"{hole.side.value:<7} {hole.u_index:<4} {hole.slot_offset:<9.3f} "
                f"{hole.x_position:<10.3f} {hole.y_position:<10.3f} {hole.visibility.value}"
            )
        lines.append("-" * 64)
        lines.append(f"{len(rows)} hole(s)")
        return "\n".join(lines)


class WarningFormatter:
    """Formats degenerate-geometry warnings, one per line."""

    def format(self, warnings: tuple[DegenerateGeometryWarning, ...] | list) -> str:
        if not warnings:
            return ""
        return "\n".join(f"Warning: {warning}" for warning in warnings)
