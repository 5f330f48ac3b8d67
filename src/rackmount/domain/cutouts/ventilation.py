"""Staggered honeycomb ventilation on the back and side faces."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..csg import Node, rotate, translate
from ..exceptions import DegenerateGeometryWarning
from ..parameters import CUT_CLEARANCE
from ..primitives import hex_prism
from ..value_objects import EnclosureFeature, VentCell, VentFace
from .context import GenerationContext
from .registry import cutout_registry
from .results import CutoutResult

logger = logging.getLogger(__name__)

GENERATOR_ID = "cutout.ventilation"

# Float slack for the bounds recheck.
_BOUNDS_EPS = 1e-9


@dataclass(frozen=True)
class FaceArea:
    """Planar region of one face band before the margin is applied.

    ``u`` is the horizontal face axis (X for the back, Z for the sides),
    ``v`` is world Y. ``openings`` are ``(u_min, u_max, v_min, v_max)``
    holes in the band with no material behind them; cells keep the margin
    clear of them as well.
    """

    face: VentFace
    bay_index: int
    u_min: float
    u_max: float
    v_min: float
    v_max: float
    openings: tuple[tuple[float, float, float, float], ...] = ()

    def blocked(self, u: float, v: float, clearance: float) -> bool:
        """True if a cell reaching ``clearance`` from its centre enters an opening."""
        return any(
            u + clearance > ou_min
            and u - clearance < ou_max
            and v + clearance > ov_min
            and v - clearance < ov_max
            for ou_min, ou_max, ov_min, ov_max in self.openings
        )


def grid_counts(available_u: float, available_v: float, spacing: float) -> tuple[int, int]:
    """Column and row counts that fit in the available area."""
    return math.floor(available_u / spacing), math.floor(available_v / spacing)


def plan_vent_cells(
    area: FaceArea, margin: float, diameter: float, spacing: float
) -> list[VentCell]:
    """Place a centred, staggered grid on a face and keep the cells that fit.

    Odd columns shift up by half the spacing. Staggering happens after the
    uniform grid is centred, so every cell is rechecked against the margin
    bounds; this drops the staggered row that would overflow the top edge.
    Cells reaching into one of the area's openings are dropped too.
    Returns an empty list when no column or no row fits.
    """
    u_lo, u_hi = area.u_min + margin, area.u_max - margin
    v_lo, v_hi = area.v_min + margin, area.v_max - margin
    available_u = u_hi - u_lo
    available_v = v_hi - v_lo
    cols, rows = grid_counts(available_u, available_v, spacing)
    if cols <= 0 or rows <= 0:
        return []

    start_u = u_lo + (available_u - (cols - 1) * spacing) / 2
    start_v = v_lo + (available_v - (rows - 1) * spacing) / 2
    radius = diameter / 2

    cells: list[VentCell] = []
    for col in range(cols):
        stagger = spacing / 2 if col % 2 == 1 else 0.0
        u = start_u + col * spacing
        for row in range(rows):
            v = start_v + row * spacing + stagger
            if not (
                u - radius >= u_lo - _BOUNDS_EPS
                and u + radius <= u_hi + _BOUNDS_EPS
                and v - radius >= v_lo - _BOUNDS_EPS
                and v + radius <= v_hi + _BOUNDS_EPS
            ) or area.blocked(u, v, radius + margin):
                continue
            cells.append(
                VentCell(
                    face=area.face,
                    bay_index=area.bay_index,
                    grid_row=row,
                    grid_col=col,
                    stagger_offset=stagger,
                    u=u,
                    v=v,
                )
            )
    return cells


def face_areas(context: GenerationContext) -> list[FaceArea]:
    """Back, left and right face bands for every bay.

    The bay cutter runs out through the back, so the back band is the rear
    frame around the opening: the full chassis width, and vertically up to
    the middle of the neighbouring dividers, or to the chassis edge for the
    outermost bays.
    """
    params = context.params
    dims = context.dims
    half_height = params.switch_height / 2
    half_divider = params.case_thickness / 2
    side_u = (params.lip_depth, params.lip_depth + params.switch_depth)
    last = len(dims.y_centers) - 1

    areas: list[FaceArea] = []
    for bay_index, y_center in enumerate(dims.y_centers):
        v = (y_center - half_height, y_center + half_height)
        back_v = (
            dims.chassis_bottom if bay_index == 0 else v[0] - half_divider,
            dims.chassis_top if bay_index == last else v[1] + half_divider,
        )
        opening = (
            dims.rack_center - params.cutout_width / 2,
            dims.rack_center + params.cutout_width / 2,
            y_center - params.cutout_height / 2,
            y_center + params.cutout_height / 2,
        )
        areas.append(
            FaceArea(
                VentFace.BACK,
                bay_index,
                dims.chassis_left,
                dims.chassis_right,
                *back_v,
                openings=(opening,),
            )
        )
        areas.append(FaceArea(VentFace.LEFT, bay_index, *side_u, *v))
        areas.append(FaceArea(VentFace.RIGHT, bay_index, *side_u, *v))
    return areas


@cutout_registry.register(GENERATOR_ID)
class VentilationGridGenerator:
    """Hex through-holes normal to each face, skipping faces with no room."""

    def is_enabled(self, context: GenerationContext) -> bool:
        return context.feature_enabled(EnclosureFeature.VENTILATION)

    def generate(self, context: GenerationContext) -> CutoutResult:
        params = context.params
        solids: list[Node] = []
        cells: list[VentCell] = []
        warnings: list[DegenerateGeometryWarning] = []

        for area in face_areas(context):
            face_cells = plan_vent_cells(
                area, params.air_hole_margin, params.air_hole_diameter, params.air_hole_spacing
            )
            if not face_cells:
                message = (
                    f"No room for ventilation on the {area.face.value} face of bay "
                    f"{area.bay_index}"
                )
                logger.debug(message)
                warnings.append(
                    DegenerateGeometryWarning(
                        generator=GENERATOR_ID,
                        message=message,
                        face=area.face.value,
                        bay_index=area.bay_index,
                    )
                )
                continue
            cells.extend(face_cells)
            solids.extend(self.place(context, cell) for cell in face_cells)

        return CutoutResult(
            solids=tuple(solids),
            warnings=tuple(warnings),
            metadata={"vent_cells": cells},
        )

    def place(self, context: GenerationContext, cell: VentCell) -> Node:
        """Orient a hex prism normal to the cell's face and move it into place."""
        params = context.params
        dims = context.dims
        length = params.case_thickness + 2 * CUT_CLEARANCE
        prism = hex_prism(params.air_hole_diameter, length)

        if cell.face is VentFace.BACK:
            z = dims.chassis_depth - params.case_thickness - CUT_CLEARANCE
            return translate(prism, cell.u, cell.v, z)

        # Rotating about Y by 90 degrees points the prism along +X.
        sideways = rotate(prism, y=90)
        if cell.face is VentFace.LEFT:
            x = dims.chassis_left - CUT_CLEARANCE
        else:
            x = dims.chassis_right - params.case_thickness - CUT_CLEARANCE
        return translate(sideways, x, cell.v, cell.u)
