"""Dimension solving endpoint."""

from fastapi import APIRouter

from rackmount.application.config import config_to_parameters, load_config_from_dict
from rackmount.domain.cutouts import plan_mounting_holes, should_emit
from rackmount.infrastructure.formatters import dimensions_to_dict, mounting_hole_to_dict
from rackmount.web.dependencies import SolveCommandDep
from rackmount.web.schemas.requests import ConfigRequest
from rackmount.web.schemas.responses import SolveResponse

router = APIRouter(prefix="/solve", tags=["solve"])


@router.post("", response_model=SolveResponse)
async def solve_dimensions(
    request: ConfigRequest,
    command: SolveCommandDep,
) -> SolveResponse:
    """Solve the enclosure dimensions without building geometry."""
    params = config_to_parameters(load_config_from_dict(request.config))
    dims = command.execute(params)
    holes = [
        hole
        for hole in plan_mounting_holes(
            params.rack_standard, dims.adjusted_rack_units, dims.total_height_mm
        )
        if should_emit(hole, params.half_height_holes)
    ]
    return SolveResponse(
        dimensions=dimensions_to_dict(dims),
        mounting_holes=[mounting_hole_to_dict(h) for h in holes],
    )
