"""Assembler: body minus the union of every cutout, then orientation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..csg import Node, difference, rotate, translate, union
from ..cutouts import GENERATION_ORDER, GenerationContext, cutout_registry
from ..exceptions import DegenerateGeometryWarning
from ..parameters import EnclosureParameters, ensure_valid
from ..value_objects import MountingHole, VentCell
from .chassis_profile import ChassisProfileBuilder
from .dimension_solver import DimensionSolver, SolvedDimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnclosureModel:
    """Everything one generation run produces.

    Attributes:
        params: Parameters the model was built from.
        dims: Solved dimensions.
        body: Positive chassis profile, in build coordinates.
        cutters: Union of every cutter solid, in build coordinates.
        solid: ``body - cutters`` with the orientation transform applied.
        mounting_holes: Emitted mounting slots.
        vent_cells: Accepted ventilation cells across all faces.
        zip_tie_x: X centres of the zip-tie slots.
        wire_holes: (x, y) centres of the wire pass-through channels.
        generators: Registry ids of the generators that contributed.
        warnings: Degenerate-geometry notices from every generator.
    """

    params: EnclosureParameters
    dims: SolvedDimensions
    body: Node
    cutters: Node
    solid: Node
    mounting_holes: tuple[MountingHole, ...] = ()
    vent_cells: tuple[VentCell, ...] = ()
    zip_tie_x: tuple[float, ...] = ()
    wire_holes: tuple[tuple[float, float], ...] = ()
    generators: tuple[str, ...] = ()
    warnings: tuple[DegenerateGeometryWarning, ...] = field(default_factory=tuple)


def orient(node: Node, params: EnclosureParameters, dims: SolvedDimensions) -> Node:
    """Apply the final rigid transform.

    Print orientation leaves the solid as built, front face on the bed. The
    installed orientation stands it upright with the front face towards +Y.
    """
    if params.print_orientation:
        return node
    return translate(rotate(node, x=90), 0, dims.chassis_depth, 0)


class EnclosureAssembler:
    """Runs the whole pipeline from parameters to an oriented solid.

    The dimension solver runs first; the profile builder and every enabled
    cutout generator then work from the same read-only dimensions.
    """

    def __init__(
        self,
        solver: DimensionSolver | None = None,
        profile_builder: ChassisProfileBuilder | None = None,
        generator_ids: tuple[str, ...] = GENERATION_ORDER,
    ) -> None:
        self.solver = solver or DimensionSolver()
        self.profile_builder = profile_builder or ChassisProfileBuilder()
        self.generator_ids = generator_ids

    def build(self, params: EnclosureParameters) -> EnclosureModel:
        """Build the enclosure for one parameter set.

        Raises:
            ConfigurationError: If a structural precondition fails. Nothing
                is built in that case.
        """
        ensure_valid(params)
        dims = self.solver.solve(params)
        context = GenerationContext(params=params, dims=dims)
        body = self.profile_builder.build(params, dims)

        solids: list[Node] = []
        warnings: list[DegenerateGeometryWarning] = []
        metadata: dict[str, Any] = {}
        contributed: list[str] = []
        for generator_id in self.generator_ids:
            generator = cutout_registry.get(generator_id)()
            if not generator.is_enabled(context):
                logger.debug(f"Skipping disabled generator '{generator_id}'")
                continue
            result = generator.generate(context)
            solids.extend(result.solids)
            warnings.extend(result.warnings)
            metadata.update(result.metadata)
            contributed.append(generator_id)
            logger.debug(f"'{generator_id}' produced {len(result.solids)} cutters")

        for warning in warnings:
            logger.debug(f"Degenerate geometry: {warning}")

        cutters = union(*solids)
        solid = orient(difference(body, cutters), params, dims)
        return EnclosureModel(
            params=params,
            dims=dims,
            body=body,
            cutters=cutters,
            solid=solid,
            mounting_holes=tuple(metadata.get("mounting_holes", ())),
            vent_cells=tuple(metadata.get("vent_cells", ())),
            zip_tie_x=tuple(metadata.get("zip_tie_x", ())),
            wire_holes=tuple(metadata.get("wire_holes", ())),
            generators=tuple(contributed),
            warnings=tuple(warnings),
        )
