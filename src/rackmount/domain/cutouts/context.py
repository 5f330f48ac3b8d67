"""Generation context shared by every cutout generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..parameters import EnclosureParameters
from ..value_objects import EnclosureFeature, RackStandard

if TYPE_CHECKING:
    from ..services.dimension_solver import SolvedDimensions


@dataclass(frozen=True)
class GenerationContext:
    """Immutable input of a cutout generator.

    Bundles the raw parameters with the solved dimensions so generators take
    one explicit argument instead of reading ambient state.

    Attributes:
        params: Raw enclosure parameters.
        dims: Dimensions derived by the solver.
    """

    params: EnclosureParameters
    dims: SolvedDimensions

    @property
    def rack(self) -> RackStandard:
        return self.params.rack_standard

    def feature_enabled(self, feature: EnclosureFeature) -> bool:
        return feature in self.params.enabled_features
