"""Result type for cutout generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..csg import Node, union
from ..exceptions import DegenerateGeometryWarning


@dataclass(frozen=True)
class CutoutResult:
    """Output of one cutout generator.

    Attributes:
        solids: Cutter solids, each already placed in enclosure coordinates.
        warnings: Regions the generator skipped because nothing fit.
        metadata: Structured data for reports and exporters. Common keys:
            - "mounting_holes": list[MountingHole]
            - "vent_cells": list[VentCell]
            - "zip_tie_x": list[float]
            - "wire_holes": list[tuple[float, float]]
    """

    solids: tuple[Node, ...] = field(default_factory=tuple)
    warnings: tuple[DegenerateGeometryWarning, ...] = field(default_factory=tuple)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return len(self.solids) == 0

    def combined(self) -> Node:
        """Union of every cutter solid."""
        return union(*self.solids)
