"""Protocol definition for cutout generators."""

from __future__ import annotations

from typing import Protocol

from .context import GenerationContext
from .results import CutoutResult


class CutoutGenerator(Protocol):
    """Protocol for cutout generators.

    A generator turns the generation context into cutter solids that the
    assembler subtracts from the chassis body. Generators never depend on
    each other's output, only on the context.

    Example:
        @cutout_registry.register("cutout.zip_tie")
        class ZipTieGenerator:
            def is_enabled(self, context: GenerationContext) -> bool:
                return context.params.zip_tie_hole_count > 0

            def generate(self, context: GenerationContext) -> CutoutResult:
                ...
    """

    def is_enabled(self, context: GenerationContext) -> bool:
        """Whether this generator contributes to the enclosure."""
        ...

    def generate(self, context: GenerationContext) -> CutoutResult:
        """Build the cutter solids for this feature."""
        ...
