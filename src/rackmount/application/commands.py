"""Application commands (use cases) for enclosure generation."""

from __future__ import annotations

import logging

from rackmount.domain import (
    DimensionSolver,
    EnclosureAssembler,
    EnclosureParameters,
    SolvedDimensions,
    find_configuration_errors,
)

from .dtos import EnclosureOutput

logger = logging.getLogger(__name__)


class GenerateEnclosureCommand:
    """Command to generate a complete enclosure from parameters."""

    def __init__(self, assembler: EnclosureAssembler | None = None) -> None:
        self.assembler = assembler or EnclosureAssembler()

    def execute(self, params: EnclosureParameters) -> EnclosureOutput:
        """Execute the generation command.

        Every precondition is checked up front; if any fails, no geometry
        is built and the output carries all of the errors.

        Returns:
            EnclosureOutput with the generated model, or the errors.
        """
        errors = find_configuration_errors(params)
        if errors:
            logger.debug(f"Refusing to generate: {len(errors)} configuration error(s)")
            return EnclosureOutput(model=None, errors=errors)

        model = self.assembler.build(params)
        logger.debug(
            f"Generated enclosure with {len(model.generators)} cutout generators "
            f"and {len(model.warnings)} warning(s)"
        )
        return EnclosureOutput(model=model)


class SolveDimensionsCommand:
    """Command to derive the solved dimensions without building geometry."""

    def __init__(self, solver: DimensionSolver | None = None) -> None:
        self.solver = solver or DimensionSolver()

    def execute(self, params: EnclosureParameters) -> SolvedDimensions:
        """Solve the dimensions.

        Raises:
            ConfigurationError: If a structural precondition fails.
        """
        return self.solver.solve(params)
