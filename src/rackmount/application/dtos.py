"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from rackmount.domain import (
    ConfigurationError,
    DegenerateGeometryWarning,
    EnclosureModel,
)


@dataclass
class EnclosureOutput:
    """Output DTO containing the generated enclosure.

    Attributes:
        model: Generated enclosure, or None if the parameters were invalid.
        errors: Every structural precondition the parameters violate.
    """

    model: EnclosureModel | None
    errors: list[ConfigurationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the enclosure was generated successfully."""
        return len(self.errors) == 0 and self.model is not None

    @property
    def warnings(self) -> tuple[DegenerateGeometryWarning, ...]:
        if self.model is None:
            return ()
        return self.model.warnings

    def error_messages(self) -> list[str]:
        return [str(error) for error in self.errors]
