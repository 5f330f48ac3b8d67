"""Domain errors and warnings."""

from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(Exception):
    """A parameter violates a structural precondition of the enclosure.

    Raised before any geometry is built.

    Attributes:
        parameter: Name of the offending configuration parameter.
        message: Human-readable description of the problem.
    """

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        self.message = message
        super().__init__(f"{parameter}: {message}")


@dataclass(frozen=True)
class DegenerateGeometryWarning:
    """Non-fatal notice that a generator produced nothing for some region.

    Attributes:
        generator: Registry id of the generator that skipped geometry.
        message: Human-readable description.
        face: Affected face name, if the warning is face specific.
        bay_index: Affected switch bay, if any.
    """

    generator: str
    message: str
    face: str | None = None
    bay_index: int | None = None

    def __str__(self) -> str:
        return f"[{self.generator}] {self.message}"
