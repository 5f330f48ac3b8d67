"""Application layer - use cases and orchestration."""

from .commands import GenerateEnclosureCommand, SolveDimensionsCommand
from .dtos import EnclosureOutput

__all__ = [
    "EnclosureOutput",
    "GenerateEnclosureCommand",
    "SolveDimensionsCommand",
]
