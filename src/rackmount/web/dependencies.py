"""FastAPI dependency injection for enclosure services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from rackmount.application import GenerateEnclosureCommand, SolveDimensionsCommand


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateEnclosureCommand:
    """Get cached GenerateEnclosureCommand instance."""
    return GenerateEnclosureCommand()


@lru_cache(maxsize=1)
def get_solve_command() -> SolveDimensionsCommand:
    return SolveDimensionsCommand()


GenerateCommandDep = Annotated[GenerateEnclosureCommand, Depends(get_generate_command)]
SolveCommandDep = Annotated[SolveDimensionsCommand, Depends(get_solve_command)]
