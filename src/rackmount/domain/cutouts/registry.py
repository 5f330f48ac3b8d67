"""Cutout generator registry."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .protocol import CutoutGenerator

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=CutoutGenerator)


class CutoutRegistry:
    """Singleton registry for cutout generator types.

    Generator IDs follow the format 'cutout.name', for example
    'cutout.switch_bay' or 'cutout.ventilation'.

    Example:
        @cutout_registry.register("cutout.wire_holes")
        class WirePassThroughGenerator:
            ...

        generator = cutout_registry.get("cutout.wire_holes")()
    """

    _instance: CutoutRegistry | None = None
    _generators: dict[str, type[CutoutGenerator]]

    def __new__(cls) -> CutoutRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._generators = {}
        return cls._instance

    def register(self, generator_id: str) -> Callable[[type[G]], type[G]]:
        """Decorator to register a generator class.

        Raises:
            ValueError: If the ID is already registered or malformed.
        """

        def decorator(cls: type[G]) -> type[G]:
            if generator_id in self._generators:
                raise ValueError(f"Cutout generator '{generator_id}' already registered")
            self._validate_id(generator_id)
            self._generators[generator_id] = cls
            logger.debug(f"Registered cutout generator '{generator_id}': {cls.__name__}")
            return cls

        return decorator

    def get(self, generator_id: str) -> type[CutoutGenerator]:
        """Get a generator class by ID.

        Raises:
            KeyError: If no generator is registered with the given ID.
        """
        if generator_id not in self._generators:
            raise KeyError(f"Unknown cutout generator: {generator_id}")
        return self._generators[generator_id]

    def list(self) -> list[str]:
        """Sorted list of registered generator IDs."""
        return sorted(self._generators.keys())

    def _validate_id(self, generator_id: str) -> None:
        parts = generator_id.split(".")
        if len(parts) != 2 or parts[0] != "cutout" or not parts[1]:
            raise ValueError(
                f"Invalid cutout generator ID '{generator_id}': must be 'cutout.name'"
            )


cutout_registry = CutoutRegistry()
