"""Exporter protocol, format registry and multi-format export manager."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rackmount.domain import EnclosureModel


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Turns an EnclosureModel into one output format.

    Attributes:
        format_name: Registry key, e.g. "scad" or "stl".
        file_extension: Extension without the leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, model: EnclosureModel, path: Path) -> None:
        """Write the model to ``path``."""
        ...

    def export_string(self, model: EnclosureModel) -> str:
        """Render the model as text.

        Raises:
            NotImplementedError: For binary formats such as STL.
        """
        ...


class ExporterRegistry:
    """Class-level registry mapping format names to exporter classes.

    Example:
        @ExporterRegistry.register("scad")
        class ScadExporter:
            format_name = "scad"
            file_extension = "scad"
            ...

        exporter = ExporterRegistry.create("stl", part="cutters")
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type], type]:
        """Class decorator registering an exporter under ``format_name``.

        Raises:
            ValueError: If the name is taken or does not match the class's
                ``format_name``.
        """

        def decorator(exporter_class: type) -> type:
            if format_name in cls._exporters:
                raise ValueError(f"Exporter for format '{format_name}' already registered")
            declared = getattr(exporter_class, "format_name", None)
            if declared != format_name:
                raise ValueError(
                    f"{exporter_class.__name__}.format_name is {declared!r}, "
                    f"expected {format_name!r}"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for a format.

        Raises:
            KeyError: If the format is unknown; the message lists the
                available formats.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"Unknown export format '{format_name}' (available: {available})"
            ) from None

    @classmethod
    def create(cls, format_name: str, **options: Any) -> Exporter:
        """Instantiate the exporter for a format with exporter-specific options."""
        return cls.get(format_name)(**options)

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes one enclosure to several formats in a single directory.

    Attributes:
        output_dir: Target directory, created on first export.
        options: Per-format constructor options, e.g.
            ``{"stl": {"part": "cutters"}, "scad": {"segments": 64}}``.
    """

    def __init__(
        self,
        output_dir: Path,
        options: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.options = dict(options or {})

    def export_all(
        self,
        formats: list[str],
        model: EnclosureModel,
        project_name: str = "enclosure",
    ) -> dict[str, Path]:
        """Export to every format as ``{project_name}.{ext}``.

        Formats are resolved before anything is written, so an unknown
        format leaves the directory untouched.

        Returns:
            Format name to written path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        exporters = [
            ExporterRegistry.create(name, **self.options.get(name, {})) for name in formats
        ]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for exporter in exporters:
            path = self.output_dir / f"{project_name}.{exporter.file_extension}"
            exporter.export(model, path)
            logger.info(f"Wrote {exporter.format_name} to {path}")
            written[exporter.format_name] = path
        return written

    def export_single(
        self,
        format_name: str,
        model: EnclosureModel,
        project_name: str = "enclosure",
    ) -> Path:
        return self.export_all([format_name], model, project_name)[format_name]
