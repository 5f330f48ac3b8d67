"""Infrastructure layer - formatters and exporters."""

from .exporters import ExporterRegistry, ExportManager
from .formatters import (
    DimensionReportFormatter,
    MountingHoleReportFormatter,
    WarningFormatter,
    dimensions_to_dict,
)
from .stl_exporter import CsgMeshBuilder, StlExporter

__all__ = [
    "CsgMeshBuilder",
    "DimensionReportFormatter",
    "ExportManager",
    "ExporterRegistry",
    "MountingHoleReportFormatter",
    "StlExporter",
    "WarningFormatter",
    "dimensions_to_dict",
]
