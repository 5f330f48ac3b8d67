"""Exporter framework for enclosure models.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- scad: OpenSCAD source of the finished solid
- json: Operation tree, solved dimensions, holes and warnings
- stl: Tessellated preview of the body or the cutters
- dxf: 2D front-panel template

Usage:
    from rackmount.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    scad = ExporterRegistry.get("scad")().export_string(model)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["scad", "stl"], model, project_name="rack")
"""

from rackmount.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from rackmount.infrastructure.exporters.dxf import DxfPanelExporter
from rackmount.infrastructure.exporters.json_tree import JsonTreeExporter
from rackmount.infrastructure.exporters.scad import ScadExporter, node_to_scad
from rackmount.infrastructure.exporters.stl import StlPreviewExporter

__all__ = [
    "DxfPanelExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonTreeExporter",
    "ScadExporter",
    "StlPreviewExporter",
    "node_to_scad",
]
