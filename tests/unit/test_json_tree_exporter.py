"""Unit tests for the JSON operation-tree exporter."""

import json
from pathlib import Path

from rackmount.domain import EnclosureModel
from rackmount.infrastructure.exporters import JsonTreeExporter
from rackmount.infrastructure.exporters.json_tree import SCHEMA_VERSION


class TestJsonTreeExporter:
    """Tests for JsonTreeExporter."""

    def test_top_level_keys(self, default_model: EnclosureModel) -> None:
        data = JsonTreeExporter().build(default_model)

        assert data["schema_version"] == SCHEMA_VERSION
        assert set(data) >= {
            "parameters",
            "dimensions",
            "generators",
            "mounting_holes",
            "zip_tie_x",
            "wire_holes",
            "vent_cell_count",
            "warnings",
            "primitive_counts",
            "vent_cells",
            "tree",
        }

    def test_parameters_resolved(self, default_model: EnclosureModel) -> None:
        data = JsonTreeExporter().build(default_model)

        assert data["parameters"]["switch_count"] == 1
        assert data["parameters"]["rack_width"] == 254.0

    def test_counts_match_model(self, stack_model: EnclosureModel) -> None:
        data = JsonTreeExporter().build(stack_model)

        assert data["vent_cell_count"] == len(stack_model.vent_cells)
        assert len(data["vent_cells"]) == len(stack_model.vent_cells)
        assert len(data["mounting_holes"]) == len(stack_model.mounting_holes)
        assert data["primitive_counts"]["cylinder"] == len(stack_model.vent_cells)

    def test_tree_root_is_difference(self, default_model: EnclosureModel) -> None:
        data = JsonTreeExporter().build(default_model)

        assert data["tree"]["type"] == "difference"
        assert data["tree"]["children"][0]["type"] == "union"

    def test_optional_sections(self, default_model: EnclosureModel) -> None:
        data = JsonTreeExporter(include_tree=False, include_vent_cells=False).build(
            default_model
        )

        assert "tree" not in data
        assert "vent_cells" not in data
        assert "vent_cell_count" in data

    def test_export_string_is_json(self, default_model: EnclosureModel) -> None:
        text = JsonTreeExporter(indent=None).export_string(default_model)

        assert "\n" not in text
        assert json.loads(text)["generators"] == list(default_model.generators)

    def test_export_to_file(self, stack_model: EnclosureModel, tmp_path: Path) -> None:
        path = tmp_path / "rack.json"

        JsonTreeExporter().export(stack_model, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["dimensions"]["was_adjusted"] is True
