"""Unit tests for report formatters and JSON serializers."""

import pytest

from rackmount.domain import (
    DegenerateGeometryWarning,
    DimensionSolver,
    EnclosureModel,
    EnclosureParameters,
    RackStandard,
)
from rackmount.domain.cutouts import plan_mounting_holes
from rackmount.infrastructure import (
    DimensionReportFormatter,
    MountingHoleReportFormatter,
    WarningFormatter,
    dimensions_to_dict,
)
from rackmount.infrastructure.formatters import (
    mounting_hole_to_dict,
    vent_cell_to_dict,
    warning_to_dict,
)


class TestDimensionReportFormatter:
    """Tests for DimensionReportFormatter."""

    def test_report_sections(self, default_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(default_params)

        report = DimensionReportFormatter().format(dims, default_params)

        assert report.startswith("ENCLOSURE DIMENSIONS")
        assert "254.00 mm" in report
        assert "1.000 U" in report
        assert "Switch opening" in report
        assert "Bay 0 centre Y:" in report
        assert "grown to fit" not in report

    def test_grown_stack_flagged(self, stack_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(stack_params)

        report = DimensionReportFormatter().format(dims)

        assert "[grown to fit the stack]" in report
        assert "Bay 2 centre Y:" in report
        assert "Switch opening" not in report


class TestMountingHoleReportFormatter:
    """Tests for MountingHoleReportFormatter."""

    @pytest.fixture
    def holes(self):
        return plan_mounting_holes(RackStandard.for_width(254.0), 2.45, 108.9)

    def test_hidden_holes_excluded_by_default(self, holes) -> None:
        report = MountingHoleReportFormatter().format(holes)

        assert report.startswith("MOUNTING HOLES")
        assert "hidden" not in report
        assert report.endswith("16 hole(s)")

    def test_include_hidden(self, holes) -> None:
        report = MountingHoleReportFormatter(include_hidden=True).format(holes)

        assert "hidden" in report
        assert report.endswith("18 hole(s)")

    def test_empty(self) -> None:
        assert MountingHoleReportFormatter().format([]) == "No mounting holes."


class TestWarningFormatter:
    def test_no_warnings(self) -> None:
        assert WarningFormatter().format(()) == ""

    def test_one_line_per_warning(self) -> None:
        warnings = (
            DegenerateGeometryWarning("cutout.ventilation", "No room", "back", 0),
            DegenerateGeometryWarning("cutout.ventilation", "No room", "left", 0),
        )

        text = WarningFormatter().format(warnings)

        assert text.splitlines() == [
            "Warning: [cutout.ventilation] No room",
            "Warning: [cutout.ventilation] No room",
        ]


class TestSerializers:
    def test_dimensions_to_dict(self, stack_model: EnclosureModel) -> None:
        data = dimensions_to_dict(stack_model.dims)

        assert data["was_adjusted"] is True
        assert data["total_height_mm"] == pytest.approx(108.9)
        assert len(data["y_centers"]) == 3
        assert isinstance(data["y_centers"], list)

    def test_mounting_hole_to_dict(self, default_model: EnclosureModel) -> None:
        data = mounting_hole_to_dict(default_model.mounting_holes[0])

        assert data["side"] == "left"
        assert data["visibility"] == "fully_inside"
        assert set(data) == {"side", "u_index", "slot_offset", "x", "y", "visibility"}

    def test_vent_cell_to_dict(self, default_model: EnclosureModel) -> None:
        data = vent_cell_to_dict(default_model.vent_cells[0])

        assert data["face"] in {"back", "left", "right"}
        assert set(data) == {"face", "bay_index", "row", "col", "stagger_offset", "u", "v"}

    def test_warning_to_dict(self) -> None:
        data = warning_to_dict(DegenerateGeometryWarning("cutout.ventilation", "msg"))

        assert data == {
            "generator": "cutout.ventilation",
            "message": "msg",
            "face": None,
            "bay_index": None,
        }
