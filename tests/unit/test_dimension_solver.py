"""Unit tests for the dimension solver.

These tests verify:
- Required stack height includes walls and dividers
- Multi-switch stacks grow to fit, fractionally or to whole units
- A single switch never grows the rack height
- Bays are stacked symmetrically inside the panel
- Chassis width is clamped to the usable rack width
"""

import math

import pytest

from rackmount.domain import (
    RACK_UNIT_MM,
    ConfigurationError,
    DimensionSolver,
    EnclosureParameters,
    required_height_mm,
    solve_rack_height,
)


class TestRequiredHeight:
    def test_three_switch_stack(self) -> None:
        assert required_height_mm(3, 28.3, 6.0) == pytest.approx(108.9)

    def test_single_switch_has_no_divider(self) -> None:
        assert required_height_mm(1, 28.3, 6.0) == pytest.approx(40.3)


class TestSolveRackHeight:
    """Tests for reconciling the requested height with the stack."""

    def test_requested_height_already_sufficient(self) -> None:
        assert solve_rack_height(3, 28.3, 6.0, 4.0, True) == 4.0

    def test_grows_fractionally_with_half_height_holes(self) -> None:
        adjusted = solve_rack_height(3, 28.3, 6.0, 2.0, True)

        assert adjusted == pytest.approx(108.9 / RACK_UNIT_MM)
        assert adjusted == pytest.approx(2.45, abs=0.01)

    def test_grows_to_whole_units_without_half_height_holes(self) -> None:
        assert solve_rack_height(3, 28.3, 6.0, 2.0, False) == 3.0

    def test_single_switch_never_grows(self) -> None:
        assert solve_rack_height(1, 60.0, 6.0, 1.0, True) == 1.0
        assert solve_rack_height(1, 60.0, 6.0, 1.0, False) == 1.0

    @pytest.mark.parametrize("count", [2, 3, 5, 8])
    @pytest.mark.parametrize("half_height", [True, False])
    def test_multi_switch_stack_never_under_provisioned(
        self, count: int, half_height: bool
    ) -> None:
        required = required_height_mm(count, 28.3, 6.0) / RACK_UNIT_MM
        adjusted = solve_rack_height(count, 28.3, 6.0, 1.0, half_height)

        assert adjusted >= required - 1e-9
        if not half_height:
            assert adjusted == math.ceil(required)


class TestDimensionSolver:
    """Tests for DimensionSolver.solve."""

    def test_default_single_switch(self, default_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(default_params)

        assert dims.rack_width == 254.0
        assert dims.adjusted_rack_units == 1.0
        assert dims.total_height_mm == pytest.approx(RACK_UNIT_MM)
        assert dims.chassis_width == pytest.approx(212.0)
        assert dims.chassis_left == pytest.approx(21.0)
        assert dims.switch_left == pytest.approx(27.0)
        assert not dims.was_adjusted

    def test_chassis_depth(self, default_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(default_params)

        # lip + switch + tolerance + zip-tie band + back wall
        assert dims.chassis_depth == pytest.approx(1.5 + 120.0 + 0.42 + 2.0 + 6.0)

    def test_stack_grows(self, stack_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(stack_params)

        assert dims.was_adjusted
        assert dims.total_height_mm == pytest.approx(108.9)
        assert dims.total_chassis_height == pytest.approx(108.9)
        assert dims.total_switch_area_mm == pytest.approx(3 * 28.3 + 2 * 6.0)

    def test_bays_centred_in_panel(self) -> None:
        params = EnclosureParameters(switch_count=3, rack_height=4.0)
        dims = DimensionSolver().solve(params)

        assert dims.total_height_mm == pytest.approx(4 * RACK_UNIT_MM)
        assert dims.chassis_bottom == pytest.approx(34.45)
        assert dims.y_centers == pytest.approx((54.6, 88.9, 123.2))
        assert dims.y_centers[1] == pytest.approx(dims.total_height_mm / 2)
        assert dims.chassis_top - dims.total_height_mm / 2 == pytest.approx(
            dims.total_height_mm / 2 - dims.chassis_bottom
        )

    def test_bays_spaced_by_switch_and_divider(self) -> None:
        params = EnclosureParameters(switch_count=4, rack_height=4.0)
        dims = DimensionSolver().solve(params)

        gaps = [b - a for a, b in zip(dims.y_centers, dims.y_centers[1:])]
        assert gaps == pytest.approx([28.3 + 6.0] * 3)

    def test_chassis_width_clamped_to_usable_width(self) -> None:
        params = EnclosureParameters(rack_width=152.4, switch_width=120.0)
        dims = DimensionSolver().solve(params)

        assert dims.chassis_width == pytest.approx(122.25)
        assert dims.chassis_left + dims.chassis_width / 2 == pytest.approx(76.2)

    def test_invalid_parameters_raise(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            DimensionSolver().solve(EnclosureParameters(rack_width=200.0))

        assert exc_info.value.parameter == "rack_width"
