"""Unit tests for the switch bay, zip-tie and wire pass-through generators."""

import pytest

from rackmount.domain import (
    CUT_CLEARANCE,
    ChassisProfileBuilder,
    DimensionSolver,
    EnclosureParameters,
)
from rackmount.domain.csg import Box, LinearExtrude, Translate, Union
from rackmount.domain.cutouts import (
    GenerationContext,
    SwitchBayGenerator,
    WirePassThroughGenerator,
    ZipTieGenerator,
    wire_hole_positions,
    zip_tie_plane,
    zip_tie_positions,
)


def _context(params: EnclosureParameters) -> GenerationContext:
    return GenerationContext(params=params, dims=DimensionSolver().solve(params))


def _box_extent(node: Translate) -> tuple[tuple[float, ...], tuple[float, ...]]:
    assert isinstance(node.child, Box)
    lo = node.offset
    hi = tuple(o + s for o, s in zip(node.offset, node.child.size))
    return lo, hi


class TestSwitchBayGenerator:
    """Tests for the stepped switch openings."""

    def test_two_cutters_per_bay(self, stack_params: EnclosureParameters) -> None:
        result = SwitchBayGenerator().generate(_context(stack_params))

        assert len(result.solids) == 6
        assert result.metadata["y_centers"] == list(_context(stack_params).dims.y_centers)

    def test_inner_opening_smaller_by_lip(self, default_params: EnclosureParameters) -> None:
        context = _context(default_params)
        y = context.dims.y_centers[0]
        generator = SwitchBayGenerator()

        inner = generator.inner_cutout(context, y)
        outer = generator.outer_cutout(context, y)

        lip = default_params.lip_thickness
        assert inner.child.size[0] == pytest.approx(outer.child.size[0] - 2 * lip)
        assert inner.child.size[1] == pytest.approx(outer.child.size[1] - 2 * lip)

    def test_outer_opening_seats_switch_behind_lip(
        self, default_params: EnclosureParameters
    ) -> None:
        context = _context(default_params)
        outer = SwitchBayGenerator().outer_cutout(context, context.dims.y_centers[0])
        lo, hi = _box_extent(outer)

        assert lo[2] == pytest.approx(default_params.lip_depth)
        assert hi[2] == pytest.approx(context.dims.chassis_depth + CUT_CLEARANCE)

    def test_inner_opening_pierces_front_face(self, default_params: EnclosureParameters) -> None:
        context = _context(default_params)
        inner = SwitchBayGenerator().inner_cutout(context, context.dims.y_centers[0])
        lo, hi = _box_extent(inner)

        assert lo[2] < 0
        assert hi[2] > default_params.lip_depth

    def test_openings_centred_on_rack(self, default_params: EnclosureParameters) -> None:
        context = _context(default_params)
        y = context.dims.y_centers[0]
        for cutter in (
            SwitchBayGenerator().inner_cutout(context, y),
            SwitchBayGenerator().outer_cutout(context, y),
        ):
            lo, hi = _box_extent(cutter)
            assert (lo[0] + hi[0]) / 2 == pytest.approx(context.dims.rack_center)
            assert (lo[1] + hi[1]) / 2 == pytest.approx(y)


class TestZipTie:
    """Tests for zip-tie slot placement."""

    def test_positions_spread_evenly(self) -> None:
        assert zip_tie_positions(10.0, 30.0, 2) == pytest.approx([20.0, 30.0])
        assert zip_tie_positions(0.0, 100.0, 3) == pytest.approx([25.0, 50.0, 75.0])

    def test_no_positions_for_zero_count(self) -> None:
        assert zip_tie_positions(0.0, 100.0, 0) == []

    def test_plane_sits_against_back_wall(self, default_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(default_params)
        back_inner = dims.chassis_depth - default_params.case_thickness

        assert zip_tie_plane(default_params) + default_params.zip_tie_hole_length / 2 == (
            pytest.approx(back_inner)
        )

    def test_slots_and_indents(self, default_params: EnclosureParameters) -> None:
        result = ZipTieGenerator().generate(_context(default_params))

        assert len(result.metadata["zip_tie_x"]) == 2
        assert len(result.solids) == 4

    def test_no_indents_without_depth(self) -> None:
        params = EnclosureParameters(zip_tie_indent_depth=0.0)
        result = ZipTieGenerator().generate(_context(params))

        assert len(result.solids) == 2

    def test_slots_pierce_top_and_bottom(self, stack_params: EnclosureParameters) -> None:
        context = _context(stack_params)
        result = ZipTieGenerator().generate(context)
        lo, hi = _box_extent(result.solids[0])

        assert lo[1] < context.dims.chassis_bottom
        assert hi[1] > context.dims.chassis_top

    def test_disabled_for_zero_count(self) -> None:
        context = _context(EnclosureParameters(zip_tie_hole_count=0))

        assert not ZipTieGenerator().is_enabled(context)


class TestWirePassThrough:
    """Tests for wire pass-through channels."""

    def test_positions(self) -> None:
        positions = wire_hole_positions(127.0, 200.0, 7.0, (10.0, 50.0))

        assert positions == [
            pytest.approx((25.6, 10.0)),
            pytest.approx((228.4, 10.0)),
            pytest.approx((25.6, 50.0)),
            pytest.approx((228.4, 50.0)),
        ]

    def test_disabled_by_default(self, default_params: EnclosureParameters) -> None:
        assert not WirePassThroughGenerator().is_enabled(_context(default_params))

    def test_channels_run_full_depth(self, stack_params: EnclosureParameters) -> None:
        params = EnclosureParameters(
            switch_count=stack_params.switch_count,
            rack_height=stack_params.rack_height,
            front_wire_holes=True,
        )
        context = _context(params)
        result = WirePassThroughGenerator().generate(context)

        assert len(result.solids) == 6
        channel = result.solids[0]
        assert channel.offset[2] == -CUT_CLEARANCE
        assert channel.child.height == pytest.approx(
            context.dims.chassis_depth + 2 * CUT_CLEARANCE
        )
        assert channel.child.radius == pytest.approx(3.5)


class TestChassisProfileBuilder:
    def test_body_is_panel_plus_block(self, default_params: EnclosureParameters) -> None:
        dims = DimensionSolver().solve(default_params)
        body = ChassisProfileBuilder().build(default_params, dims)

        assert isinstance(body, Union)
        panel, block = body.children
        assert isinstance(panel, LinearExtrude)
        assert panel.height == default_params.front_thickness
        assert isinstance(block, Translate)
        assert block.offset == (dims.chassis_left, dims.chassis_bottom, 3.0)
        assert block.child.height == pytest.approx(
            dims.chassis_depth - default_params.front_thickness
        )
