"""Integration tests for the full generation pipeline.

These tests verify:
- Generation is deterministic for identical parameters
- Feature flags switch whole generators on and off
- The final solid is the body minus every cutter, oriented as requested
- Structural errors stop generation before any geometry is built
"""

import pytest

from rackmount.domain import (
    ConfigurationError,
    EnclosureAssembler,
    EnclosureModel,
    EnclosureParameters,
)
from rackmount.domain.csg import Difference, Rotate, Translate, count_primitives, walk
from rackmount.domain.cutouts import GENERATION_ORDER


class TestDeterminism:
    def test_same_parameters_same_tree(self, stack_params: EnclosureParameters) -> None:
        first = EnclosureAssembler().build(stack_params)
        second = EnclosureAssembler().build(stack_params)

        assert first.solid == second.solid
        assert first == second


class TestGenerators:
    """Tests for which generators contribute."""

    def test_default_generators(self, default_model: EnclosureModel) -> None:
        assert default_model.generators == (
            "cutout.switch_bay",
            "cutout.mounting_holes",
            "cutout.zip_tie",
            "cutout.ventilation",
        )

    def test_all_features_enabled(self) -> None:
        model = EnclosureAssembler().build(EnclosureParameters(front_wire_holes=True))

        assert model.generators == GENERATION_ORDER
        assert len(model.wire_holes) == 2

    def test_features_disabled(self) -> None:
        params = EnclosureParameters(air_holes=False, zip_tie_hole_count=0)

        model = EnclosureAssembler().build(params)

        assert model.generators == ("cutout.switch_bay", "cutout.mounting_holes")
        assert model.vent_cells == ()
        assert model.zip_tie_x == ()

    def test_custom_generator_subset(self, default_params: EnclosureParameters) -> None:
        assembler = EnclosureAssembler(generator_ids=("cutout.switch_bay",))

        model = assembler.build(default_params)

        assert model.generators == ("cutout.switch_bay",)
        assert model.mounting_holes == ()
        assert count_primitives(model.cutters) == {"box": 2}


class TestSolid:
    """Tests for the assembled solid."""

    def test_print_orientation_solid_is_body_minus_cutters(
        self, default_model: EnclosureModel
    ) -> None:
        solid = default_model.solid

        assert isinstance(solid, Difference)
        assert solid.base == default_model.body
        assert solid.subtracted == (default_model.cutters,)

    def test_installed_orientation(self, default_params: EnclosureParameters) -> None:
        params = EnclosureParameters(print_orientation=False)
        model = EnclosureAssembler().build(params)

        assert isinstance(model.solid, Translate)
        assert model.solid.offset == (0, model.dims.chassis_depth, 0)
        assert isinstance(model.solid.child, Rotate)
        assert model.solid.child.angles == (90, 0.0, 0.0)

        # Orientation is the only difference between the two.
        upright = EnclosureAssembler().build(default_params)
        assert model.solid.child.child == upright.solid

    def test_cutter_counts(self, stack_model: EnclosureModel) -> None:
        counts = count_primitives(stack_model.cutters)

        # Two bay boxes per switch, two zip-tie slots and two indents.
        assert counts["box"] == 3 * 2 + 2 + 2
        assert counts["cylinder"] == len(stack_model.vent_cells)
        # Each capsule slot is a hull of two circles.
        assert counts["circle"] == 2 * len(stack_model.mounting_holes)

    def test_metadata_collected(self, stack_model: EnclosureModel) -> None:
        assert len(stack_model.mounting_holes) == 14
        assert len(stack_model.zip_tie_x) == 2
        assert stack_model.vent_cells
        assert {c.bay_index for c in stack_model.vent_cells} == {0, 1, 2}
        # Default walls leave no room for vents in the rear frame.
        assert [(w.face, w.bay_index) for w in stack_model.warnings] == [
            ("back", 0),
            ("back", 1),
            ("back", 2),
        ]

    def test_small_switch_warns_but_builds(self) -> None:
        model = EnclosureAssembler().build(EnclosureParameters(switch_height=8.0))

        assert len(model.warnings) == 3
        assert model.vent_cells == ()
        assert "cutout.ventilation" in model.generators

    def test_tall_single_switch_not_grown(self) -> None:
        model = EnclosureAssembler().build(
            EnclosureParameters(switch_height=50.0, rack_height=1.0)
        )

        assert model.dims.adjusted_rack_units == 1.0
        assert model.dims.total_chassis_height > model.dims.total_height_mm

    def test_every_node_reachable(self, stack_model: EnclosureModel) -> None:
        kinds = {node.kind for node in walk(stack_model.solid)}

        assert {"difference", "union", "linear_extrude", "hull", "circle", "box"} <= kinds
        assert {"cylinder", "translate", "rotate"} <= kinds


class TestInvalidParameters:
    def test_nothing_built(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            EnclosureAssembler().build(EnclosureParameters(rack_width=482.6))

        assert exc_info.value.parameter == "rack_width"
