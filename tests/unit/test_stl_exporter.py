"""Unit tests for the STL preview tessellator and exporter."""

from pathlib import Path

import numpy as np
import pytest
from stl import mesh

from rackmount.domain import EnclosureAssembler, EnclosureModel, EnclosureParameters
from rackmount.domain.csg import Box, Circle, Cylinder, LinearExtrude, hull, rotate, translate
from rackmount.infrastructure import CsgMeshBuilder, StlExporter
from rackmount.infrastructure.exporters import StlPreviewExporter
from rackmount.infrastructure.stl_exporter import (
    circle_points,
    convex_hull_2d,
    extrude_polygon,
    rotation_matrix,
    signed_area,
)


class TestGeometryHelpers:
    """Tests for the tessellation helpers."""

    def test_circle_points_counter_clockwise(self) -> None:
        points = circle_points(2.0, 16)

        assert points.shape == (16, 2)
        assert np.allclose(np.linalg.norm(points, axis=1), 2.0)
        assert signed_area(points) > 0

    def test_convex_hull_drops_interior_points(self) -> None:
        points = np.array([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2), (1, 3)], dtype=float)

        result = convex_hull_2d(points)

        assert len(result) == 4
        assert signed_area(result) == pytest.approx(16.0)

    def test_convex_hull_of_capsule_is_counter_clockwise(self) -> None:
        points = np.vstack([circle_points(1.0, 16), circle_points(1.0, 16) + (5.0, 0.0)])

        result = convex_hull_2d(points)

        assert signed_area(result) > 0
        assert result[:, 0].min() == pytest.approx(-1.0)
        assert result[:, 0].max() == pytest.approx(6.0)
        assert not np.allclose(result[0], result[-1])

    def test_collinear_hull_is_empty(self) -> None:
        points = np.array([(0, 0), (1, 0), (2, 0)], dtype=float)

        result = convex_hull_2d(points)

        assert result.shape == (0, 2)
        assert extrude_polygon(result, 1.0).shape == (0, 3, 3)

    def test_extruded_square_is_closed_box(self) -> None:
        square = np.array([(0, 0), (1, 0), (1, 1), (0, 1)], dtype=float)

        triangles = extrude_polygon(square, 2.0)

        assert triangles.shape == (12, 3, 3)
        assert triangles[..., 2].min() == 0.0
        assert triangles[..., 2].max() == 2.0

    def test_clockwise_polygon_reoriented(self) -> None:
        square = np.array([(0, 0), (0, 1), (1, 1), (1, 0)], dtype=float)

        preview = mesh.Mesh(np.zeros(12, dtype=mesh.Mesh.dtype))
        preview.vectors[:] = extrude_polygon(square, 1.0)

        assert preview.get_mass_properties()[0] == pytest.approx(1.0)

    def test_rotation_about_x_maps_z_to_minus_y(self) -> None:
        matrix = rotation_matrix((90.0, 0.0, 0.0))

        assert np.allclose(matrix @ np.array([0.0, 0.0, 1.0]), [0.0, -1.0, 0.0])


class TestCsgMeshBuilder:
    """Tests for CsgMeshBuilder."""

    def test_box(self) -> None:
        assert CsgMeshBuilder().triangles(Box((1, 2, 3))).shape == (12, 3, 3)

    def test_hex_prism(self) -> None:
        prism = Cylinder(height=5, radius=2, segments=6)

        assert CsgMeshBuilder().triangles(prism).shape == (20, 3, 3)

    def test_cylinder_uses_default_segments(self) -> None:
        triangles = CsgMeshBuilder(segments=8).triangles(Cylinder(height=1, radius=1))

        assert len(triangles) == 2 * (8 - 2) + 2 * 8

    def test_translate_and_rotate(self) -> None:
        node = translate(rotate(Box((1, 1, 1)), x=90), 10, 0, 0)

        triangles = CsgMeshBuilder().triangles(node)

        assert triangles[..., 0].min() == pytest.approx(10.0)
        assert triangles[..., 1].max() == pytest.approx(0.0)
        assert triangles[..., 1].min() == pytest.approx(-1.0)

    def test_linear_extrude_of_hull(self) -> None:
        slot = LinearExtrude(height=3, child=hull(Circle(1), translate(Circle(1), 4, 0)))

        triangles = CsgMeshBuilder(segments=16).triangles(slot)

        assert triangles[..., 0].max() == pytest.approx(5.0)
        assert triangles[..., 2].max() == pytest.approx(3.0)

    def test_3d_hull_rejected(self) -> None:
        with pytest.raises(ValueError):
            CsgMeshBuilder().triangles(hull(Box((1, 1, 1)), Box((2, 2, 2))))

    def test_bare_2d_shape_rejected(self) -> None:
        with pytest.raises(TypeError):
            CsgMeshBuilder().triangles(Circle(1))

    def test_rejects_too_few_segments(self) -> None:
        with pytest.raises(ValueError):
            CsgMeshBuilder(segments=2)


class TestStlExporter:
    """Tests for StlExporter and the registered preview exporter."""

    def test_body_preview(self, default_model: EnclosureModel) -> None:
        preview = StlExporter().export(default_model, "body")

        assert len(preview.vectors) > 0
        assert preview.max_[0] == pytest.approx(254.0)

    def test_cutters_preview_covers_every_cutter(self, default_model: EnclosureModel) -> None:
        body = StlExporter().export(default_model, "body")
        cutters = StlExporter().export(default_model, "cutters")

        assert len(cutters.vectors) > len(body.vectors)

    def test_installed_orientation_stands_upright(self) -> None:
        model = EnclosureAssembler().build(EnclosureParameters(print_orientation=False))

        preview = StlExporter().export(model, "body")

        assert preview.min_[1] == pytest.approx(0.0, abs=1e-6)
        assert preview.max_[1] == pytest.approx(model.dims.chassis_depth)

    def test_invalid_part(self, default_model: EnclosureModel) -> None:
        with pytest.raises(ValueError, match="Invalid part"):
            StlExporter().export(default_model, "lid")

    def test_export_to_file(self, default_model: EnclosureModel, tmp_path: Path) -> None:
        path = tmp_path / "body.stl"

        StlPreviewExporter().export(default_model, path)

        loaded = mesh.Mesh.from_file(str(path))
        assert len(loaded.vectors) == len(StlExporter().export(default_model).vectors)

    def test_preview_exporter_part_validated(self) -> None:
        with pytest.raises(ValueError):
            StlPreviewExporter(part="lid")

    def test_no_string_export(self, default_model: EnclosureModel) -> None:
        with pytest.raises(NotImplementedError):
            StlPreviewExporter().export_string(default_model)
