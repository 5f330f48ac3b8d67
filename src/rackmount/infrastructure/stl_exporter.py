"""STL preview export using numpy-stl.

There is no boolean evaluation here. The mesh builder tessellates every
primitive of a subtree and concatenates the triangles, which is enough to
preview either the positive body or the cutters; the finished solid needs
an external CSG backend (see the OpenSCAD exporter).
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
from shapely.geometry import MultiPoint
from shapely.geometry.polygon import orient as orient_polygon
from stl import mesh

from rackmount.domain import EnclosureModel
from rackmount.domain.csg import (
    Box,
    Circle,
    Cylinder,
    Difference,
    Hull,
    LinearExtrude,
    Node,
    Rotate,
    Translate,
    Union,
)
from rackmount.domain.services import orient

logger = logging.getLogger(__name__)

DEFAULT_SEGMENTS = 32

_NO_TRIANGLES = np.zeros((0, 3, 3))


def circle_points(radius: float, segments: int) -> np.ndarray:
    """Counter-clockwise polygon approximating a circle."""
    angles = np.linspace(0.0, 2 * math.pi, segments, endpoint=False)
    return np.column_stack((radius * np.cos(angles), radius * np.sin(angles)))


def convex_hull_2d(points: np.ndarray) -> np.ndarray:
    """Counter-clockwise convex hull of a point cloud.

    Collinear or coincident input has no area and yields an empty outline.
    """
    hull = MultiPoint([tuple(p) for p in points]).convex_hull
    if hull.geom_type != "Polygon":
        return np.zeros((0, 2))
    ring = np.asarray(orient_polygon(hull, sign=1.0).exterior.coords)
    return ring[:-1]


def signed_area(polygon: np.ndarray) -> float:
    x, y = polygon[:, 0], polygon[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def extrude_polygon(polygon: np.ndarray, height: float) -> np.ndarray:
    """Triangulate a convex polygon extruded along +Z from z=0.

    Caps are fans, so the polygon must be convex. Triangles wind
    counter-clockwise seen from outside.
    """
    n = len(polygon)
    if n < 3:
        return _NO_TRIANGLES
    if signed_area(polygon) < 0:
        polygon = polygon[::-1]

    bottom = np.column_stack((polygon, np.zeros(n)))
    top = np.column_stack((polygon, np.full(n, height)))

    fan = np.arange(1, n - 1)
    top_caps = np.stack([np.repeat(top[:1], n - 2, axis=0), top[fan], top[fan + 1]], axis=1)
    bottom_caps = np.stack(
        [np.repeat(bottom[:1], n - 2, axis=0), bottom[fan + 1], bottom[fan]], axis=1
    )
    i = np.arange(n)
    j = (i + 1) % n
    sides_a = np.stack([bottom[i], bottom[j], top[j]], axis=1)
    sides_b = np.stack([bottom[i], top[j], top[i]], axis=1)
    return np.concatenate([top_caps, bottom_caps, sides_a, sides_b])


def rotation_matrix(angles: tuple[float, float, float]) -> np.ndarray:
    """OpenSCAD rotate([x, y, z]): X first, then Y, then Z, in degrees."""
    ax, ay, az = (math.radians(a) for a in angles)
    rx = np.array(
        [[1, 0, 0], [0, math.cos(ax), -math.sin(ax)], [0, math.sin(ax), math.cos(ax)]]
    )
    ry = np.array(
        [[math.cos(ay), 0, math.sin(ay)], [0, 1, 0], [-math.sin(ay), 0, math.cos(ay)]]
    )
    rz = np.array(
        [[math.cos(az), -math.sin(az), 0], [math.sin(az), math.cos(az), 0], [0, 0, 1]]
    )
    return rz @ ry @ rx


class CsgMeshBuilder:
    """Builds STL meshes from CSG trees without boolean evaluation.

    Difference nodes contribute their base only; unions concatenate.
    """

    def __init__(self, segments: int = DEFAULT_SEGMENTS) -> None:
        if segments < 3:
            raise ValueError("segments must be at least 3")
        self.segments = segments

    def outlines(self, node: Node) -> list[np.ndarray]:
        """2D polygons of a 2D subtree."""
        if isinstance(node, Circle):
            return [circle_points(node.radius, node.segments or self.segments)]
        if isinstance(node, Translate):
            offset = np.array(node.offset[:2])
            return [outline + offset for outline in self.outlines(node.child)]
        if isinstance(node, Rotate):
            rotation = rotation_matrix((0.0, 0.0, node.angles[2]))[:2, :2]
            return [outline @ rotation.T for outline in self.outlines(node.child)]
        if isinstance(node, Hull):
            children = [o for child in node.children for o in self.outlines(child)]
            if not children:
                return []
            return [convex_hull_2d(np.vstack(children))]
        if isinstance(node, Union):
            return [o for child in node.children for o in self.outlines(child)]
        if isinstance(node, Difference):
            return self.outlines(node.base)
        raise TypeError(f"'{node.kind}' is not a 2D shape")

    def triangles(self, node: Node) -> np.ndarray:
        """Triangles of a 3D subtree, shape (n, 3, 3)."""
        if isinstance(node, Box):
            sx, sy, sz = node.size
            rectangle = np.array([(0.0, 0.0), (sx, 0.0), (sx, sy), (0.0, sy)])
            return extrude_polygon(rectangle, sz)
        if isinstance(node, Cylinder):
            outline = circle_points(node.radius, node.segments or self.segments)
            return extrude_polygon(outline, node.height)
        if isinstance(node, LinearExtrude):
            parts = [extrude_polygon(o, node.height) for o in self.outlines(node.child)]
            return np.concatenate(parts) if parts else _NO_TRIANGLES
        if isinstance(node, Translate):
            return self.triangles(node.child) + np.array(node.offset)
        if isinstance(node, Rotate):
            return self.triangles(node.child) @ rotation_matrix(node.angles).T
        if isinstance(node, Union):
            parts = [self.triangles(child) for child in node.children]
            return np.concatenate(parts) if parts else _NO_TRIANGLES
        if isinstance(node, Difference):
            return self.triangles(node.base)
        if isinstance(node, Hull):
            raise ValueError("3D hulls are not supported by the preview tessellator")
        raise TypeError(f"'{node.kind}' is a 2D shape outside linear_extrude")

    def build(self, node: Node) -> mesh.Mesh:
        """Create a numpy-stl mesh for a 3D subtree."""
        vectors = self.triangles(node)
        result = mesh.Mesh(np.zeros(len(vectors), dtype=mesh.Mesh.dtype))
        if len(vectors):
            result.vectors[:] = vectors
        return result


class StlExporter:
    """Exports a preview mesh of the enclosure body or of its cutters."""

    PARTS = ("body", "cutters")

    def __init__(self, mesh_builder: CsgMeshBuilder | None = None) -> None:
        self.mesh_builder = mesh_builder or CsgMeshBuilder()

    def export(self, model: EnclosureModel, part: str = "body") -> mesh.Mesh:
        """Tessellate one part, in the model's final orientation.

        Raises:
            ValueError: If ``part`` is not "body" or "cutters".
        """
        if part not in self.PARTS:
            raise ValueError(f"Invalid part: {part}. Must be 'body' or 'cutters'")
        node = model.body if part == "body" else model.cutters
        return self.mesh_builder.build(orient(node, model.params, model.dims))

    def export_to_file(
        self, model: EnclosureModel, filepath: Path | str, part: str = "body"
    ) -> None:
        preview = self.export(model, part)
        preview.save(str(filepath))
        logger.info(f"Exported {part} preview ({len(preview.vectors)} triangles) to {filepath}")
