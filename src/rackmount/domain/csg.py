"""Constructive solid geometry operation tree.

The enclosure is described as an immutable tree of primitives and operators.
Evaluating the tree into a manifold mesh is left to an external CSG backend
(OpenSCAD, manifold, ...); this module only builds and walks the tree.

Primitives follow OpenSCAD conventions:
- ``Box`` has one corner at the origin and extends along +X, +Y, +Z.
- ``Cylinder`` stands on the XY plane, centred on the Z axis.
- ``Circle`` is a 2D shape centred on the origin.
- ``LinearExtrude`` lifts a 2D child along +Z.
- ``Rotate`` applies X, then Y, then Z rotations in degrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Circle:
    radius: float
    segments: int | None = None

    kind: ClassVar[str] = "circle"
    is_2d: ClassVar[bool] = True


@dataclass(frozen=True)
class Box:
    size: Vec3

    kind: ClassVar[str] = "box"
    is_2d: ClassVar[bool] = False


@dataclass(frozen=True)
class Cylinder:
    height: float
    radius: float
    segments: int | None = None

    kind: ClassVar[str] = "cylinder"
    is_2d: ClassVar[bool] = False


@dataclass(frozen=True)
class LinearExtrude:
    height: float
    child: Node

    kind: ClassVar[str] = "linear_extrude"
    is_2d: ClassVar[bool] = False


@dataclass(frozen=True)
class Hull:
    children: tuple[Node, ...]

    kind: ClassVar[str] = "hull"

    @property
    def is_2d(self) -> bool:
        return all(child.is_2d for child in self.children)


@dataclass(frozen=True)
class Union:
    children: tuple[Node, ...]

    kind: ClassVar[str] = "union"

    @property
    def is_2d(self) -> bool:
        return all(child.is_2d for child in self.children)


@dataclass(frozen=True)
class Difference:
    """First child minus every following child."""

    children: tuple[Node, ...]

    kind: ClassVar[str] = "difference"

    @property
    def base(self) -> Node:
        return self.children[0]

    @property
    def subtracted(self) -> tuple[Node, ...]:
        return self.children[1:]

    @property
    def is_2d(self) -> bool:
        return self.base.is_2d


@dataclass(frozen=True)
class Translate:
    offset: Vec3
    child: Node

    kind: ClassVar[str] = "translate"

    @property
    def is_2d(self) -> bool:
        return self.child.is_2d


@dataclass(frozen=True)
class Rotate:
    angles: Vec3
    child: Node

    kind: ClassVar[str] = "rotate"

    @property
    def is_2d(self) -> bool:
        return self.child.is_2d


Node = (
    Circle | Box | Cylinder | LinearExtrude | Hull | Union | Difference | Translate | Rotate
)

_EMPTY = Union(children=())


def union(*nodes: Node) -> Node:
    """Union nodes, flattening nested unions and dropping empty ones."""
    flat: list[Node] = []
    for node in nodes:
        if isinstance(node, Union):
            flat.extend(node.children)
        else:
            flat.append(node)
    if len(flat) == 1:
        return flat[0]
    return Union(children=tuple(flat))


def difference(base: Node, *subtracted: Node) -> Node:
    """Subtract nodes from ``base``; empty unions are dropped."""
    cutters = tuple(n for n in subtracted if not is_empty(n))
    if not cutters:
        return base
    return Difference(children=(base, *cutters))


def hull(*nodes: Node) -> Hull:
    return Hull(children=tuple(nodes))


def translate(node: Node, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Node:
    if x == 0 and y == 0 and z == 0:
        return node
    return Translate(offset=(x, y, z), child=node)


def rotate(node: Node, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Node:
    if x == 0 and y == 0 and z == 0:
        return node
    return Rotate(angles=(x, y, z), child=node)


def empty() -> Union:
    """An empty union, the identity for ``union``."""
    return _EMPTY


def is_empty(node: Node) -> bool:
    return isinstance(node, Union) and not node.children


def children_of(node: Node) -> tuple[Node, ...]:
    """Direct children of any node (primitives have none)."""
    if isinstance(node, (Hull, Union, Difference)):
        return node.children
    if isinstance(node, (LinearExtrude, Translate, Rotate)):
        return (node.child,)
    return ()


def walk(node: Node) -> Iterator[Node]:
    """Depth-first, pre-order traversal of the tree."""
    yield node
    for child in children_of(node):
        yield from walk(child)


def count_primitives(node: Node) -> dict[str, int]:
    """Count leaf primitives by kind."""
    counts: dict[str, int] = {}
    for item in walk(node):
        if not children_of(item) and not isinstance(item, Union):
            counts[item.kind] = counts.get(item.kind, 0) + 1
    return counts


def to_dict(node: Node) -> dict[str, Any]:
    """Serialize a tree into plain JSON-compatible data."""
    if isinstance(node, Circle):
        data: dict[str, Any] = {"radius": node.radius}
        if node.segments is not None:
            data["segments"] = node.segments
    elif isinstance(node, Box):
        data = {"size": list(node.size)}
    elif isinstance(node, Cylinder):
        data = {"height": node.height, "radius": node.radius}
        if node.segments is not None:
            data["segments"] = node.segments
    elif isinstance(node, LinearExtrude):
        data = {"height": node.height, "child": to_dict(node.child)}
    elif isinstance(node, Translate):
        data = {"offset": list(node.offset), "child": to_dict(node.child)}
    elif isinstance(node, Rotate):
        data = {"angles": list(node.angles), "child": to_dict(node.child)}
    elif isinstance(node, (Hull, Union, Difference)):
        data = {"children": [to_dict(child) for child in node.children]}
    else:
        raise TypeError(f"Unknown CSG node: {type(node).__name__}")
    return {"type": node.kind, **data}
