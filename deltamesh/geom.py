"""Integer points, indexed vertices and triangles with neighbour links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

NIL_INDEX = (1 << 64) - 1
"""Sentinel index that marks a missing vertex or neighbour."""


def is_not_nil(index: int) -> bool:
    """Return True when ``index`` refers to a real element."""
    return index != NIL_INDEX


@dataclass(frozen=True)
class IntPoint:
    """A point on the integer grid."""

    x: int
    y: int

    def __add__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IntPoint) -> IntPoint:
        return self.subtract(other)

    def subtract(self, other: IntPoint) -> IntPoint:
        """Return the vector from ``other`` to this point."""
        return IntPoint(self.x - other.x, self.y - other.y)

    def dot_product(self, other: IntPoint) -> int:
        return self.x * other.x + self.y * other.y

    def cross_product(self, other: IntPoint) -> int:
        return self.x * other.y - self.y * other.x


def area_two(contour: Sequence[IntPoint]) -> int:
    """Twice the signed area of a closed contour; negative for counter-clockwise order."""
    if not contour:
        return 0
    area = 0
    prev = contour[-1]
    for point in contour:
        area += point.x * prev.y - point.y * prev.x
        prev = point
    return area


@dataclass(frozen=True)
class IndexPoint:
    """A point together with its index in the mesh point list."""

    index: int
    point: IntPoint

    @classmethod
    def empty(cls) -> IndexPoint:
        return cls(NIL_INDEX, IntPoint(0, 0))


@dataclass(frozen=True)
class AbcVertex:
    """A triangle vertex with its slot position and the neighbour opposite it."""

    vertex: IndexPoint
    position: int
    neighbor: int


@dataclass(frozen=True)
class Abc:
    """A triangle's vertices rotated so that ``v0`` comes first."""

    v0: AbcVertex
    v1: AbcVertex
    v2: AbcVertex


@dataclass
class IntTriangle:
    """A mesh triangle; ``neighbors[i]`` is the triangle opposite ``vertices[i]``."""

    vertices: list[IndexPoint]
    neighbors: list[int]

    @classmethod
    def from_vertices(cls, a: IndexPoint, b: IndexPoint, c: IndexPoint) -> IntTriangle:
        return cls([a, b, c], [NIL_INDEX, NIL_INDEX, NIL_INDEX])

    def other_vertex(self, a: int, b: int) -> int:
        """Position of the vertex whose index is neither ``a`` nor ``b``."""
        for position in (0, 1):
            index = self.vertices[position].index
            if index != a and index != b:
                return position
        return 2

    def opposite(self, neighbor: int) -> int:
        """Position of the vertex that faces the given neighbour triangle."""
        try:
            return self.neighbors.index(neighbor)
        except ValueError:
            raise ValueError(f"neighbor {neighbor} is not present") from None

    def _abc_from(self, start: int) -> Abc:
        a, b, c = start, (start + 1) % 3, (start + 2) % 3
        return Abc(
            AbcVertex(self.vertices[a], a, self.neighbors[a]),
            AbcVertex(self.vertices[b], b, self.neighbors[b]),
            AbcVertex(self.vertices[c], c, self.neighbors[c]),
        )

    def abc_by_neighbor(self, neighbor: int) -> Abc:
        """Rotate the triangle so that ``v0`` is the vertex opposite ``neighbor``."""
        if neighbor == self.neighbors[0]:
            return self._abc_from(0)
        if neighbor == self.neighbors[1]:
            return self._abc_from(1)
        return self._abc_from(2)

    def update_neighbor(self, old_index: int, new_index: int) -> None:
        """Replace the neighbour link ``old_index`` with ``new_index``."""
        try:
            slot = self.neighbors.index(old_index)
        except ValueError:
            raise ValueError(f"neighbor {old_index} is not present") from None
        self.neighbors[slot] = new_index