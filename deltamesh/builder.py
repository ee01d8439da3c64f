"""Merging several flat triangulations into one."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

P = TypeVar("P")


@dataclass
class Triangulation(Generic[P]):
    """A flat mesh: points and triangle index triples."""

    points: list[P] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


class TriangulationBuilder(Generic[P]):
    """Collects triangulations into one, shifting indices as points are added.

    ``index_limit`` is the largest index value allowed; None means no limit.
    """

    def __init__(self, index_limit: int | None = None) -> None:
        self.index_limit = index_limit
        self._points: list[P] = []
        self._indices: list[int] = []

    def append(self, triangulation: Triangulation[P]) -> TriangulationBuilder[P]:
        """Add a triangulation whose indices refer to its own points."""
        points_count = len(self._points) + len(triangulation.points)
        if self.index_limit is not None and points_count > self.index_limit:
            raise OverflowError(
                f"index limit {self.index_limit} cannot hold {points_count} points"
            )
        offset = len(self._points)
        self._points.extend(triangulation.points)
        self._indices.extend(i + offset for i in triangulation.indices)
        return self

    def build(self) -> Triangulation[P]:
        return Triangulation(points=list(self._points), indices=list(self._indices))