"""Delaunay refinement of an integer triangle mesh by edge flips."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from deltamesh.geom import IntPoint, IntTriangle


@dataclass
class IntTriangulation:
    """A flat mesh: points and counter-clockwise triangle index triples."""

    indices: list[int] = field(default_factory=list)
    points: list[IntPoint] = field(default_factory=list)


@dataclass
class IntDelaunay:
    """A triangle mesh on integer points whose triangles meet the Delaunay condition."""

    triangles: list[IntTriangle]
    points: list[IntPoint]

    @classmethod
    def from_mesh(cls, triangles: Iterable[IntTriangle], points: Iterable[IntPoint]) -> IntDelaunay:
        """Copy a triangle mesh and flip edges until it is Delaunay."""
        delaunay = cls(
            [IntTriangle(list(t.vertices), list(t.neighbors)) for t in triangles],
            list(points),
        )
        delaunay.build()
        return delaunay

    def build(self) -> None:
        """Flip edges in place until every triangle satisfies the Delaunay condition."""
        unchecked: set[int] = set()
        for index in range(len(self.triangles)):
            self._fix_triangle(index, unchecked)
        if unchecked:
            self.fix_triangles(sorted(unchecked))

    def fix_triangles(self, indices: Iterable[int]) -> None:
        """Repair the given triangles and every triangle a flip touches along the way."""
        pending = list(indices)
        unchecked: set[int] = set()
        while pending:
            for index in pending:
                self._fix_triangle(index, unchecked)
            pending = sorted(unchecked)
            unchecked.clear()

    def _fix_triangle(self, abc_index: int, unchecked: set[int]) -> None:
        count = len(self.triangles)
        skip = None
        perfect = False
        while not perfect:
            perfect = True
            for pbc_index in tuple(self.triangles[abc_index].neighbors):
                if pbc_index >= count or pbc_index == skip:
                    continue
                if self.swap_triangles(abc_index, pbc_index):
                    skip = pbc_index
                    unchecked.add(pbc_index)
                    perfect = False
                    break
        unchecked.discard(abc_index)

    def swap_triangles(self, abc_index: int, pcb_index: int) -> bool:
        """Flip the shared edge of two neighbours if needed; return True on a flip."""
        abc = self.triangles[abc_index].abc_by_neighbor(pcb_index)
        pcb = self.triangles[pcb_index].abc_by_neighbor(abc_index)
        if self.is_flip_not_required(
            pcb.v0.vertex.point,
            abc.v0.vertex.point,
            abc.v1.vertex.point,
            abc.v2.vertex.point,
        ):
            return False

        # abc -> abp, pcb -> pca
        self._update_neighbor(abc.v1.neighbor, abc_index, pcb_index)
        self._update_neighbor(pcb.v1.neighbor, pcb_index, abc_index)

        abp = self.triangles[abc_index]
        abp.neighbors[abc.v0.position] = pcb.v1.neighbor
        abp.neighbors[abc.v1.position] = pcb_index
        abp.neighbors[abc.v2.position] = abc.v2.neighbor
        abp.vertices[abc.v2.position] = pcb.v0.vertex

        pca = self.triangles[pcb_index]
        pca.neighbors[pcb.v0.position] = abc.v1.neighbor
        pca.neighbors[pcb.v1.position] = abc_index
        pca.neighbors[pcb.v2.position] = pcb.v2.neighbor
        pca.vertices[pcb.v2.position] = abc.v0.vertex

        return True

    def _update_neighbor(self, neighbor_index: int, old_index: int, new_index: int) -> None:
        if neighbor_index >= len(self.triangles):
            return
        self.triangles[neighbor_index].update_neighbor(old_index, new_index)

    @staticmethod
    def is_flip_not_required(p: IntPoint, a: IntPoint, b: IntPoint, c: IntPoint) -> bool:
        """True when ``p`` is not inside the circumcircle of ``a``, ``b``, ``c``.

        ``b`` and ``c`` are shared by triangles ``abc`` and ``pcb``; the test
        compares the angles at ``p`` and ``a`` against the common edge.
        """
        vbp = b.subtract(p)
        vcp = c.subtract(p)
        vba = b.subtract(a)
        vca = c.subtract(a)

        cos_a = vbp.dot_product(vcp)
        cos_b = vba.dot_product(vca)

        if cos_a < 0 and cos_b < 0:
            return False
        if cos_a >= 0 and cos_b >= 0:
            return True

        sin_a = abs(vbp.cross_product(vcp))
        sin_b = abs(vba.cross_product(vca))

        if cos_a < 0:
            return sin_a * cos_b >= -cos_a * sin_b
        return cos_a * sin_b >= sin_a * -cos_b

    def triangle_indices(self) -> list[int]:
        """Flat list of vertex indices, three per triangle."""
        return [v.index for t in self.triangles for v in t.vertices]

    def into_triangulation(self) -> IntTriangulation:
        return IntTriangulation(indices=self.triangle_indices(), points=list(self.points))