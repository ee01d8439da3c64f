"""Greedy grouping of Delaunay triangles into convex polygons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from deltamesh.geom import IntPoint, IntTriangle, is_not_nil

if TYPE_CHECKING:
    from deltamesh.delaunay import IntDelaunay


def _is_degenerate(prev: IntPoint, point: IntPoint, nxt: IntPoint) -> bool:
    return point.subtract(prev).cross_product(nxt.subtract(point)) == 0


def simplify_contour(contour: Iterable[IntPoint]) -> list[IntPoint]:
    """Drop repeated and collinear points; a contour left with fewer than 3 points is empty."""
    points = list(contour)
    while len(points) >= 3:
        count = len(points)
        degenerate = next(
            (
                i
                for i, point in enumerate(points)
                if _is_degenerate(points[i - 1], point, points[(i + 1) % count])
            ),
            None,
        )
        if degenerate is None:
            break
        del points[degenerate]
    return points if len(points) >= 3 else []


@dataclass
class _Node:
    next: int
    index: int
    prev: int
    point: IntPoint


@dataclass(frozen=True)
class _Edge:
    triangle_index: int
    neighbor: int
    a: int
    b: int


class _ConvexPolygonBuilder:
    def __init__(self) -> None:
        self.nodes: list[_Node] = []
        self.edges: list[_Edge] = []

    def start(self, triangle_index: int, triangle: IntTriangle) -> None:
        self.nodes = [
            _Node(next=1, index=0, prev=2, point=triangle.vertices[0].point),
            _Node(next=2, index=1, prev=0, point=triangle.vertices[1].point),
            _Node(next=0, index=2, prev=1, point=triangle.vertices[2].point),
        ]
        self.edges = []

        bc, ca, ab = triangle.neighbors
        for neighbor, a, b in ((ab, 0, 1), (bc, 1, 2), (ca, 2, 0)):
            if is_not_nil(neighbor):
                self.edges.append(_Edge(triangle_index, neighbor, a, b))

    def add(self, edge: _Edge, triangle: IntTriangle) -> bool:
        v_index = triangle.opposite(edge.triangle_index)
        v = triangle.vertices[v_index].point

        # a0 -> a1 -> p must turn left (or go straight)
        node_a1 = self.nodes[edge.a]
        va0 = self.nodes[node_a1.prev].point
        va1 = node_a1.point
        if va1.subtract(va0).cross_product(v.subtract(va1)) < 0:
            return False

        # p -> b1 -> b0 must turn left (or go straight)
        node_b1 = self.nodes[edge.b]
        vb0 = self.nodes[node_b1.next].point
        vb1 = node_b1.point
        if vb1.subtract(v).cross_product(vb0.subtract(vb1)) < 0:
            return False

        prev_neighbor = triangle.neighbors[(v_index + 2) % 3]
        next_neighbor = triangle.neighbors[(v_index + 1) % 3]

        new_index = len(self.nodes)
        self.nodes.append(_Node(next=node_b1.index, index=new_index, prev=node_a1.index, point=v))
        node_a1.next = new_index
        node_b1.prev = new_index

        if is_not_nil(next_neighbor):
            self.edges.append(_Edge(edge.neighbor, next_neighbor, edge.a, new_index))
        if is_not_nil(prev_neighbor):
            self.edges.append(_Edge(edge.neighbor, prev_neighbor, new_index, edge.b))

        return True

    def to_contour(self) -> list[IntPoint]:
        contour = []
        node = self.nodes[-1]
        for _ in self.nodes:
            contour.append(node.point)
            node = self.nodes[node.next]
        return simplify_contour(contour)


def to_convex_polygons(delaunay: IntDelaunay) -> list[list[IntPoint]]:
    """Merge adjacent triangles into non-overlapping convex counter-clockwise polygons."""
    triangles = delaunay.triangles
    visited = [False] * len(triangles)
    builder = _ConvexPolygonBuilder()
    result = []

    for index, first in enumerate(triangles):
        if visited[index]:
            continue
        builder.start(index, first)
        visited[index] = True

        while builder.edges:
            edge = builder.edges.pop()
            if visited[edge.neighbor]:
                continue
            if builder.add(edge, triangles[edge.neighbor]):
                visited[edge.neighbor] = True

        result.append(builder.to_contour())

    return result