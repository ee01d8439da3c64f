"""Centroid net: polygons around each mesh vertex built from triangle centres and edge midpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deltamesh.geom import IntPoint, IntTriangle, area_two

if TYPE_CHECKING:
    from deltamesh.delaunay import IntDelaunay


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def middle(a: IntPoint, b: IntPoint) -> IntPoint:
    """Midpoint of two points, rounded toward zero."""
    return IntPoint(_trunc_div(a.x + b.x, 2), _trunc_div(a.y + b.y, 2))


def triangle_center(triangle: IntTriangle) -> IntPoint:
    """Centroid of a triangle, rounded toward zero."""
    a, b, c = (v.point for v in triangle.vertices)
    return IntPoint(_trunc_div(a.x + b.x + c.x, 3), _trunc_div(a.y + b.y + c.y, 3))


def _right_neighbor_and_mid_edge(triangle: IntTriangle, vertex_index: int) -> tuple[int, IntPoint]:
    v = triangle.vertices
    n = triangle.neighbors
    if v[0].index == vertex_index:
        return n[2], middle(v[0].point, v[1].point)
    if v[1].index == vertex_index:
        return n[0], middle(v[1].point, v[2].point)
    return n[1], middle(v[2].point, v[0].point)


def _left_neighbor_and_mid_edge(triangle: IntTriangle, vertex_index: int) -> tuple[int, IntPoint]:
    v = triangle.vertices
    n = triangle.neighbors
    if v[0].index == vertex_index:
        return n[1], middle(v[0].point, v[2].point)
    if v[1].index == vertex_index:
        return n[2], middle(v[1].point, v[0].point)
    return n[0], middle(v[2].point, v[1].point)


def centroid_net(delaunay: IntDelaunay, min_area: int) -> list[list[IntPoint]]:
    """One polygon around every vertex, skipping those with area not above ``min_area``.

    A ``min_area`` of zero keeps every polygon.
    """
    two_area = min_area << 1
    triangles = delaunay.triangles
    count = len(triangles)
    visited = [False] * len(delaunay.points)
    result: list[list[IntPoint]] = []

    def add(contour: list[IntPoint]) -> None:
        if two_area == 0 or abs(area_two(contour)) > two_area:
            result.append(contour)

    for triangle_index, first in enumerate(triangles):
        for vertex in first.vertices:
            if visited[vertex.index]:
                continue
            visited[vertex.index] = True

            # counter-clockwise walk around the vertex
            next_index, mid = _left_neighbor_and_mid_edge(first, vertex.index)
            contour = [triangle_center(first), mid]
            while next_index < count and next_index != triangle_index:
                triangle = triangles[next_index]
                next_index, mid = _left_neighbor_and_mid_edge(triangle, vertex.index)
                contour.extend((triangle_center(triangle), mid))

            if next_index == triangle_index:
                add(contour)
                continue

            # the vertex is on the border: collect the clockwise part too
            next_index, mid = _right_neighbor_and_mid_edge(first, vertex.index)
            start = [mid]
            while next_index < count:
                triangle = triangles[next_index]
                next_index, mid = _right_neighbor_and_mid_edge(triangle, vertex.index)
                start.extend((triangle_center(triangle), mid))

            start.reverse()
            start.extend(contour)
            start.append(vertex.point)
            add(start)

    return result