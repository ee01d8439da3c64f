import pytest

from deltamesh.delaunay import IntDelaunay, IntTriangulation
from deltamesh.geom import NIL_INDEX, IndexPoint, IntPoint, IntTriangle, area_two

NIL = NIL_INDEX


def _sample_mesh():
    points = [
        IntPoint(-3, 3),
        IntPoint(-2, -3),
        IntPoint(-2, 0),
        IntPoint(0, -1),
        IntPoint(0, 3),
        IntPoint(2, -3),
        IntPoint(2, 0),
        IntPoint(3, 3),
    ]

    def tri(indices, neighbors):
        return IntTriangle([IndexPoint(i, points[i]) for i in indices], list(neighbors))

    triangles = [
        tri((4, 2, 6), (1, 3, 2)),
        tri((2, 3, 6), (5, 0, 4)),
        tri((0, 2, 4), (0, NIL, NIL)),
        tri((4, 6, 7), (NIL, NIL, 0)),
        tri((2, 1, 3), (NIL, 1, NIL)),
        tri((3, 5, 6), (NIL, 1, NIL)),
    ]
    return triangles, points


def _thin_quad():
    points = [IntPoint(0, 0), IntPoint(4, -1), IntPoint(8, 0), IntPoint(4, 1)]

    def tri(indices, neighbors):
        return IntTriangle([IndexPoint(i, points[i]) for i in indices], list(neighbors))

    triangles = [tri((0, 1, 2), (NIL, 1, NIL)), tri((0, 2, 3), (NIL, NIL, 0))]
    return triangles, points


def _validate(delaunay):
    count = len(delaunay.triangles)
    for i, t in enumerate(delaunay.triangles):
        assert area_two([v.point for v in t.vertices]) <= 0
        for n in t.neighbors:
            if n < count:
                assert i in delaunay.triangles[n].neighbors


def _area(delaunay):
    return sum(area_two([v.point for v in t.vertices]) for t in delaunay.triangles)


def _is_delaunay(delaunay):
    count = len(delaunay.triangles)
    for i, t in enumerate(delaunay.triangles):
        for n in t.neighbors:
            if n >= count:
                continue
            abc = t.abc_by_neighbor(n)
            pcb = delaunay.triangles[n].abc_by_neighbor(i)
            if not IntDelaunay.is_flip_not_required(
                pcb.v0.vertex.point,
                abc.v0.vertex.point,
                abc.v1.vertex.point,
                abc.v2.vertex.point,
            ):
                return False
    return True


@pytest.mark.parametrize(
    "a, b, c, p, expected",
    [
        ((0, 4), (-2, 0), (2, 0), (0, -4), True),
        ((0, 2), (-2, 0), (2, 0), (0, -2), True),
        ((0, 2), (-2, 0), (2, 0), (0, -1), False),
        ((0, 1), (-2, 0), (2, 0), (0, -1), False),
    ],
)
def test_is_flip_not_required(a, b, c, p, expected):
    result = IntDelaunay.is_flip_not_required(
        IntPoint(*p), IntPoint(*a), IntPoint(*b), IntPoint(*c)
    )
    assert result is expected


def test_swap_triangles():
    triangles, points = _sample_mesh()
    delaunay = IntDelaunay(triangles, points)
    assert delaunay.swap_triangles(0, 1)
    _validate(delaunay)


def test_swap_not_needed_returns_false():
    triangles, points = _sample_mesh()
    delaunay = IntDelaunay(triangles, points)
    assert delaunay.swap_triangles(0, 1)
    before = [list(t.neighbors) for t in delaunay.triangles]
    assert not delaunay.swap_triangles(0, 1)
    assert [t.neighbors for t in delaunay.triangles] == before


def test_build_preserves_area_and_validity():
    triangles, points = _sample_mesh()
    original_area = _area(IntDelaunay(triangles, points))
    delaunay = IntDelaunay.from_mesh(triangles, points)
    _validate(delaunay)
    assert _area(delaunay) == original_area
    assert _is_delaunay(delaunay)


def test_from_mesh_does_not_modify_input():
    triangles, points = _sample_mesh()
    neighbors = [list(t.neighbors) for t in triangles]
    IntDelaunay.from_mesh(triangles, points)
    assert [t.neighbors for t in triangles] == neighbors


def test_thin_quad_flips_diagonal():
    triangles, points = _thin_quad()
    delaunay = IntDelaunay.from_mesh(triangles, points)
    _validate(delaunay)
    shapes = {frozenset(v.index for v in t.vertices) for t in delaunay.triangles}
    assert shapes == {frozenset({0, 1, 3}), frozenset({1, 2, 3})}
    assert _is_delaunay(delaunay)


def test_fix_triangles_on_already_delaunay_mesh_is_stable():
    triangles, points = _thin_quad()
    delaunay = IntDelaunay.from_mesh(triangles, points)
    before = delaunay.triangle_indices()
    delaunay.fix_triangles([0, 1])
    assert delaunay.triangle_indices() == before


def test_triangle_indices_and_triangulation():
    triangles, points = _sample_mesh()
    delaunay = IntDelaunay.from_mesh(triangles, points)
    indices = delaunay.triangle_indices()
    assert len(indices) == 3 * len(delaunay.triangles)
    assert indices[:3] == [v.index for v in delaunay.triangles[0].vertices]
    triangulation = delaunay.into_triangulation()
    assert isinstance(triangulation, IntTriangulation)
    assert triangulation.indices == indices
    assert triangulation.points == points


def test_empty_mesh():
    delaunay = IntDelaunay.from_mesh([], [])
    assert delaunay.triangle_indices() == []
    assert delaunay.into_triangulation() == IntTriangulation([], [])