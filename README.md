# deltamesh

Integer geometry for triangle meshes: Delaunay edge flipping, grouping
triangles into convex polygons, and centroid nets. It also has the
viewport helpers an interactive mesh editor needs: a camera that maps
between world and view space, pan and zoom state for a grid sheet, point
picking and dragging on a path, loading of test shapes from JSON, and the
list of view modes.

Mesh coordinates are Python integers and the mesh predicates (the
in-circle test, the convexity checks, areas) are computed exactly. The
camera and viewport helpers work in floating point.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Meshes

`deltamesh.geom` defines the building blocks:

- `IntPoint(x, y)` with `subtract`, `dot_product` and `cross_product`
  (and `+`, `-`).
- `IndexPoint(index, point)`: a point with its index in the mesh point
  list; `IndexPoint.empty()` has the nil index.
- `IntTriangle(vertices, neighbors)`: three `IndexPoint` vertices and, for
  each vertex, the index of the triangle across the opposite edge. A
  missing neighbour is the nil index; check with `is_not_nil`.
  `IntTriangle.from_vertices(a, b, c)` makes a triangle with no
  neighbours. `opposite` and `update_neighbor` raise `ValueError` when the
  given neighbour is not linked.
- `area_two(contour)`: twice the signed area of a closed contour,
  negative for counter-clockwise order.

Given a triangle mesh with neighbour links:

```python
from deltamesh.delaunay import IntDelaunay
from deltamesh.convex import to_convex_polygons
from deltamesh.centroid import centroid_net

delaunay = IntDelaunay.from_mesh(triangles, points)  # copies, then flips edges until Delaunay

flat = delaunay.into_triangulation()                 # IntTriangulation: indices + points
polygons = to_convex_polygons(delaunay)              # list of convex contours, no overlap
cells = centroid_net(delaunay, 0)                    # one polygon around each vertex
```

- `IntDelaunay.build()` flips edges in place; `fix_triangles(indices)`
  repairs the given triangles and any triangle a flip touches;
  `swap_triangles(i, j)` flips the shared edge of two neighbours when
  needed and returns whether it did.
- `IntDelaunay.is_flip_not_required(p, a, b, c)` is the in-circle test on
  its own: for triangles `abc` and `pcb` sharing edge `bc`, it is true
  when no flip is needed.
- `IntDelaunay.triangle_indices()` gives the flat vertex index list,
  three per triangle.
- `to_convex_polygons` merges adjacent triangles greedily into convex
  polygons; `simplify_contour` (used on each result) drops repeated and
  collinear points and returns an empty list if fewer than three remain.
- `centroid_net(delaunay, min_area)` builds, around each vertex, a
  polygon through the centres of the surrounding triangles and the
  midpoints of its edges; border vertices close the polygon through the
  vertex itself. Polygons whose area is not above `min_area` are dropped,
  unless `min_area` is 0. `triangle_center` and `middle` round toward
  zero.

## Combining meshes

`deltamesh.builder.TriangulationBuilder` appends several `Triangulation`
values (points plus indices) into one, shifting the indices of each
appended piece by the number of points already held. `append` returns
the builder; `build()` returns the combined `Triangulation`. An optional
`index_limit` makes `append` raise `OverflowError` when the point count
would pass it.

## Viewport

`deltamesh.camera` holds `Camera`, `Vector`, `Size` and `IntRect`.
`Camera.with_size_and_paths(size, paths)` fits a camera to every point of
the paths (a default area of ±10 000 when there are none);
`Camera.from_rect` fits a rectangle. A camera converts with
`world_to_view`, `view_to_world`, `world_to_screen` and
`view_distance_to_world`; world y grows upwards, view y downwards.
`Vector.round()` gives the nearest `IntPoint`.

`deltamesh.sheet.SheetState` turns mouse presses, moves and wheel scrolls
into new camera positions (`mouse_move`) and zoomed cameras
(`mouse_wheel_scrolled`, which keeps the world point under the cursor in
place). `grid_layout(camera, width, height)` returns a `GridLayout` with
the view positions of the unit grid lines and their opacity, or `None`
when the camera is too far zoomed out. `is_size_changed` compares a view
size with the camera's.

`deltamesh.path_editor.PathEditorState` picks the path point under the
cursor (`find_closest_point`), starts a drag on `mouse_press`, and on
`mouse_move` during a drag returns a `PathEditUpdate` with the point's new
integer position when it has moved.

## Test sets

`deltamesh.resource.TriangleResource` holds numbered test shapes, either
read lazily from a folder of `test_<n>.json` files (`with_path`) or taken
from one JSON array (`with_content`). Each test is an object with a
`paths` list; a point is `[x, y]` or `{"x": x, "y": y}` with integer
coordinates. `load(index)` returns a copy of the test, or `None` when it
does not exist or cannot be read; read and parse errors are logged, not
raised.

`deltamesh.modes.ModeOption` lists the view modes: raw, Delaunay,
convex, tessellation and centroid net. `uses_refinement()` is true for
tessellation and centroid net, `shows_polygons()` for convex and
centroid net.

## What it does not do

- It does not triangulate polygons: the Delaunay, convex and centroid
  functions start from a triangle mesh with neighbour links that you
  supply.
- It has no mesh refinement by circumcentres, although `ModeOption`
  names a tessellation mode.
- It works on integer coordinates only; there is no mapping from
  floating-point shapes.
- It draws nothing and has no window or command: the viewport classes
  compute positions and state for an editor to use.