"""Panning, zooming and grid placement for the drawing sheet."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from deltamesh.camera import Camera, Size, Vector

MIN_GRID_SCALE = 20.0
"""Below this camera scale no grid is drawn."""

GRID_SCALE_RANGE = 50.0
"""Scale span over which the grid fades in."""

GRID_STROKE_RADIUS = 1.0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class _Drag:
    start_screen: Vector
    start_world: Vector


class SheetState:
    """Tracks a pan gesture on the sheet and works out zoomed cameras."""

    def __init__(self) -> None:
        self._drag: _Drag | None = None

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    def mouse_press(self, camera: Camera, view_cursor: Vector) -> None:
        """Start panning from ``view_cursor``."""
        self._drag = _Drag(start_screen=view_cursor, start_world=camera.pos)

    def mouse_release(self) -> None:
        """Stop panning."""
        self._drag = None

    def mouse_move(self, camera: Camera, view_cursor: Vector) -> Vector | None:
        """New camera position while panning, or None when no pan is in progress."""
        drag = self._drag
        if drag is None:
            return None
        translate = drag.start_screen - view_cursor
        world_dist = camera.view_distance_to_world(translate)
        return Vector(drag.start_world.x + world_dist.x, drag.start_world.y + world_dist.y)

    def mouse_wheel_scrolled(
        self,
        camera: Camera,
        viewport_size: Size,
        delta_y: float | None,
        view_cursor: Vector,
    ) -> Camera | None:
        """Zoom around the cursor by a pixel scroll amount.

        ``delta_y`` is None for scrolls not measured in pixels, which are ignored.
        """
        if delta_y is None:
            return None

        factor = 1.0 + delta_y / viewport_size.height
        new_camera = dataclasses.replace(camera)
        new_camera.set_scale(factor * camera.scale)

        world_pos = camera.view_to_world(view_cursor)
        new_view_pos = new_camera.world_to_view(world_pos)

        view_distance = view_cursor - new_view_pos
        world_distance = new_camera.view_distance_to_world(view_distance)

        new_camera.pos = new_camera.pos - world_distance
        return new_camera


def is_size_changed(camera: Camera, size: Size) -> bool:
    """True when ``size`` differs from the camera's view size by more than 0.01."""
    w = abs(size.width - camera.size.width)
    h = abs(size.height - camera.size.height)
    return w > 0.01 or h > 0.01


@dataclass(frozen=True)
class GridLayout:
    """Grid lines at integer world coordinates, in view coordinates.

    ``vertical`` holds x positions of vertical lines, ``horizontal`` the y
    positions of horizontal lines; ``opacity`` fades the grid in with zoom.
    """

    opacity: float
    stroke_radius: float
    vertical: list[float]
    horizontal: list[float]


def _line_positions(start: float, end: float, count_float: float) -> list[float]:
    count = int(count_float)
    step = (end - start) / count_float if count_float else 0.0
    return [start + k * step for k in range(count + 1)]


def grid_layout(camera: Camera, width: float, height: float) -> GridLayout | None:
    """Where to draw the unit grid in a view of the given size, or None when too zoomed out."""
    scale = camera.scale - MIN_GRID_SCALE
    if scale <= 0.0:
        return None

    opacity = min(scale / GRID_SCALE_RANGE, 1.0)

    world_min = camera.view_to_world(Vector(0.0, 0.0))
    world_max = camera.view_to_world(Vector(width, height))

    round_min_x = float(math.ceil(world_min.x))
    round_min_y = float(math.ceil(world_min.y))
    round_max_x = float(math.trunc(world_max.x))
    round_max_y = float(math.trunc(world_max.y))

    nfx = abs(_round_half_away(round_max_x - round_min_x + 0.001))
    nfy = abs(_round_half_away(round_max_y - round_min_y + 0.001))

    round_view_min = camera.world_to_view(Vector(round_min_x, round_min_y))
    round_view_max = camera.world_to_view(Vector(round_max_x, round_max_y))

    return GridLayout(
        opacity=opacity,
        stroke_radius=GRID_STROKE_RADIUS,
        vertical=_line_positions(round_view_min.x, round_view_max.x, nfx),
        horizontal=_line_positions(round_view_min.y, round_view_max.y, nfy),
    )