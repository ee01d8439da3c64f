"""Hover, pick and drag handling for the points of an editable path."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from deltamesh.camera import Camera, Vector
from deltamesh.geom import IntPoint


class SelectState(enum.Enum):
    HOVER = "hover"
    DRAG = "drag"


@dataclass(frozen=True)
class DragData:
    """Where a drag started, in view space and in world space."""

    start_cursor: Vector
    start_world: IntPoint


@dataclass(frozen=True)
class ActivePoint:
    """The path point under the cursor; ``drag`` is set while it is dragged."""

    index: int
    state: SelectState
    drag: DragData | None = None


@dataclass(frozen=True)
class ClosestPoint:
    index: int
    point: IntPoint


@dataclass(frozen=True)
class PathEditUpdate:
    """A request to move point ``point_index`` of path ``curve_index`` to ``point``."""

    curve_index: int
    point_index: int
    point: IntPoint


def _sqr_length(a: Vector, b: Vector) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def find_closest_point(
    camera: Camera, radius: float, path: Sequence[IntPoint], cursor: Vector
) -> ClosestPoint | None:
    """The path point nearest the cursor within ``radius`` view units; ties go to the later point."""
    min_ds = radius * radius
    closest: ClosestPoint | None = None
    for index, point in enumerate(path):
        ds = _sqr_length(cursor, camera.world_to_view(point))
        if ds <= min_ds:
            min_ds = ds
            closest = ClosestPoint(index, point)
    return closest


class PathEditorState:
    """Selection state of one editable path."""

    def __init__(self) -> None:
        self.active_point: ActivePoint | None = None

    def mouse_press(
        self, camera: Camera, hover_radius: float, path: Sequence[IntPoint], cursor: Vector
    ) -> bool:
        """Start dragging the point under the cursor; False when there is none."""
        closest = find_closest_point(camera, hover_radius, path, cursor)
        if closest is None:
            return False
        self.active_point = ActivePoint(
            index=closest.index,
            state=SelectState.DRAG,
            drag=DragData(start_cursor=cursor, start_world=closest.point),
        )
        return True

    def mouse_release(
        self, camera: Camera, hover_radius: float, path: Sequence[IntPoint], cursor: Vector
    ) -> bool:
        """End a drag and fall back to hovering; False when nothing was dragged."""
        active = self.active_point
        if active is None or active.state is not SelectState.DRAG:
            return False
        self.active_point = None
        self._mouse_hover(camera, hover_radius, path, cursor)
        return True

    def mouse_move(
        self,
        curve_index: int,
        camera: Camera,
        hover_radius: float,
        path: Sequence[IntPoint],
        cursor: Vector,
    ) -> PathEditUpdate | None:
        """While dragging, the point's new position if it moved; otherwise update the hover."""
        active = self.active_point
        if active is None:
            return None
        if active.state is SelectState.DRAG and active.drag is not None:
            return self._mouse_drag(curve_index, active.index, active.drag, camera, path, cursor)
        self._mouse_hover(camera, hover_radius, path, cursor)
        return None

    @staticmethod
    def _mouse_drag(
        curve_index: int,
        point_index: int,
        drag: DragData,
        camera: Camera,
        path: Sequence[IntPoint],
        cursor: Vector,
    ) -> PathEditUpdate | None:
        translate = cursor - drag.start_cursor
        world_dist = camera.view_distance_to_world(translate).round()
        world_point = world_dist + drag.start_world
        if world_point == path[point_index]:
            return None
        return PathEditUpdate(curve_index, point_index, world_point)

    def _mouse_hover(
        self, camera: Camera, radius: float, path: Sequence[IntPoint], cursor: Vector
    ) -> None:
        closest = find_closest_point(camera, radius, path, cursor)
        if closest is None:
            return
        self.active_point = ActivePoint(index=closest.index, state=SelectState.HOVER)