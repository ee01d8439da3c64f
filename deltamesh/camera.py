"""View camera mapping integer world coordinates to screen coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from deltamesh.geom import IntPoint

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


class _XY(Protocol):
    x: float
    y: float


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Vector:
    """A 2D vector in view or world space."""

    x: float
    y: float

    def __add__(self, other: _XY) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: _XY) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    def round(self) -> IntPoint:
        """Nearest integer point, halves rounded away from zero."""
        return IntPoint(_round_half_away(self.x), _round_half_away(self.y))


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass
class IntRect:
    """An axis-aligned integer rectangle."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def width(self) -> int:
        return self.max_x - self.min_x

    def height(self) -> int:
        return self.max_y - self.min_y

    def add_point(self, point: IntPoint) -> None:
        """Grow the rectangle to contain ``point``."""
        self.min_x = min(self.min_x, point.x)
        self.max_x = max(self.max_x, point.x)
        self.min_y = min(self.min_y, point.y)
        self.max_y = max(self.max_y, point.y)


def _ilog2(value: int) -> int:
    if value <= 0:
        raise ValueError(f"logarithm of non-positive value {value}")
    return value.bit_length() - 1


def _inverse(value: float) -> float:
    return 1.0 / value if value else math.inf


@dataclass
class Camera:
    """Scale and centre of the view; world y grows upwards, view y downwards."""

    scale: float = 0.0
    i_scale: float = 0.0
    size: Size = field(default_factory=lambda: Size(0.0, 0.0))
    pos: Vector = field(default_factory=lambda: Vector(0.0, 0.0))

    @classmethod
    def empty(cls) -> Camera:
        return cls()

    @classmethod
    def from_rect(cls, rect: IntRect, size: Size) -> Camera:
        """Fit ``rect`` into a view of ``size``, rounded to powers of two."""
        width = float(1 << _ilog2(rect.width()))
        height = float(1 << _ilog2(rect.height()))
        scale = 0.25 * min(size.width / width, size.height / height)
        pos = Vector(0.5 * (rect.min_x + rect.max_x), 0.5 * (rect.min_y + rect.max_y))
        return cls(scale=scale, i_scale=_inverse(scale), size=size, pos=pos)

    @classmethod
    def with_size_and_paths(cls, size: Size, paths: Iterable[Iterable[IntPoint]]) -> Camera:
        """Fit every point of ``paths``; with no paths a default area is shown."""
        paths = list(paths)
        if not paths:
            rect = IntRect(-10_000, 10_000, -10_000, 10_000)
        else:
            rect = IntRect(_I32_MAX, _I32_MIN, _I32_MAX, _I32_MIN)
            for path in paths:
                for point in path:
                    rect.add_point(point)
        return cls.from_rect(rect, size)

    def is_empty(self) -> bool:
        return self.scale < 1e-10

    def is_not_empty(self) -> bool:
        return self.scale > 0.0

    def set_scale(self, scale: float) -> None:
        self.scale = scale
        self.i_scale = _inverse(scale)

    def world_to_screen(self, view_left_top: _XY, world: _XY) -> Vector:
        view = self.world_to_view(world)
        return Vector(view.x + view_left_top.x, view.y + view_left_top.y)

    def world_to_view(self, world: _XY) -> Vector:
        x = self.scale * (world.x - self.pos.x) + 0.5 * self.size.width
        y = self.scale * (self.pos.y - world.y) + 0.5 * self.size.height
        return Vector(x, y)

    def view_to_world(self, view: _XY) -> Vector:
        x = self.i_scale * (view.x - 0.5 * self.size.width) + self.pos.x
        y = self.i_scale * (0.5 * self.size.height - view.y) + self.pos.y
        return Vector(x, y)

    def view_distance_to_world(self, view_distance: _XY) -> Vector:
        return Vector(view_distance.x * self.i_scale, -view_distance.y * self.i_scale)