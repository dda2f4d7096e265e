"""Drawing tools that record pointer input and emit geometry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .builder import Builder
from .layout import Color, Rect, Size, Vec2

_FLOAT_MAX = 3.4028234663852886e38
_FLOAT_MIN_POSITIVE = 1.1754943508222875e-38

_PENCIL_COLOR = Color.from_rgba(0xFF, 0xFF, 0x00, 0xFF)
_PENCIL_THICKNESS = 6
_CLIP_MARGIN = 3


class Drawable(ABC):
    """Something built up from pointer positions and drawn into a builder."""

    @abstractmethod
    def start(self, point: Vec2) -> None:
        """Begin at the given point."""

    @abstractmethod
    def add_point(self, point: Vec2) -> None:
        """Extend with another point."""

    @abstractmethod
    def draw(self, builder: Builder) -> None:
        """Emit geometry into the builder."""


class Pencil(Drawable):
    """A freehand yellow stroke."""

    def __init__(self) -> None:
        self._path: list[Vec2] = []
        self._min_x = _FLOAT_MAX
        self._min_y = _FLOAT_MAX
        self._max_x = _FLOAT_MIN_POSITIVE
        self._max_y = _FLOAT_MIN_POSITIVE

    def start(self, point: Vec2) -> None:
        self._min_x = min(self._min_x, point.x)
        self._min_y = min(self._min_y, point.y)
        self._max_x = min(self._max_x, point.x)
        self._max_y = min(self._max_y, point.y)
        self._path.append(point)

    def add_point(self, point: Vec2) -> None:
        self._min_x = min(self._min_x, point.x)
        self._min_y = min(self._min_y, point.y)
        self._max_x = max(self._max_x, point.x)
        self._max_y = max(self._max_y, point.y)
        self._path.append(point)

    def draw(self, builder: Builder) -> None:
        if len(self._path) < 2:
            return
        margin = _CLIP_MARGIN
        builder.push_clip_rect(
            Rect(
                Vec2(self._min_x - margin, self._min_y - margin),
                Size(
                    self._max_x - self._min_x + 2 * margin,
                    self._max_y - self._min_y + 2 * margin,
                ),
            )
        )
        builder.add_polyline(self._path, _PENCIL_COLOR, _PENCIL_THICKNESS)
        builder.pop_clip_rect()