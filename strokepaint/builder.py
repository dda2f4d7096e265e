"""Turns strokes into indexed triangle geometry and draw commands."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from .geometry import normalize
from .layout import Color, Command, Index, Rect, Vec2, Vertex


class Builder:
    """Accumulates vertices, indices and draw commands for one frame."""

    def __init__(self) -> None:
        self.commands: list[Command] = []
        self.indices: list[Index] = []
        self.vertices: list[Vertex] = []
        self._clip_rect_stack: list[Rect] = []

    def add_rect(self, p1: Vec2, p2: Vec2, color: Color, thickness: float) -> None:
        """Outline the rectangle spanned by two corners."""
        if thickness <= 0:
            return
        path = [p1, Vec2(p1.x, p2.y), p2, Vec2(p2.x, p1.x)]
        self.add_polyline(path, color, thickness)

    def add_polyline(self, path: Sequence[Vec2], color: Color, thickness: float) -> None:
        """Add one command drawing each segment of the path as a quad."""
        index_offset = len(self.indices)
        command = Command(0, index_offset, len(self.vertices), self.clip_rect())
        self.commands.append(command)

        packed = int(color)
        half = thickness * 0.5
        origin = Vec2(0, 0)
        for a, b in pairwise(path):
            dx, dy = normalize(b.x - a.x, b.y - a.y)
            dx *= half
            dy *= half
            base = len(self.vertices)
            self.vertices.extend(
                (
                    Vertex(Vec2(a.x + dy, a.y - dx), origin, packed),
                    Vertex(Vec2(b.x + dy, b.y - dx), origin, packed),
                    Vertex(Vec2(a.x - dy, a.y + dx), origin, packed),
                    Vertex(Vec2(b.x - dy, b.y + dx), origin, packed),
                )
            )
            self.indices.extend((base, base + 1, base + 2, base + 1, base + 2, base + 3))

        command.count = len(self.indices) - index_offset

    def push_clip_rect(self, rect: Rect) -> None:
        """Make rect the clip rectangle for commands added from now on."""
        self._clip_rect_stack.append(rect)

    def pop_clip_rect(self) -> None:
        """Restore the previous clip rectangle."""
        if not self._clip_rect_stack:
            raise IndexError("clip rect stack is empty")
        self._clip_rect_stack.pop()

    def clip_rect(self) -> Rect:
        """Return the current clip rectangle."""
        if not self._clip_rect_stack:
            raise IndexError("clip rect stack is empty")
        return self._clip_rect_stack[-1]

    def reset(self) -> None:
        """Drop the commands, vertices and clip rectangles of the last frame."""
        self.commands.clear()
        self.vertices.clear()
        self._clip_rect_stack.clear()