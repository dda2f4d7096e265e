"""Plain geometry and draw-list value types."""

from __future__ import annotations

from dataclasses import dataclass, field

Index = int
"""Element type of an index buffer (unsigned 32-bit)."""


@dataclass(frozen=True)
class Vec2:
    """A 2D point or direction."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vec4:
    """A 4-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class Size:
    """Width and height of an area."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    origin: Vec2 = field(default_factory=Vec2)
    size: Size = field(default_factory=Size)

    def contains(self, point: Vec2) -> bool:
        """Return True if the point lies inside the rectangle, edges included."""
        return (
            self.origin.x <= point.x <= self.origin.x + self.size.width
            and self.origin.y <= point.y <= self.origin.y + self.size.height
        )


@dataclass(frozen=True)
class Color:
    """A colour packed as 32-bit RGBA with red in the lowest byte."""

    value: int = 0xFF000000

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Pack four 8-bit channels into a colour."""
        for name, channel in zip("rgba", (r, g, b, a)):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"channel {name} out of range 0..255: {channel}")
        return cls(r | g << 8 | b << 16 | a << 24)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Vertex:
    """A vertex as laid out for the GPU: position, texture coordinate, colour."""

    position: Vec2
    uv: Vec2
    color: int


@dataclass
class Command:
    """One indexed draw over a range of the index buffer, clipped to a rectangle."""

    count: int
    index_buffer_offset: int
    vertex_buffer_offset: int
    clip_rect: Rect


@dataclass(frozen=True)
class Context:
    """What a frame is drawn onto: a surface handle and the display geometry."""

    surface_handle: int
    display_size: Size
    display_scale: Vec2