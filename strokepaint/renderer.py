"""Turns a builder's draw list into GPU-ready frames."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .buffer_pool import BufferPool, PooledBuffer
from .builder import Builder
from .layout import Context, Index, Rect, Vec2, Vertex

Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

_VERTEX_FORMAT = struct.Struct("<ffffI")
_INDEX_FORMAT = struct.Struct("<I")

VERTEX_STRIDE = _VERTEX_FORMAT.size
"""Size in bytes of one packed vertex."""

INDEX_SIZE = _INDEX_FORMAT.size
"""Size in bytes of one packed index."""

PRIMITIVE_TYPE = "triangle_strip"
DEBUG_GROUP = "Boden Gui rendering"
CLEAR_COLOR = (0.0, 0.0, 0.0, 0.0)
WHITE_TEXTURE = bytes((255, 255, 255, 255))

_shared_pool = BufferPool()


@dataclass(frozen=True)
class Viewport:
    """The area of the target drawn into, in pixels, with its depth range."""

    origin_x: float
    origin_y: float
    width: float
    height: float
    znear: float
    zfar: float


@dataclass(frozen=True)
class ScissorRect:
    """A clip rectangle in whole pixels."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class DrawCall:
    """One indexed draw: how many indices, starting at which byte of the index buffer."""

    scissor: ScissorRect
    count: int
    index_byte_offset: int
    primitive: str = PRIMITIVE_TYPE


@dataclass
class Frame:
    """Everything encoded for one frame, ready to be submitted."""

    surface_handle: int
    viewport: Viewport
    projection: Matrix4
    draw_calls: list[DrawCall] = field(default_factory=list)
    vertex_buffer: Optional[PooledBuffer] = None
    index_buffer: Optional[PooledBuffer] = None
    committed: bool = False
    _pool: Optional[BufferPool] = field(default=None, repr=False)

    def complete(self) -> None:
        """Mark the frame as finished, handing its buffers back to the pool."""
        if not self.committed:
            raise RuntimeError("frame was not committed")
        if self._pool is None:
            return
        for buffer in (self.vertex_buffer, self.index_buffer):
            if buffer is not None:
                self._pool.release(buffer)
        self._pool = None


def viewport(context: Context) -> Viewport:
    """The full-surface viewport of a context, in pixels."""
    return Viewport(
        0.0,
        0.0,
        context.display_size.width * context.display_scale.x,
        context.display_size.height * context.display_scale.y,
        0.0,
        1.0,
    )


def ortho_projection(context: Context) -> Matrix4:
    """Orthographic projection from points (origin top left) to clip space.

    The result is given column by column.
    """
    port = viewport(context)
    left, right = 0.0, port.width
    top, bottom = 0.0, port.height
    near, far = port.znear, port.zfar
    sx, sy = context.display_scale.x, context.display_scale.y
    if right == left or bottom == top:
        raise ValueError("display size must be non-zero in both directions")
    return (
        ((2.0 * sx) / (right - left), 0.0, 0.0, 0.0),
        (0.0, (2.0 * sy) / (top - bottom), 0.0, 0.0),
        (0.0, 0.0, 1.0 / (far - near), 0.0),
        (
            (right + left) / (left - right),
            (top + bottom) / (bottom - top),
            near / (far - near),
            1.0,
        ),
    )


def scissor_rect(clip_rect: Rect, display_scale: Vec2) -> ScissorRect:
    """Scale a clip rectangle in points to whole pixels, truncating toward zero."""

    def pixels(value: float) -> int:
        return max(0, int(value))

    return ScissorRect(
        pixels(clip_rect.origin.x * display_scale.x),
        pixels(clip_rect.origin.y * display_scale.y),
        pixels(clip_rect.size.width * display_scale.x),
        pixels(clip_rect.size.height * display_scale.y),
    )


def pack_vertices(vertices: Iterable[Vertex]) -> bytes:
    """Lay vertices out as little-endian position, uv and RGBA colour."""
    return b"".join(
        _VERTEX_FORMAT.pack(v.position.x, v.position.y, v.uv.x, v.uv.y, v.color)
        for v in vertices
    )


def pack_indices(indices: Iterable[Index]) -> bytes:
    """Lay indices out as little-endian unsigned 32-bit integers."""
    return b"".join(_INDEX_FORMAT.pack(i) for i in indices)


def _fill(buffer: PooledBuffer, data: bytes) -> None:
    buffer.buffer[: len(data)] = data


class Renderer:
    """Encodes the contents of its builder into frames."""

    def __init__(self, pool: Optional[BufferPool] = None) -> None:
        self.builder = Builder()
        self.texture = WHITE_TEXTURE
        self._pool = pool if pool is not None else _shared_pool
        self._frame: Optional[Frame] = None
        self._display_scale = Vec2()

    def begin_draw(self, context: Context) -> None:
        """Start encoding a frame for the given surface and display geometry."""
        projection = ortho_projection(context)
        self._display_scale = context.display_scale
        self._frame = Frame(context.surface_handle, viewport(context), projection)

    def end_draw(self) -> Frame:
        """Finish the frame, uploading geometry and recording one draw per command."""
        frame = self._frame
        if frame is None:
            raise RuntimeError("end_draw called without begin_draw")
        self._frame = None

        builder = self.builder
        if not builder.indices or not builder.vertices:
            return frame

        vertex_data = pack_vertices(builder.vertices)
        index_data = pack_indices(builder.indices)
        frame.vertex_buffer = self._pool.acquire(len(vertex_data))
        frame.index_buffer = self._pool.acquire(len(index_data))
        _fill(frame.vertex_buffer, vertex_data)
        _fill(frame.index_buffer, index_data)

        frame.draw_calls = [
            DrawCall(
                scissor_rect(command.clip_rect, self._display_scale),
                command.count,
                command.index_buffer_offset * INDEX_SIZE,
            )
            for command in builder.commands
        ]
        frame._pool = self._pool
        frame.committed = True
        return frame