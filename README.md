# strokepaint

The drawing core of a small paint program. It does the following:

- turns pencil strokes into indexed triangle geometry;
- groups that geometry into draw commands, each with a clip rectangle;
- recycles vertex and index buffers through a time-aware pool;
- prepares each frame for a GPU: projection matrix, viewport, scissor rectangles and packed buffers.

The package has no runtime dependencies.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `strokepaint.layout`

Value types: `Vec2`, `Vec4`, `Size`, `Rect`, `Color`, `Vertex`, `Command` and `Context`.

- `Rect.contains(point)` tells whether a point lies inside the rectangle. Points on the edges count as inside.
- `Color` holds a 32-bit RGBA value, with red in the lowest byte. The default is opaque black (`0xFF000000`).
- `Color.from_rgba(r, g, b, a)` packs four channels into a `Color`. It raises `ValueError` if a channel is outside 0..255.
- `int(color)` returns the packed value.

### `strokepaint.geometry`

`normalize(x, y)` returns the vector scaled to unit length. A zero vector is returned unchanged.

### `strokepaint.builder`

`Builder` collects three lists: `commands`, `indices` and `vertices`.

- `add_polyline(path, color, thickness)` adds one `Command` for the whole path.
  - Each consecutive pair of points becomes a quad `thickness` wide. The quad has four vertices and six indices.
  - The path is not closed.
  - The command takes the current clip rectangle, so one must have been pushed first. Otherwise `IndexError` is raised.
- `add_rect(p1, p2, color, thickness)` does nothing when `thickness <= 0`. Otherwise it draws a polyline through `p1`, `(p1.x, p2.y)`, `p2` and `(p2.x, p1.x)`.
- `push_clip_rect`, `pop_clip_rect` and `clip_rect` manage a stack of clip rectangles. Popping or reading an empty stack raises `IndexError`.
- `reset()` clears `commands`, `vertices` and the clip-rectangle stack. It leaves `indices` as they are.

### `strokepaint.buffer_pool`

`BufferPool(allocate=bytearray, clock=time.monotonic)` hands out `PooledBuffer` objects.

- `acquire(length)` returns a released buffer of at least `length` bytes if one is cached. When several fit, it picks the one reused least recently. If none fits, it allocates a new buffer.
- `release(buffer)` puts a buffer back into the pool.
- Cached buffers are purged when more than one second has passed since the last purge. A purge drops every cached buffer that has not been reused since the purge before it.
- Access to the pool is guarded by a lock.

### `strokepaint.pencil`

`Drawable` is the abstract interface, with `start`, `add_point` and `draw`.

`Pencil` records a freehand path. Its `draw(builder)` does nothing for fewer than two points. Otherwise it:

1. pushes a clip rectangle, which runs from the smallest coordinates of all points to the largest coordinates of the points added after the first, grown by 3 on each side;
2. adds the path as a yellow polyline 6 wide;
3. pops the clip rectangle.

### `strokepaint.renderer`

Helper functions:

- `viewport(context)`
- `ortho_projection(context)`, which raises `ValueError` for a zero display size
- `scissor_rect(clip_rect, display_scale)`
- `pack_vertices(vertices)`, which writes little-endian `<ffffI`
- `pack_indices(indices)`, which writes little-endian `<I`

`Renderer(pool=None)` owns a `builder`. Without a pool it uses a shared module-level one.

- `begin_draw(context)` starts a `Frame`.
- `end_draw()` returns that frame. It raises `RuntimeError` if `begin_draw` was not called first.
  - If the builder has no indices or no vertices, the frame comes back empty and uncommitted.
  - Otherwise `end_draw` fills pooled vertex and index buffers and records one `DrawCall` per command, with its `ScissorRect` and byte offset. The frame is then marked committed.
- `Frame.complete()` hands a committed frame's buffers back to the pool.

## Example

```python
from strokepaint.buffer_pool import BufferPool
from strokepaint.layout import Context, Size, Vec2
from strokepaint.pencil import Pencil
from strokepaint.renderer import Renderer

pool = BufferPool(allocate=bytearray, clock=lambda: 0)
renderer = Renderer(pool)

pencil = Pencil()
pencil.start(Vec2(10, 10))
pencil.add_point(Vec2(40, 25))
pencil.add_point(Vec2(80, 60))

renderer.begin_draw(Context(surface_handle=0, display_size=Size(800, 600),
                            display_scale=Vec2(2, 2)))
pencil.draw(renderer.builder)
frame = renderer.end_draw()
# frame.draw_calls, frame.vertex_buffer and frame.index_buffer are ready to submit
frame.complete()
```

## What this package does not do

- It opens no window and has no command-line program.
- It reads no mouse or touch input: points must be fed to a `Pencil` by the caller.
- It does not talk to a GPU. A `Frame` is plain data describing what to draw, and submitting it is left to the caller.
- Nothing is saved to or loaded from disk.