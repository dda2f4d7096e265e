"""A pool of reusable GPU-side buffers with periodic purging of stale ones."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(eq=False)
class PooledBuffer:
    """A buffer together with the time (whole seconds) it was last handed out again."""

    buffer: Any
    last_reuse_time: int = 0

    @property
    def length(self) -> int:
        return len(self.buffer)


class BufferPool:
    """Hands out buffers of at least a requested length, reusing released ones.

    Buffers that have not been reused since the previous purge are dropped
    when more than one second has passed since that purge.
    """

    def __init__(
        self,
        allocate: Callable[[int], Any] = bytearray,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._allocate = allocate
        self._clock = clock
        self._cache: list[PooledBuffer] = []
        self._lock = threading.Lock()
        self._last_purge_time = 0

    def acquire(self, length: int) -> PooledBuffer:
        """Return a cached buffer of at least length bytes, or a new one."""
        now = int(self._clock())
        with self._lock:
            if now - self._last_purge_time > 1:
                self._cache = [
                    b for b in self._cache if b.last_reuse_time > self._last_purge_time
                ]
                self._last_purge_time = now

            best: PooledBuffer | None = None
            for candidate in self._cache:
                if candidate.length >= length and (
                    best is None or best.last_reuse_time > candidate.last_reuse_time
                ):
                    best = candidate

            if best is not None:
                self._cache = [b for b in self._cache if b is not best]
                best.last_reuse_time = now
                return best

        return PooledBuffer(self._allocate(length))

    def release(self, buffer: PooledBuffer) -> None:
        """Return a buffer to the pool for later reuse."""
        with self._lock:
            self._cache.append(buffer)