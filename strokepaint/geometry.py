"""Small vector math helpers."""

from __future__ import annotations

import math


def normalize(x: float, y: float) -> tuple[float, float]:
    """Scale (x, y) to unit length; a zero vector is returned unchanged."""
    d2 = x * x + y * y
    if d2 > 0.0:
        inv_len = 1.0 / math.sqrt(d2)
        return x * inv_len, y * inv_len
    return x, y