import math

import pytest

from strokepaint.geometry import normalize


@pytest.mark.parametrize("vec", [(3.0, 4.0), (-2.0, 7.5), (0.001, 0.0), (0.0, -9.0), (1e6, -1e6)])
def test_result_has_unit_length(vec):
    x, y = normalize(*vec)
    assert math.hypot(x, y) == pytest.approx(1.0)


@pytest.mark.parametrize("vec", [(3.0, 4.0), (-2.0, 7.5), (5.0, -1.0)])
def test_direction_is_preserved(vec):
    x, y = normalize(*vec)
    assert math.copysign(1.0, x) == math.copysign(1.0, vec[0])
    assert x * vec[1] == pytest.approx(y * vec[0])


def test_zero_vector_is_unchanged():
    assert normalize(0.0, 0.0) == (0.0, 0.0)


def test_unit_vector_is_fixed_point():
    assert normalize(1.0, 0.0) == (1.0, 0.0)
    assert normalize(0.0, -1.0) == (0.0, -1.0)