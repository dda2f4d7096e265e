import math

import pytest

from strokepaint.builder import Builder
from strokepaint.layout import Color, Vec2
from strokepaint.pencil import Drawable, Pencil


def test_drawable_is_abstract():
    with pytest.raises(TypeError):
        Drawable()


def test_single_point_draws_nothing():
    pencil = Pencil()
    pencil.start(Vec2(5, 5))
    builder = Builder()
    pencil.draw(builder)
    assert builder.commands == []
    assert builder.vertices == []


def test_stroke_emits_one_command_and_restores_clip_stack():
    pencil = Pencil()
    pencil.start(Vec2(5, 5))
    pencil.add_point(Vec2(10, 20))
    pencil.add_point(Vec2(15, 12))
    builder = Builder()
    pencil.draw(builder)
    assert len(builder.commands) == 1
    assert builder.commands[0].count == len(builder.indices) == 12
    with pytest.raises(IndexError):
        builder.clip_rect()


def test_stroke_is_yellow():
    pencil = Pencil()
    pencil.start(Vec2(0, 0))
    pencil.add_point(Vec2(4, 4))
    builder = Builder()
    pencil.draw(builder)
    expected = int(Color.from_rgba(0xFF, 0xFF, 0x00, 0xFF))
    assert {v.color for v in builder.vertices} == {expected}


def test_stroke_is_six_wide():
    pencil = Pencil()
    pencil.start(Vec2(1, 1))
    pencil.add_point(Vec2(9, 3))
    builder = Builder()
    pencil.draw(builder)
    v = [vertex.position for vertex in builder.vertices]
    assert math.dist((v[0].x, v[0].y), (v[2].x, v[2].y)) == pytest.approx(6)


def test_clip_rect_covers_stroke_with_margin():
    pencil = Pencil()
    pencil.start(Vec2(5, 5))
    pencil.add_point(Vec2(10, 20))
    builder = Builder()
    pencil.draw(builder)
    clip = builder.commands[0].clip_rect
    assert clip.origin == Vec2(5 - 3, 5 - 3)
    assert clip.size.width == pytest.approx(10 - 5 + 6)
    assert clip.size.height == pytest.approx(20 - 5 + 6)
    for point in (Vec2(5, 5), Vec2(10, 20)):
        assert clip.contains(point)


def test_drawing_twice_gives_identical_geometry():
    pencil = Pencil()
    pencil.start(Vec2(2, 3))
    pencil.add_point(Vec2(7, 8))
    first, second = Builder(), Builder()
    pencil.draw(first)
    pencil.draw(second)
    assert first.vertices == second.vertices
    assert first.indices == second.indices