import math

import pytest

from vfxgeom.line2 import Line2


def test_from_points_right_is_unit_normal():
    line = Line2.from_points((2.0, 3.0), (3.0, 4.0))
    rx, ry = line.right
    assert math.isclose(math.hypot(rx, ry), 1.0)
    assert math.isclose(rx * 3.0 + ry * 4.0, 0.0, abs_tol=1e-12)


def test_pos_lies_on_line():
    line = Line2.from_points((2.0, 3.0), (1.0, -5.0))
    assert math.isclose(line.signed_distance((2.0, 3.0)), 0.0, abs_tol=1e-12)
    assert line.is_right((2.0, 3.0))


def test_dir_is_parallel_to_given_direction():
    line = Line2.from_points((0.0, 0.0), (0.0, 5.0))
    dx, dy = line.dir()
    assert math.isclose(dx, 0.0, abs_tol=1e-12)
    assert math.isclose(dy, 1.0)


def test_sides_are_opposite():
    line = Line2.from_points((0.0, 0.0), (1.0, 0.0))
    below = (0.0, -1.0)
    above = (0.0, 1.0)
    assert line.is_right(below)
    assert line.is_left(above)
    assert line.signed_distance(below) > 0
    assert line.signed_distance(above) < 0


def test_reverse_flips_sign():
    line = Line2.from_points((1.0, 1.0), (1.0, 2.0))
    point = (4.0, -3.0)
    before = line.signed_distance(point)
    line.reverse()
    assert math.isclose(line.signed_distance(point), -before)
    line.reverse()
    assert math.isclose(line.signed_distance(point), before)


def test_intersect_gives_point_on_line():
    line = Line2.from_points((1.0, 2.0), (2.0, 1.0))
    p1, p2 = (-3.0, 0.0), (4.0, 5.0)
    u = line.intersect(p1, p2)
    assert u is not None
    hit = (p1[0] + (p2[0] - p1[0]) * u, p1[1] + (p2[1] - p1[1]) * u)
    assert math.isclose(line.signed_distance(hit), 0.0, abs_tol=1e-9)


def test_intersect_midpoint():
    line = Line2.from_points((0.0, 0.0), (1.0, 0.0))
    assert line.intersect((0.0, -1.0), (0.0, 1.0)) == pytest.approx(0.5)


def test_intersect_parallel_returns_none():
    line = Line2.from_points((0.0, 0.0), (1.0, 0.0))
    assert line.intersect((0.0, 1.0), (5.0, 1.0)) is None


def test_str_format():
    assert str(Line2((1.0, 0.0), 2.0)) == "((1 0) 2)"