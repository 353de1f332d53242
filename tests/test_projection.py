import math

import pytest

from vfxgeom.line3 import Line3
from vfxgeom.projection import Projection2D


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


@pytest.mark.parametrize(
    "normal",
    [(0.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.3, -0.5, 0.8)],
)
def test_axes_orthonormal_and_in_plane(normal):
    proj = Projection2D(normal)
    assert math.isclose(_dot(proj.xaxis, proj.xaxis), 1.0)
    assert math.isclose(_dot(proj.yaxis, proj.yaxis), 1.0)
    assert abs(_dot(proj.xaxis, proj.yaxis)) < 1e-12
    assert abs(_dot(proj.xaxis, normal)) < 1e-12
    assert abs(_dot(proj.yaxis, normal)) < 1e-12


def test_up_vector_maps_to_positive_y():
    proj = Projection2D((0.0, 0.0, 1.0), up=(0.0, 1.0, 0.0))
    x, y = proj.project_point((3.0, 4.0, 5.0))
    assert x == pytest.approx(3.0)
    assert y == pytest.approx(4.0)


def test_normal_component_is_dropped():
    proj = Projection2D((0.2, 0.9, -0.4))
    a = proj.project_point((1.0, 2.0, 3.0))
    normal = (0.2, 0.9, -0.4)
    b = proj.project_point(tuple(c + 7.0 * n for c, n in zip((1.0, 2.0, 3.0), normal)))
    assert a == pytest.approx(b)


def test_project_points_matches_single():
    proj = Projection2D((1.0, 1.0, 0.0))
    pts = [(1.0, 0.0, 0.0), (0.0, 2.0, 3.0), (-1.0, 4.0, 2.0)]
    assert proj.project_points(pts) == [proj.project_point(p) for p in pts]
    assert proj.project_points([]) == []


def test_project_line_contains_projected_points():
    proj = Projection2D((0.0, 0.0, 1.0), up=(0.0, 1.0, 0.0))
    line = Line3((1.0, 1.0, 2.0), (1.0, 1.0, 0.0))
    line2 = proj.project_line(line)
    for t in (0.0, 1.5, -2.0):
        p = tuple(a + t * d for a, d in zip(line.pos, line.dir))
        assert line2.signed_distance(proj.project_point(p)) == pytest.approx(0.0, abs=1e-12)


def test_reset_changes_orientation():
    proj = Projection2D((0.0, 0.0, 1.0), up=(0.0, 1.0, 0.0))
    proj.set((0.0, 0.0, 1.0), up=(1.0, 0.0, 0.0))
    assert proj.yaxis == pytest.approx((1.0, 0.0, 0.0))


def test_str_format():
    proj = Projection2D((0.0, 0.0, 1.0), up=(0.0, 1.0, 0.0))
    assert str(proj) == "(x(1 0 0) y(0 1 0))"