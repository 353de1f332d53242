"""Projection of 3D geometry onto a plane's 2D coordinate frame."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from .line2 import Line2
from .line3 import Line3

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


def _cross(a, b) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a, b) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _normalized(v) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / length, v[1] / length, v[2] / length)


def _smallest_axis_vector(v) -> Vec3:
    axis = min(range(3), key=lambda i: abs(v[i]))
    return tuple(1.0 if i == axis else 0.0 for i in range(3))


def _fmt_vec(v) -> str:
    return "(" + " ".join(f"{c:g}" for c in v) + ")"


class Projection2D:
    """Projects 3D points into 2D as seen looking down a plane's normal."""

    def __init__(
        self,
        plane_normal: Sequence[float],
        up: Optional[Sequence[float]] = None,
        origin: Optional[Sequence[float]] = None,
    ) -> None:
        self.xaxis: Vec3 = (1.0, 0.0, 0.0)
        self.yaxis: Vec3 = (0.0, 1.0, 0.0)
        self.set(plane_normal, up, origin)

    def set(
        self,
        plane_normal: Sequence[float],
        up: Optional[Sequence[float]] = None,
        origin: Optional[Sequence[float]] = None,
    ) -> None:
        """Orient the projection onto the plane with normal ``plane_normal``.

        ``up`` aligns with [0, 1] in 2D; when omitted, the axis vector of the
        normal's smallest component is used. ``origin`` is accepted but does
        not shift the 2D frame.
        """
        if up is None:
            up = _smallest_axis_vector(plane_normal)
        self.xaxis = _normalized(_cross(up, plane_normal))
        self.yaxis = _normalized(_cross(plane_normal, self.xaxis))

    def project_point(self, p: Sequence[float]) -> Vec2:
        """Project a 3D point into 2D."""
        return (_dot(p, self.xaxis), _dot(p, self.yaxis))

    def project_line(self, line: Line3) -> Line2:
        """Project a 3D line into a 2D line."""
        return Line2.from_points(self.project_point(line.pos), self.project_point(line.dir))

    def project_points(self, points: Iterable[Sequence[float]]) -> List[Vec2]:
        """Project every point of ``points`` into 2D."""
        return [self.project_point(p) for p in points]

    def __str__(self) -> str:
        return f"(x{_fmt_vec(self.xaxis)} y{_fmt_vec(self.yaxis)})"