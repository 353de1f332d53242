"""Three-dimensional lines and line comparison."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Tuple

Vec3 = Tuple[float, float, float]


def _normalized(v) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / length, v[1] / length, v[2] / length)


def _dot(a, b) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


@dataclass
class Line3:
    """A 3D line through ``pos`` along the unit vector ``dir``."""

    pos: Vec3
    dir: Vec3

    def __post_init__(self) -> None:
        self.pos = (float(self.pos[0]), float(self.pos[1]), float(self.pos[2]))
        self.dir = _normalized(self.dir)


def equivalent_line(l1: Line3, l2: Line3, allow_reverse: bool = False) -> bool:
    """True if both lines describe the same line.

    With ``allow_reverse`` the lines may run in opposite directions.
    """
    epsilon = sys.float_info.epsilon

    dirdot = _dot(l1.dir, l2.dir)
    if allow_reverse:
        dirdot = abs(dirdot)
    if abs(dirdot - 1.0) > epsilon:
        return False

    posdiff = tuple(b - a for a, b in zip(l1.pos, l2.pos))
    if math.sqrt(_dot(posdiff, posdiff)) > epsilon:
        posdot = abs(_dot(_normalized(posdiff), l1.dir))
        if abs(posdot - 1.0) > epsilon:
            return False

    return True