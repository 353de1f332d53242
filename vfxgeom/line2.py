"""Two-dimensional line represented as an oriented halfspace."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

Vec2 = Tuple[float, float]


def _fmt(value: float) -> str:
    return f"{value:g}"


def _normalized(x: float, y: float) -> Vec2:
    length = math.hypot(x, y)
    if length == 0.0:
        return (0.0, 0.0)
    return (x / length, y / length)


@dataclass
class Line2:
    """A 2D line; ``right`` is the unit halfspace normal, ``distance`` its offset."""

    right: Vec2
    distance: float

    def __post_init__(self) -> None:
        self.right = (float(self.right[0]), float(self.right[1]))
        self.distance = float(self.distance)

    @classmethod
    def from_points(cls, pos: Sequence[float], direction: Sequence[float]) -> "Line2":
        """Build the line through ``pos`` running along ``direction``."""
        right = _normalized(direction[1], -direction[0])
        distance = pos[0] * right[0] + pos[1] * right[1]
        return cls(right, distance)

    def dir(self) -> Vec2:
        """Return the line's direction vector."""
        return (-self.right[1], self.right[0])

    def is_right(self, p: Sequence[float]) -> bool:
        """True if ``p`` lies to the right of the line or on it."""
        return (p[0] * self.right[0] + p[1] * self.right[1]) >= self.distance

    def is_left(self, p: Sequence[float]) -> bool:
        """True if ``p`` lies strictly to the left of the line."""
        return not self.is_right(p)

    def signed_distance(self, p: Sequence[float]) -> float:
        """Signed distance from the line; positive on the right."""
        return (p[0] * self.right[0] + p[1] * self.right[1]) - self.distance

    def reverse(self) -> None:
        """Swap the positive and negative sides of the halfspace."""
        self.right = (-self.right[0], -self.right[1])
        self.distance = -self.distance

    def intersect(self, p1: Sequence[float], p2: Sequence[float]) -> Optional[float]:
        """Intersect the line through ``p1`` and ``p2`` with this line.

        Returns the fraction ``u`` such that ``p1 + (p2 - p1) * u`` is the
        intersection point, or None if the lines are parallel.
        """
        d = (p2[0] - p1[0]) * self.right[0] + (p2[1] - p1[1]) * self.right[1]
        if d * d < sys.float_info.epsilon:
            return None
        d1 = p1[0] * self.right[0] + p1[1] * self.right[1]
        return (self.distance - d1) / d

    def __str__(self) -> str:
        return f"(({_fmt(self.right[0])} {_fmt(self.right[1])}) {_fmt(self.distance)})"