"""Enumerations shared by the geometry routines."""

from enum import IntEnum


class IntersectType(IntEnum):
    """Result of testing a shape against a region."""

    INSIDE = 0
    OUTSIDE = 1
    INTERSECTS = 2