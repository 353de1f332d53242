"""A minimal indexed polygon mesh and mesh clean-up helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence


@dataclass
class SimpleMesh:
    """Polygons stored as lists of indices into a shared point list."""

    points: List[Sequence[float]] = field(default_factory=list)
    polys: List[List[int]] = field(default_factory=list)

    def num_points(self) -> int:
        """Number of points in the mesh."""
        return len(self.points)

    def num_polys(self) -> int:
        """Number of polygons in the mesh."""
        return len(self.polys)

    def num_vertices(self) -> int:
        """Total number of polygon vertices."""
        return sum(len(poly) for poly in self.polys)


def strip_unused_points(mesh: SimpleMesh) -> SimpleMesh:
    """Return a copy of ``mesh`` with points not used by any polygon removed.

    Surviving points are ordered by their first use in the polygon list.
    """
    remapping: Dict[int, int] = {}
    points: List[Sequence[float]] = []

    for poly in mesh.polys:
        for ptnum in poly:
            if ptnum not in remapping:
                remapping[ptnum] = len(points)
                points.append(mesh.points[ptnum])

    polys = [[remapping[ptnum] for ptnum in poly] for poly in mesh.polys]
    return SimpleMesh(points, polys)