"""Merging 2D polygon holes into their enclosing polygons."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

Vec2 = Tuple[float, float]
Box = Tuple[Vec2, Vec2]


@dataclass(eq=False)
class _Loop:
    area: float
    verts: List[int] = field(default_factory=list)
    bounds: Optional[Box] = None


def _signed_area(loop: Sequence[Sequence[float]]) -> float:
    n = len(loop)
    total = 0.0
    for k, p in enumerate(loop):
        q = loop[(k + 1) % n]
        total += p[0] * q[1] - q[0] * p[1]
    return total * 0.5


def _bounds(pts: Sequence[Sequence[float]]) -> Optional[Box]:
    if not pts:
        return None
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return ((min(xs), min(ys)), (max(xs), max(ys)))


def _boxes_intersect(a: Optional[Box], b: Optional[Box]) -> bool:
    if a is None or b is None:
        return False
    (amin, amax), (bmin, bmax) = a, b
    return not (
        amax[0] < bmin[0] or amax[1] < bmin[1] or amin[0] > bmax[0] or amin[1] > bmax[1]
    )


def _closest_point_in_box(p: Sequence[float], box: Optional[Box]) -> Vec2:
    if box is None:
        return (p[0], p[1])
    (lo, hi) = box
    return (min(max(p[0], lo[0]), hi[0]), min(max(p[1], lo[1]), hi[1]))


def _is_inside(poly: Sequence[Sequence[float]], p: Sequence[float]) -> bool:
    """Crossing-number point-in-polygon test."""
    inside = False
    n = len(poly)
    x, y = p[0], p[1]
    for k, a in enumerate(poly):
        b = poly[(k + 1) % n]
        if (a[1] > y) != (b[1] > y):
            x_cross = a[0] + (y - a[1]) * (b[0] - a[0]) / (b[1] - a[1])
            if x < x_cross:
                inside = not inside
    return inside


def _orient(a, b, c) -> float:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _on_segment(a, b, p) -> bool:
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def _segments_intersect(p1, p2, q1, q2) -> bool:
    d1 = _orient(q1, q2, p1)
    d2 = _orient(q1, q2, p2)
    d3 = _orient(p1, p2, q1)
    d4 = _orient(p1, p2, q2)
    if ((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and (
        (d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0)
    ):
        return True
    if d1 == 0 and _on_segment(q1, q2, p1):
        return True
    if d2 == 0 and _on_segment(q1, q2, p2):
        return True
    if d3 == 0 and _on_segment(p1, p2, q1):
        return True
    if d4 == 0 and _on_segment(p1, p2, q2):
        return True
    return False


def _staggered(i: int, stagger: int) -> int:
    return i // 2 + stagger if i % 2 == 0 else i // 2


def break_holes_2d(
    polys: Sequence[Sequence[Sequence[float]]],
    holes: Sequence[Sequence[Sequence[float]]],
) -> List[List[int]]:
    """Merge holes into their enclosing polygons via degenerate bridge edges.

    ``polys`` are clockwise vertex loops and ``holes`` anticlockwise ones.
    Returned loops index into the flattened list of all poly vertices
    followed by all hole vertices. Holes without an enclosing poly are
    output reversed; holes that cannot be bridged to their poly are dropped.
    """
    result: List[List[int]] = []
    if not polys and not holes:
        return result

    points: List[Vec2] = []

    def make_loops(src) -> List[_Loop]:
        loops = []
        for loop_src in src:
            lp = _Loop(abs(_signed_area(loop_src)))
            for p in loop_src:
                lp.verts.append(len(points))
                points.append((float(p[0]), float(p[1])))
            lp.bounds = _bounds(loop_src)
            loops.append(lp)
        loops.sort(key=lambda lp: lp.area)
        return loops

    poly_loops = make_loops(polys)
    hole_loops = make_loops(holes)

    # each hole goes to the smallest-area poly that encloses one of its verts
    poly_holes: Dict[int, Tuple[_Loop, List[_Loop]]] = {}
    for hole in hole_loops:
        parent = None
        for poly in poly_loops:
            if poly.area >= hole.area and _boxes_intersect(poly.bounds, hole.bounds):
                poly_pts = [points[v] for v in poly.verts]
                if any(_is_inside(poly_pts, points[v]) for v in hole.verts):
                    parent = poly
                    break
        if parent is None:
            result.append(list(reversed(hole.verts)))
        else:
            poly_holes.setdefault(id(parent), (parent, []))[1].append(hole)

    for poly in poly_loops:
        if id(poly) not in poly_holes:
            result.append(list(poly.verts))

    eps = sys.float_info.epsilon
    for parent, child_holes in poly_holes.values():
        poly_verts = parent.verts
        curr_poly_vert = 0
        banned: Set[int] = set()

        while child_holes:
            found_ray = False
            n_poly = len(poly_verts)
            stagger = n_poly // 2

            for i in range(n_poly):
                if found_ray:
                    break
                poly_vert_index = (_staggered(i, stagger) + curr_poly_vert) % n_poly
                poly_vert = poly_verts[poly_vert_index]
                poly_pt = points[poly_vert]
                if poly_vert in banned:
                    continue

                def dist(h: _Loop) -> float:
                    c = _closest_point_in_box(poly_pt, h.bounds)
                    return (c[0] - poly_pt[0]) ** 2 + (c[1] - poly_pt[1]) ** 2

                sorted_holes = sorted(child_holes, key=dist)
                raytest_loops = sorted_holes + [parent]

                for hole in sorted_holes:
                    hole_verts = hole.verts
                    n_hole = len(hole_verts)
                    stagger2 = n_hole // 2

                    for j in range(n_hole):
                        hole_vert_index = _staggered(j, stagger2)
                        hole_vert = hole_verts[hole_vert_index]
                        hole_pt = points[hole_vert]
                        if hole_vert in banned:
                            continue

                        ray_box = (
                            (min(poly_pt[0], hole_pt[0]) - eps, min(poly_pt[1], hole_pt[1]) - eps),
                            (max(poly_pt[0], hole_pt[0]) + eps, max(poly_pt[1], hole_pt[1]) + eps),
                        )

                        ray_blocked = False
                        for test_loop in raytest_loops:
                            if ray_blocked:
                                break
                            if not _boxes_intersect(ray_box, test_loop.bounds):
                                continue
                            tverts = test_loop.verts
                            nt = len(tverts)
                            for k, v1 in enumerate(tverts):
                                v2 = tverts[(k + 1) % nt]
                                if v1 in (poly_vert, hole_vert) or v2 in (poly_vert, hole_vert):
                                    continue
                                if _segments_intersect(poly_pt, hole_pt, points[v1], points[v2]):
                                    ray_blocked = True
                                    break

                        if not ray_blocked:
                            found_ray = True
                            merged = [
                                hole_verts[(hole_vert_index + k) % n_hole] for k in range(n_hole)
                            ]
                            merged.append(merged[0])
                            merged.append(poly_vert)
                            poly_verts[poly_vert_index + 1:poly_vert_index + 1] = merged
                            child_holes.remove(hole)
                            banned.add(hole_vert)
                            banned.add(poly_vert)
                            break
                    if found_ray:
                        break

            if not found_ray:
                child_holes.pop()

            n = len(poly_verts)
            curr_poly_vert = (curr_poly_vert + 1 + n * 27 // 80) % n

        result.append(list(parent.verts))

    return result