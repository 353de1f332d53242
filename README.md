# vfxgeom

Small geometry building blocks for visual-effects tools. The package has no
dependencies outside the standard library. Points and vectors are plain tuples
or sequences of floats.

## Modules

- `vfxgeom.line2.Line2` is a 2D line stored as a half-space: a unit normal
  `right` and an offset `distance`.
  - `Line2.from_points(pos, direction)` builds the line through `pos` that runs
    along `direction`.
  - `dir()` returns the line's direction.
  - `is_right(p)` is true when `p` is on the line or to its right.
    `is_left(p)` is true when `p` is strictly to its left.
  - `signed_distance(p)` gives the distance from the line, positive on the
    right.
  - `reverse()` swaps the two sides in place.
  - `intersect(p1, p2)` returns the fraction `u` at which the line through `p1`
    and `p2` crosses this line. It returns `None` when the two lines are
    parallel.
- `vfxgeom.line3` holds two things:
  - `Line3(pos, dir)` is a 3D line. Its direction is normalised when the line
    is built.
  - `equivalent_line(l1, l2, allow_reverse=False)` tests whether two lines are
    the same line. With `allow_reverse=True`, lines that point in opposite
    directions also count as the same line.
- `vfxgeom.projection.Projection2D(plane_normal, up=None, origin=None)` projects
  3D geometry onto a plane, as seen from the side the normal points to.
  - `up` sets the 2D +y direction. When `up` is not given, the axis of the
    normal's smallest component is used.
  - `origin` is accepted but does not shift the 2D frame.
  - Use `project_point`, `project_line` (which turns a `Line3` into a `Line2`)
    and `project_points`. `set(...)` re-orients an existing projection.
- `vfxgeom.mesh` holds the mesh type and one helper:
  - `SimpleMesh(points, polys)` is an indexed polygon mesh. It has
    `num_points()`, `num_polys()` and `num_vertices()`.
  - `strip_unused_points(mesh)` returns a copy that keeps only the points the
    polygons use. The kept points are ordered by first use.
- `vfxgeom.remap` carries attributes from a source mesh onto fragments of it.
  - `remap_mesh(mesh_src, mesh_dest, settings, barycentric, result=None)`
    fills a `MeshRemapResult` with mappings for points, polygons and vertices,
    both direct and interpolated.
  - `MeshRemapSettings` controls what is generated and holds the hints the
    function uses.
  - `barycentric(polygon_positions, point)` is a function you supply. It must
    return one weight for each polygon vertex.
  - A `DgalError` is raised when a polygon mapping is needed but missing, or
    when its length does not match the destination mesh.
  - `combine_poly_remapping(mapping1, mapping2)` combines two polygon
    remappings into one.
- `vfxgeom.holes.break_holes_2d(polys, holes)` joins each hole to its polygon.
  - Polygons are clockwise loops and holes are anticlockwise loops.
  - Each hole is joined to the smallest polygon around it with a degenerate
    bridge edge.
  - The result is a list of index loops. Each index points into all polygon
    vertices followed by all hole vertices.
  - A hole with no polygon around it is returned reversed. A hole that cannot
    be bridged is dropped.
- `vfxgeom.enums.IntersectType` has the values `INSIDE`, `OUTSIDE` and
  `INTERSECTS`.
- `vfxgeom.exceptions` defines `DgalError` and its subclass
  `DgalSubprocessError`.

## Example

```python
from vfxgeom.line2 import Line2

line = Line2.from_points((0.0, 0.0), (1.0, 0.0))
line.is_right((0.0, -1.0))          # True
line.signed_distance((0.0, -2.0))   # 2.0
```

## What it does not do

This is a library only. It has:

- no command-line tool
- no reading or writing of geometry files
- no operations that edit meshes beyond `strip_unused_points`; there is no
  mesh cleaning, edge insertion or fracturing
- no spatial index

`remap_mesh` does not compute barycentric coordinates itself. The caller has to
supply them.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```