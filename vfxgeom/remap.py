"""Attribute remapping between a source mesh and fragments derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .exceptions import DgalError
from .mesh import SimpleMesh

Contrib = Tuple[int, float]
Barycentric = Callable[[List[Sequence[float]], Sequence[float]], Sequence[float]]


@dataclass
class MeshRemapSettings:
    """Options and hints controlling :func:`remap_mesh`.

    ``point_mapping`` maps each destination point to a source point (>= 0) or
    marks it as new/interpolated (-1). ``poly_mapping`` maps each destination
    poly to a source poly: ``n > 0`` is a direct copy of poly ``n - 1``,
    ``n < 0`` is a fragment of poly ``-n - 1`` and ``0`` is a new face.
    ``identity_point_mapping`` declares every destination point to map to the
    source point of the same index and overrides ``point_mapping``.
    """

    gen_point_remapping: bool = True
    gen_poly_remapping: bool = True
    gen_vertex_remapping: bool = True
    first_point: int = 0
    first_poly: int = 0
    point_mapping: Optional[Sequence[int]] = None
    poly_mapping: Optional[Sequence[int]] = None
    identity_point_mapping: bool = False


@dataclass
class MeshRemapResult:
    """Remapping data produced by :func:`remap_mesh`.

    ``point_mapping``, ``poly_mapping`` and ``vertex_mapping`` map destination
    to source indices directly. ``point_imapping`` maps a destination point to
    ``[(src_point, weight), ...]``. ``vertex_imapping`` maps a destination poly
    to ``(src_poly, [[(src_local_vertex, weight), ...] per dest vertex])``.
    """

    point_mapping: Dict[int, int] = field(default_factory=dict)
    poly_mapping: Dict[int, int] = field(default_factory=dict)
    vertex_mapping: Dict[int, int] = field(default_factory=dict)
    point_imapping: Dict[int, List[Contrib]] = field(default_factory=dict)
    vertex_imapping: Dict[int, Tuple[int, List[List[Contrib]]]] = field(default_factory=dict)


def remap_mesh(
    mesh_src: SimpleMesh,
    mesh_dest: SimpleMesh,
    settings: MeshRemapSettings,
    barycentric: Barycentric,
    result: Optional[MeshRemapResult] = None,
) -> MeshRemapResult:
    """Compute data for carrying attributes from ``mesh_src`` onto ``mesh_dest``.

    ``mesh_dest`` must consist of pieces of ``mesh_src``. ``barycentric`` is
    called with the positions of a source polygon and a point, and returns one
    weight per polygon vertex. Mappings are added to ``result`` when given.
    """
    if result is None:
        result = MeshRemapResult()
    s = settings

    if not (s.gen_point_remapping or s.gen_poly_remapping or s.gen_vertex_remapping):
        return result

    point_mapping: Optional[Sequence[int]] = s.point_mapping
    if s.identity_point_mapping:
        point_mapping = list(range(mesh_dest.num_points()))

    if s.gen_point_remapping and point_mapping is not None:
        for i, ptnum in enumerate(point_mapping):
            if ptnum >= 0:
                result.point_mapping.setdefault(s.first_point + i, ptnum)

    if not (s.gen_poly_remapping or s.gen_vertex_remapping):
        return result

    if s.poly_mapping is None or len(s.poly_mapping) != mesh_dest.num_polys():
        raise DgalError("Missing/partial poly mapping not yet supported")

    for i, (polynum, dest_poly) in enumerate(zip(s.poly_mapping, mesh_dest.polys)):
        dest_index = s.first_poly + i
        if polynum > 0:
            if s.gen_poly_remapping:
                result.poly_mapping.setdefault(dest_index, polynum - 1)
            if s.gen_vertex_remapping:
                result.vertex_mapping.setdefault(dest_index, polynum - 1)
            continue
        if polynum == 0:
            continue

        src_polynum = -1 - polynum
        if s.gen_poly_remapping:
            result.poly_mapping.setdefault(dest_index, src_polynum)

        src_poly = mesh_src.polys[src_polynum]
        src_positions = [mesh_src.points[p] for p in src_poly]

        vertex_contribs: List[List[Contrib]] = []
        pt_vert_lookup: Dict[int, int] = {}
        if s.gen_vertex_remapping:
            for j, ptnum in enumerate(src_poly):
                pt_vert_lookup.setdefault(ptnum, j)

        for dest_ptnum in dest_poly:
            coeffs: Sequence[float] = ()
            dest_pos = mesh_dest.points[dest_ptnum]
            if point_mapping is not None and dest_ptnum < len(point_mapping):
                src_ptnum = point_mapping[dest_ptnum]
            else:
                src_ptnum = -1

            if s.gen_vertex_remapping:
                if src_ptnum >= 0 and src_ptnum in pt_vert_lookup:
                    contribs = [(pt_vert_lookup[src_ptnum], 1.0)]
                else:
                    coeffs = list(barycentric(src_positions, dest_pos))
                    contribs = list(enumerate(coeffs))
                vertex_contribs.append(contribs)

            out_ptnum = dest_ptnum + s.first_point
            if (
                s.gen_point_remapping
                and src_ptnum < 0
                and out_ptnum not in result.point_imapping
            ):
                if not coeffs:
                    coeffs = list(barycentric(src_positions, dest_pos))
                result.point_imapping[out_ptnum] = list(zip(src_poly, coeffs))

        if s.gen_vertex_remapping:
            result.vertex_imapping[dest_index] = (src_polynum, vertex_contribs)

    return result


def combine_poly_remapping(mapping1: Sequence[int], mapping2: Sequence[int]) -> List[int]:
    """Compose two poly remappings: ``mapping2`` applied on top of ``mapping1``.

    Entries follow the convention of :class:`MeshRemapSettings.poly_mapping`;
    a fragment of anything stays a fragment, and references past the end of
    ``mapping1`` become new faces (0).
    """
    n1 = len(mapping1)
    combined: List[int] = []
    for ind in mapping2:
        if ind == 0:
            combined.append(0)
        elif ind > 0:
            src = ind - 1
            combined.append(mapping1[src] if src < n1 else 0)
        else:
            src = -1 - ind
            combined.append(-abs(mapping1[src]) if src < n1 else 0)
    return combined