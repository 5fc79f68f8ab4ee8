"""Geometry operations on vertex and index buffers of a triangle model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, MutableSequence, Sequence

from raykit.meshdata import Material, Mesh, Vertex

# Limits of a single-precision float. The initial maximum is the smallest
# positive normal float, so bounds of entirely negative models stay anchored
# just above zero on the maximum side.
_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38

_DEGENERATE_DET = 1e-6


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extent of a model."""

    center: tuple[float, float, float]
    width: float
    height: float
    length: float
    radius: float


def _sub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    return [a[0] - b[0], a[1] - b[1], a[2] - b[2]]


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> list[float]:
    return [
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ]


def _normalize3(v: MutableSequence[float]) -> None:
    squared = _dot(v, v)
    # A zero vector yields NaN components, as a reciprocal square root would.
    scale = 1.0 / math.sqrt(squared) if squared > 0.0 else math.inf
    for axis in range(3):
        v[axis] *= scale


def _triangles(
    vertices: Sequence[Vertex], indices: Sequence[int]
) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
    if len(indices) % 3:
        raise ValueError(f"index count {len(indices)} is not a multiple of 3")
    it = iter(indices)
    for i0, i1, i2 in zip(it, it, it):
        yield vertices[i0], vertices[i1], vertices[i2]


def compute_bounds(vertices: Sequence[Vertex]) -> Bounds:
    """Return the centre, extents and radius of the vertex positions.

    The radius is the largest of the three extents.
    """
    lows = [_FLT_MAX] * 3
    highs = [_FLT_MIN] * 3
    for vertex in vertices:
        for axis, value in enumerate(vertex.position):
            if value < lows[axis]:
                lows[axis] = value
            if value > highs[axis]:
                highs[axis] = value
    center = tuple((lo + hi) / 2.0 for lo, hi in zip(lows, highs))
    width, height, length = (hi - lo for lo, hi in zip(lows, highs))
    return Bounds(center, width, height, length, max(width, height, length))  # type: ignore[arg-type]


def scale_vertices(
    vertices: Sequence[Vertex], factor: float, offset: Sequence[float]
) -> None:
    """Translate every position by ``offset`` and then scale it by ``factor``."""
    for vertex in vertices:
        vertex.position[:] = [
            (p + o) * factor for p, o in zip(vertex.position, offset)
        ]


def reverse_winding(vertices: Sequence[Vertex], indices: MutableSequence[int]) -> None:
    """Flip the winding of every triangle and invert normals and tangents."""
    if len(indices) % 3:
        raise ValueError(f"index count {len(indices)} is not a multiple of 3")
    indices[1::3], indices[2::3] = indices[2::3], indices[1::3]
    for vertex in vertices:
        vertex.normal[:] = [-n for n in vertex.normal]
        vertex.tangent[:3] = [-t for t in vertex.tangent[:3]]


def generate_normals(vertices: Sequence[Vertex], indices: Sequence[int]) -> None:
    """Set each vertex normal to the normalized sum of adjacent face normals."""
    for vertex in vertices:
        vertex.normal[:] = [0.0, 0.0, 0.0]

    for v0, v1, v2 in _triangles(vertices, indices):
        face = _cross(_sub(v1.position, v0.position), _sub(v2.position, v0.position))
        for vertex in (v0, v1, v2):
            for axis in range(3):
                vertex.normal[axis] += face[axis]

    for vertex in vertices:
        _normalize3(vertex.normal)


def generate_tangents(vertices: Sequence[Vertex], indices: Sequence[int]) -> None:
    """Compute per-vertex tangent frames from positions and texture coordinates.

    Each tangent is orthogonalized against the vertex normal and normalized;
    its fourth component records the handedness, and the bitangent is set to
    the cross product of normal and tangent.
    """
    for vertex in vertices:
        vertex.tangent[:] = [0.0, 0.0, 0.0, 0.0]
        vertex.bitangent[:] = [0.0, 0.0, 0.0]

    for v0, v1, v2 in _triangles(vertices, indices):
        edge1 = _sub(v1.position, v0.position)
        edge2 = _sub(v2.position, v0.position)
        tex1 = (v1.tex_coord[0] - v0.tex_coord[0], v1.tex_coord[1] - v0.tex_coord[1])
        tex2 = (v2.tex_coord[0] - v0.tex_coord[0], v2.tex_coord[1] - v0.tex_coord[1])

        det = tex1[0] * tex2[1] - tex2[0] * tex1[1]
        if abs(det) < _DEGENERATE_DET:
            tangent = [1.0, 0.0, 0.0]
            bitangent = [0.0, 1.0, 0.0]
        else:
            inv = 1.0 / det
            tangent = [(tex2[1] * e1 - tex1[1] * e2) * inv for e1, e2 in zip(edge1, edge2)]
            bitangent = [(-tex2[0] * e1 + tex1[0] * e2) * inv for e1, e2 in zip(edge1, edge2)]

        for vertex in (v0, v1, v2):
            for axis in range(3):
                vertex.tangent[axis] += tangent[axis]
                vertex.bitangent[axis] += bitangent[axis]

    for vertex in vertices:
        n_dot_t = _dot(vertex.normal, vertex.tangent)
        for axis in range(3):
            vertex.tangent[axis] -= vertex.normal[axis] * n_dot_t
        _normalize3(vertex.tangent)

        bitangent = _cross(vertex.normal, vertex.tangent)
        b_dot_b = _dot(bitangent, vertex.bitangent)
        vertex.tangent[3] = 1.0 if b_dot_b < 0.0 else -1.0
        vertex.bitangent[:] = bitangent


def build_meshes(attributes: Sequence[int], materials: Sequence[Material]) -> list[Mesh]:
    """Group consecutive triangles with the same material into meshes.

    ``attributes`` gives the material index of each triangle. The meshes come
    back ordered by material alpha, most opaque first.
    """
    meshes: list[Mesh] = []
    current_id = -1
    for triangle, material_id in enumerate(attributes):
        if material_id != current_id:
            current_id = material_id
            meshes.append(Mesh(triangle * 3, 0, materials[material_id]))
        meshes[-1].triangle_count += 1
    meshes.sort(key=lambda mesh: mesh.material.alpha, reverse=True)  # type: ignore[union-attr]
    return meshes