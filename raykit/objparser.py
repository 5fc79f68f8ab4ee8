"""Reader for the geometry of Wavefront OBJ files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from raykit.meshdata import Material, Vertex, default_material

MaterialLoader = Callable[[str], Sequence[Material]]

_INT = r"([+-]?\d+)"
_V = re.compile(_INT)
_VT = re.compile(rf"{_INT}/{_INT}")
_VTN = re.compile(rf"{_INT}/{_INT}/{_INT}")
_VN = re.compile(rf"{_INT}//{_INT}")


class VertexCache:
    """Vertex buffer that stores each distinct vertex once.

    Vertices are bucketed by a key (the position index in the OBJ file) and
    compared in full within a bucket.
    """

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self._buckets: dict[int, list[int]] = {}

    def __len__(self) -> int:
        return len(self.vertices)

    def add(self, key: int, vertex: Vertex) -> int:
        """Return the buffer index of ``vertex``, appending it if new."""
        bucket = self._buckets.setdefault(key, [])
        for index in bucket:
            if self.vertices[index] == vertex:
                return index
        index = len(self.vertices)
        self.vertices.append(vertex.copy())
        bucket.append(index)
        return index


@dataclass
class ObjGeometry:
    """Triangulated geometry and materials read from an OBJ file."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    attributes: list[int] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    material_cache: dict[str, int] = field(default_factory=dict)
    position_count: int = 0
    texture_coord_count: int = 0
    normal_count: int = 0

    @property
    def has_positions(self) -> bool:
        return self.position_count > 0

    @property
    def has_normals(self) -> bool:
        return self.normal_count > 0

    @property
    def has_texture_coords(self) -> bool:
        return self.texture_coord_count > 0

    @property
    def triangle_count(self) -> int:
        return len(self.attributes)


def _name_argument(args: Sequence[str]) -> str:
    if len(args) >= 2:
        return args[1]
    return args[0] if args else ""


def _floats(args: Sequence[str], size: int) -> tuple[float, ...]:
    """Parse up to ``size`` leading numbers; missing ones stay zero."""
    values = [0.0] * size
    for axis, token in enumerate(args[:size]):
        try:
            values[axis] = float(token)
        except ValueError:
            break
    return tuple(values)


def _resolve(index: int, count_so_far: int) -> int:
    # Relative indices are resolved against the count read so far, as the
    # reference loader does.
    return index + count_so_far - 1 if index < 0 else index - 1


def _face_pattern(first: str) -> tuple[re.Pattern[str], tuple[str, ...]]:
    if "//" in first:
        return _VN, ("v", "vn")
    if _VTN.match(first):
        return _VTN, ("v", "vt", "vn")
    if _VT.match(first):
        return _VT, ("v", "vt")
    return _V, ("v",)


def _face_corners(args: Sequence[str]) -> list[dict[str, int]]:
    if not args:
        raise ValueError("face with fewer than three vertices")
    pattern, fields = _face_pattern(args[0])
    corners: list[dict[str, int]] = []
    for token in args:
        match = pattern.match(token)
        if match is None:
            break
        corners.append({name: int(value) for name, value in zip(fields, match.groups())})
    if len(corners) < 3:
        raise ValueError(f"face with fewer than three vertices: {' '.join(args)}")
    return corners


def _lookup(table: list[tuple[float, ...]], index: int, what: str) -> tuple[float, ...]:
    if not 0 <= index < len(table):
        raise ValueError(f"face refers to {what} {index + 1}, but only {len(table)} exist")
    return table[index]


def parse_obj(text: str, material_loader: Optional[MaterialLoader] = None) -> ObjGeometry:
    """Parse OBJ text into a triangulated, de-duplicated vertex and index buffer.

    ``material_loader`` is called with the file name from each ``mtllib``
    statement and returns that library's materials; an ``OSError`` from it
    leaves the materials unchanged. Without any loaded material a single
    default material is used. Polygons are fanned into triangles.
    """
    statements = [tokens for tokens in (line.split() for line in text.splitlines()) if tokens]
    geometry = ObjGeometry()

    for tokens in statements:
        keyword = tokens[0]
        if keyword[0] == "m":
            name = _name_argument(tokens[1:])
            if not name or material_loader is None:
                continue
            try:
                loaded = list(material_loader(name))
            except OSError:
                continue
            geometry.materials = loaded
            geometry.material_cache = {m.name: i for i, m in enumerate(loaded)}
        elif keyword == "v":
            geometry.position_count += 1
        elif keyword.startswith("vn"):
            geometry.normal_count += 1
        elif keyword.startswith("vt"):
            geometry.texture_coord_count += 1

    if not geometry.materials:
        material = default_material()
        geometry.materials.append(material)
        geometry.material_cache[material.name] = 0

    positions = [(0.0, 0.0, 0.0)] * geometry.position_count
    normals = [(0.0, 0.0, 0.0)] * geometry.normal_count
    tex_coords = [(0.0, 0.0)] * geometry.texture_coord_count
    read_positions = read_normals = read_tex_coords = 0
    active_material = 0
    cache = VertexCache()

    def corner_vertex(corner: dict[str, int]) -> int:
        v = _resolve(corner["v"], read_positions)
        vertex = Vertex(position=list(_lookup(positions, v, "vertex")))
        if "vt" in corner:
            vt = _resolve(corner["vt"], read_tex_coords)
            vertex.tex_coord = list(_lookup(tex_coords, vt, "texture coordinate"))
        if "vn" in corner:
            vn = _resolve(corner["vn"], read_normals)
            vertex.normal = list(_lookup(normals, vn, "normal"))
        return cache.add(v, vertex)

    for tokens in statements:
        keyword, args = tokens[0], tokens[1:]
        lead = keyword[0]
        if lead == "f":
            corners = _face_corners(args)
            for previous, current in zip(corners[1:], corners[2:]):
                geometry.attributes.append(active_material)
                geometry.indices.extend(
                    corner_vertex(corner) for corner in (corners[0], previous, current)
                )
        elif lead == "u":
            active_material = geometry.material_cache.get(_name_argument(args), 0)
        elif keyword == "v":
            positions[read_positions] = _floats(args, 3)
            read_positions += 1
        elif keyword.startswith("vn"):
            normals[read_normals] = _floats(args, 3)
            read_normals += 1
        elif keyword.startswith("vt"):
            tex_coords[read_tex_coords] = _floats(args, 2)
            read_tex_coords += 1

    geometry.vertices = cache.vertices
    return geometry