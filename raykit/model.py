"""A Wavefront OBJ model: triangulated geometry, materials and meshes."""

from __future__ import annotations

import logging
import os
from typing import Sequence, Union

from raykit import geometry
from raykit.geometry import Bounds
from raykit.meshdata import Material, Mesh, Vertex
from raykit.mtl import load_materials
from raykit.objparser import parse_obj

_log = logging.getLogger(__name__)

_EMPTY_BOUNDS = Bounds((0.0, 0.0, 0.0), 0.0, 0.0, 0.0, 0.0)


def _directory_of(filename: str) -> str:
    """Return the directory part of ``filename`` including its separator."""
    for separator in ("\\", "/"):
        offset = filename.rfind(separator)
        if offset != -1:
            return filename[: offset + 1]
    return ""


class ModelOBJ:
    """A model loaded from a Wavefront OBJ file.

    Faces are grouped into meshes by material, groups and objects are merged
    into one model, and every polygon is triangulated. The MTL library must
    sit in the same directory as the OBJ file; if it cannot be read a default
    material is used.
    """

    def __init__(self) -> None:
        self.destroy()

    def destroy(self) -> None:
        """Discard all loaded data and return to the empty state."""
        self._has_positions = False
        self._has_texture_coords = False
        self._has_normals = False
        self._has_tangents = False
        self._library_size = 0
        self._bounds = _EMPTY_BOUNDS
        self._directory = ""
        self._meshes: list[Mesh] = []
        self._materials: list[Material] = []
        self._vertices: list[Vertex] = []
        self._indices: list[int] = []
        self._attributes: list[int] = []
        self._material_cache: dict[str, int] = {}

    def import_file(
        self, path: Union[str, os.PathLike], rebuild_normals: bool = False
    ) -> None:
        """Load an OBJ file, replacing whatever was loaded before.

        Normals are generated when the file has none, or always when
        ``rebuild_normals`` is true. Tangents are generated when a material
        names a bump map. Raises ``OSError`` if the file cannot be read.
        """
        filename = os.fspath(path)
        if isinstance(filename, bytes):
            filename = os.fsdecode(filename)
        with open(filename, encoding="utf-8", errors="surrogateescape") as handle:
            text = handle.read()

        self.destroy()
        self._directory = _directory_of(filename)

        def load_library(name: str) -> Sequence[Material]:
            library_path = self._directory + name
            _log.debug("importing materials from %s", library_path)
            materials = load_materials(library_path)
            self._library_size = len(materials)
            return materials

        parsed = parse_obj(text, load_library)

        self._vertices = parsed.vertices
        self._indices = parsed.indices
        self._attributes = parsed.attributes
        self._materials = parsed.materials
        self._material_cache = parsed.material_cache
        self._has_positions = parsed.has_positions
        self._has_normals = parsed.has_normals
        self._has_texture_coords = parsed.has_texture_coords

        self._meshes = geometry.build_meshes(self._attributes, self._materials)
        self._bounds = geometry.compute_bounds(self._vertices)

        if rebuild_normals or not self._has_normals:
            geometry.generate_normals(self._vertices, self._indices)
            self._has_normals = True

        if any(m.bump_map_filename for m in self._materials[: self._library_size]):
            geometry.generate_tangents(self._vertices, self._indices)
            self._has_tangents = True

    def normalize(self, scale_to: float = 1.0, center: bool = True) -> None:
        """Scale the model so its radius becomes ``scale_to``.

        With ``center`` the model is first moved so its bounds are centred on
        the origin. Raises ``ValueError`` if the model has no extent.
        """
        bounds = geometry.compute_bounds(self._vertices)
        if bounds.radius == 0.0:
            raise ValueError("cannot normalize a model with zero extent")
        factor = scale_to / bounds.radius
        offset = tuple(-c for c in bounds.center) if center else (0.0, 0.0, 0.0)
        geometry.scale_vertices(self._vertices, factor, offset)
        self._bounds = geometry.compute_bounds(self._vertices)

    def reverse_winding(self) -> None:
        """Flip the winding of every triangle and invert normals and tangents."""
        geometry.reverse_winding(self._vertices, self._indices)

    @property
    def center(self) -> tuple[float, float, float]:
        return self._bounds.center

    @property
    def width(self) -> float:
        return self._bounds.width

    @property
    def height(self) -> float:
        return self._bounds.height

    @property
    def length(self) -> float:
        return self._bounds.length

    @property
    def radius(self) -> float:
        return self._bounds.radius

    @property
    def path(self) -> str:
        """Directory of the loaded file, with its trailing separator."""
        return self._directory

    @property
    def vertices(self) -> list[Vertex]:
        return self._vertices

    @property
    def indices(self) -> list[int]:
        return self._indices

    @property
    def meshes(self) -> list[Mesh]:
        return self._meshes

    @property
    def materials(self) -> list[Material]:
        return self._materials

    @property
    def number_of_vertices(self) -> int:
        return len(self._vertices)

    @property
    def number_of_triangles(self) -> int:
        return len(self._attributes)

    @property
    def number_of_indices(self) -> int:
        return len(self._attributes) * 3

    @property
    def number_of_meshes(self) -> int:
        return len(self._meshes)

    @property
    def number_of_materials(self) -> int:
        """Materials read from the MTL library; zero when the default is used."""
        return self._library_size

    @property
    def has_positions(self) -> bool:
        return self._has_positions

    @property
    def has_normals(self) -> bool:
        return self._has_normals

    @property
    def has_texture_coords(self) -> bool:
        return self._has_texture_coords

    @property
    def has_tangents(self) -> bool:
        return self._has_tangents