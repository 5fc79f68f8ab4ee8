"""Plain data records for a loaded Wavefront OBJ model."""

from __future__ import annotations

from dataclasses import dataclass, field


def _rgba(red: float, green: float, blue: float) -> list[float]:
    return [red, green, blue, 1.0]


@dataclass
class Material:
    """Surface properties of a group of faces.

    ``shininess`` runs from 0 (dull) to 1 (most shiny) and ``alpha`` from
    0 (fully transparent) to 1 (fully opaque).
    """

    ambient: list[float] = field(default_factory=lambda: _rgba(0.2, 0.2, 0.2))
    diffuse: list[float] = field(default_factory=lambda: _rgba(0.8, 0.8, 0.8))
    specular: list[float] = field(default_factory=lambda: _rgba(0.0, 0.0, 0.0))
    shininess: float = 0.0
    alpha: float = 1.0
    name: str = ""
    color_map_filename: str = ""
    bump_map_filename: str = ""


@dataclass
class Vertex:
    """One vertex of the model's vertex buffer.

    ``tangent`` holds four components; the fourth is the handedness of the
    tangent space (+1 or -1).
    """

    position: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    tex_coord: list[float] = field(default_factory=lambda: [0.0, 0.0])
    normal: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    tangent: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])
    bitangent: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])

    def copy(self) -> Vertex:
        """Return a vertex with the same values and no shared lists."""
        return Vertex(
            list(self.position),
            list(self.tex_coord),
            list(self.normal),
            list(self.tangent),
            list(self.bitangent),
        )


@dataclass
class Mesh:
    """A run of consecutive triangles sharing one material."""

    start_index: int = 0
    triangle_count: int = 0
    material: Material | None = None


def default_material() -> Material:
    """Return the material used when an OBJ file names no material library."""
    return Material(name="default")