import math

import pytest

from raykit.model import ModelOBJ

QUAD = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n"


def _write(tmp_path, name, text):
    target = tmp_path / name
    target.write_text(text)
    return target


@pytest.fixture
def quad(tmp_path):
    model = ModelOBJ()
    model.import_file(_write(tmp_path, "quad.obj", QUAD))
    return model


def test_quad_is_triangulated(quad):
    assert quad.number_of_triangles == 2
    assert quad.number_of_indices == 6
    assert quad.number_of_vertices == 4
    assert quad.indices == [0, 1, 2, 0, 2, 3]


def test_default_material_is_not_counted(quad):
    assert quad.number_of_materials == 0
    assert [m.name for m in quad.materials] == ["default"]
    assert quad.number_of_meshes == 1
    assert quad.meshes[0].triangle_count == 2


def test_path_keeps_trailing_separator(tmp_path):
    target = _write(tmp_path, "quad.obj", QUAD)
    model = ModelOBJ()
    model.import_file(str(target))
    assert model.path == str(target)[: -len("quad.obj")]


def test_normals_generated_when_missing(quad):
    assert quad.has_normals
    assert quad.has_positions
    assert not quad.has_texture_coords
    for vertex in quad.vertices:
        assert vertex.normal == pytest.approx([0.0, 0.0, 1.0])


def test_bounds_of_quad(quad):
    assert quad.width == pytest.approx(1.0)
    assert quad.height == pytest.approx(1.0)
    assert quad.length == pytest.approx(0.0)
    assert quad.radius == pytest.approx(1.0)
    assert quad.center == pytest.approx((0.5, 0.5, 0.0))


def test_given_normals_kept_unless_rebuilt(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 1 0\nf 1//1 2//1 3//1\n"
    target = _write(tmp_path, "tri.obj", text)
    kept = ModelOBJ()
    kept.import_file(target)
    assert all(v.normal == pytest.approx([0.0, 1.0, 0.0]) for v in kept.vertices)
    rebuilt = ModelOBJ()
    rebuilt.import_file(target, rebuild_normals=True)
    assert all(v.normal == pytest.approx([0.0, 0.0, 1.0]) for v in rebuilt.vertices)


def test_materials_and_mesh_order(tmp_path):
    _write(
        tmp_path,
        "scene.mtl",
        "newmtl red\nKd 1 0 0\nd 0.5\nnewmtl blue\nKd 0 0 1\n",
    )
    obj = (
        "mtllib scene.mtl\n" + QUAD.replace("f 1 2 3 4\n", "")
        + "usemtl red\nf 1 2 3\nusemtl blue\nf 1 3 4\n"
    )
    model = ModelOBJ()
    model.import_file(_write(tmp_path, "scene.obj", obj))
    assert model.number_of_materials == 2
    assert [mesh.material.name for mesh in model.meshes] == ["blue", "red"]
    assert model.meshes[0].start_index == 3
    assert model.meshes[1].start_index == 0
    assert not model.has_tangents


def test_bump_map_generates_tangents(tmp_path):
    _write(tmp_path, "bump.mtl", "newmtl rough\nmap_bump bump.png\n")
    obj = (
        "mtllib bump.mtl\nv 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "vt 0 0\nvt 1 0\nvt 0 1\nusemtl rough\nf 1/1 2/2 3/3\n"
    )
    model = ModelOBJ()
    model.import_file(_write(tmp_path, "bump.obj", obj))
    assert model.has_tangents
    assert model.has_texture_coords
    for vertex in model.vertices:
        assert vertex.tangent[3] in (1.0, -1.0)
        assert math.sqrt(sum(t * t for t in vertex.tangent[:3])) == pytest.approx(1.0)


def test_missing_material_library_falls_back(tmp_path):
    model = ModelOBJ()
    model.import_file(_write(tmp_path, "lost.obj", "mtllib absent.mtl\n" + QUAD))
    assert [m.name for m in model.materials] == ["default"]
    assert model.number_of_triangles == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        ModelOBJ().import_file(tmp_path / "nothing.obj")


def test_normalize_centers_and_scales(quad):
    quad.normalize(4.0)
    assert quad.radius == pytest.approx(4.0)
    assert quad.center == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_normalize_without_centering_keeps_origin(quad):
    quad.normalize(2.0, center=False)
    assert quad.radius == pytest.approx(2.0)
    assert quad.vertices[0].position == pytest.approx([0.0, 0.0, 0.0])


def test_reverse_winding_twice_restores(quad):
    original_indices = list(quad.indices)
    original_normals = [list(v.normal) for v in quad.vertices]
    quad.reverse_winding()
    assert quad.indices == [0, 2, 1, 0, 3, 2]
    assert [v.normal for v in quad.vertices] == [[-n for n in ns] for ns in original_normals]
    quad.reverse_winding()
    assert quad.indices == original_indices
    assert [v.normal for v in quad.vertices] == original_normals


def test_destroy_resets_everything(quad):
    quad.destroy()
    assert quad.number_of_vertices == 0
    assert quad.number_of_triangles == 0
    assert quad.meshes == []
    assert quad.path == ""
    assert not quad.has_normals
    assert quad.radius == 0.0


def test_reimport_replaces_previous_model(tmp_path, quad):
    quad.import_file(_write(tmp_path, "tri.obj", "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"))
    assert quad.number_of_triangles == 1
    assert quad.number_of_vertices == 3