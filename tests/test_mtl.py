import pytest

from raykit.mtl import load_materials, parse_materials

SAMPLE = """\
# two materials
newmtl red
Ka 0.1 0.2 0.3
Kd 0.9 0.0 0.0
Ks 0.4 0.5 0.6
Ns 500
d 0.5
map_Kd red.png
map_bump red_bump.png

newmtl glass
Tr 0.25
illum 1
"""


def test_materials_come_back_in_file_order():
    materials = parse_materials(SAMPLE)
    assert [m.name for m in materials] == ["red", "glass"]


def test_colour_statements_fill_rgb_and_set_alpha_channel():
    red = parse_materials(SAMPLE)[0]
    assert red.ambient == pytest.approx([0.1, 0.2, 0.3, 1.0])
    assert red.diffuse == pytest.approx([0.9, 0.0, 0.0, 1.0])
    assert red.specular == pytest.approx([0.4, 0.5, 0.6, 1.0])


def test_shininess_is_scaled_to_unit_range():
    red = parse_materials(SAMPLE)[0]
    assert red.shininess == pytest.approx(0.5)


def test_dissolve_sets_alpha_directly():
    red = parse_materials(SAMPLE)[0]
    assert red.alpha == pytest.approx(0.5)


def test_transparency_is_inverted_to_opacity():
    glass = parse_materials(SAMPLE)[1]
    assert glass.alpha == pytest.approx(0.75)


def test_texture_map_names():
    red = parse_materials(SAMPLE)[0]
    assert red.color_map_filename == "red.png"
    assert red.bump_map_filename == "red_bump.png"


def test_new_material_takes_defaults():
    glass = parse_materials(SAMPLE)[1]
    assert glass.ambient == pytest.approx([0.2, 0.2, 0.2, 1.0])
    assert glass.diffuse == pytest.approx([0.8, 0.8, 0.8, 1.0])
    assert glass.shininess == 0.0
    assert glass.color_map_filename == ""
    assert glass.bump_map_filename == ""


def test_illum_one_clears_specular():
    text = "newmtl m\nKs 0.3 0.3 0.3\nillum 1\n"
    material = parse_materials(text)[0]
    assert material.specular == [0.0, 0.0, 0.0, 1.0]


def test_illum_two_keeps_specular():
    text = "newmtl m\nKs 0.3 0.3 0.3\nillum 2\n"
    material = parse_materials(text)[0]
    assert material.specular == pytest.approx([0.3, 0.3, 0.3, 1.0])


def test_empty_text_gives_no_materials():
    assert parse_materials("# nothing here\n\n") == []


def test_property_before_newmtl_raises():
    with pytest.raises(ValueError):
        parse_materials("Kd 1 1 1\nnewmtl late\n")


def test_load_materials_reads_file(tmp_path):
    path = tmp_path / "scene.mtl"
    path.write_text(SAMPLE)
    assert [m.name for m in load_materials(path)] == ["red", "glass"]


def test_load_materials_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_materials(tmp_path / "absent.mtl")