import math

import pytest

from minirt.parser import (
    SceneError,
    check_file,
    load_scene,
    parse_color,
    parse_line,
    parse_scene,
    parse_vector,
)
from minirt.scene import ObjectType, Scene
from minirt.vector import Vec


def test_parse_color_valid():
    assert parse_color("255,0,128") == Vec(255, 0, 128)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "", None])
def test_parse_color_bad_format(text):
    with pytest.raises(SceneError):
        parse_color(text)


@pytest.mark.parametrize("text", ["256,0,0", "0,-1,0", "0,0,300"])
def test_parse_color_out_of_range(text):
    with pytest.raises(SceneError):
        parse_color(text)


def test_parse_vector_valid():
    assert parse_vector("-1.5,0,2") == Vec(-1.5, 0, 2)


def test_parse_vector_bad_format():
    with pytest.raises(SceneError):
        parse_vector("1,2,3,4")


def test_ambient_line():
    scene = Scene()
    parse_line(["A", "0.2", "255,255,255"], scene)
    assert scene.ambient.count == 1
    assert scene.ambient.ratio == pytest.approx(0.2)
    assert scene.ambient.color == Vec(255, 255, 255)


def test_second_ambient_rejected():
    scene = Scene()
    parse_line(["A", "0.2", "255,255,255"], scene)
    with pytest.raises(SceneError):
        parse_line(["A", "0.3", "255,255,255"], scene)


def test_ambient_ratio_out_of_range():
    with pytest.raises(SceneError):
        parse_line(["A", "1.5", "255,255,255"], Scene())


def test_camera_line_normalizes_direction():
    scene = Scene()
    parse_line(["C", "-50,0,20", "0,0,2", "70"], scene)
    assert scene.camera.center == Vec(-50, 0, 20)
    assert math.isclose(scene.camera.direction.magnitude(), 1.0, rel_tol=1e-9)
    assert scene.camera.fov == 70
    assert scene.camera.count == 1


def test_camera_fov_out_of_range():
    with pytest.raises(SceneError):
        parse_line(["C", "0,0,0", "0,0,1", "190"], Scene())


def test_camera_missing_params():
    with pytest.raises(SceneError):
        parse_line(["C", "0,0,0", "0,0,1"], Scene())


def test_light_line():
    scene = Scene()
    parse_line(["L", "-40,0,30", "0.7", "255,255,255"], scene)
    assert len(scene.lights) == 1
    assert scene.lights[0].source == Vec(-40, 0, 30)
    assert scene.lights[0].ratio == pytest.approx(0.7)


def test_sphere_line_and_prefix_identifier():
    scene = Scene()
    parse_line(["sphere", "0,0,20", "20", "255,0,0"], scene)
    obj = scene.objects[0]
    assert obj.kind is ObjectType.SPHERE
    assert obj.diameter == 20
    assert obj.color == Vec(255, 0, 0)


def test_sphere_non_positive_diameter():
    with pytest.raises(SceneError):
        parse_line(["sp", "0,0,20", "0", "255,0,0"], Scene())


def test_plane_line():
    scene = Scene()
    parse_line(["pl", "0,0,-10", "0,3,0", "0,0,225"], scene)
    obj = scene.objects[0]
    assert obj.kind is ObjectType.PLANE
    assert math.isclose(obj.direction.magnitude(), 1.0, rel_tol=1e-9)
    assert obj.center == Vec(0, 0, -10)


def test_cylinder_line():
    scene = Scene()
    parse_line(["cy", "50,0,20.6", "0,0,1", "14.2", "21.42", "10,0,255"], scene)
    obj = scene.objects[0]
    assert obj.kind is ObjectType.CYLINDER
    assert obj.diameter == pytest.approx(14.2)
    assert obj.height == pytest.approx(21.42)


def test_cylinder_missing_params():
    with pytest.raises(SceneError):
        parse_line(["cy", "50,0,20.6", "0,0,1", "14.2", "21.42"], Scene())


@pytest.mark.parametrize("ident", ["X", "s", "AA", "c"])
def test_invalid_identifier(ident):
    with pytest.raises(SceneError):
        parse_line([ident, "1", "2", "3"], Scene())


def test_parse_scene_orders_objects_newest_first():
    scene = parse_scene(
        [
            "A 0.2 255,255,255",
            "",
            "sp 0,0,20 20 255,0,0",
            "pl   0,0,-10 0,1,0 0,0,225",
        ]
    )
    assert [o.kind for o in scene.objects] == [ObjectType.PLANE, ObjectType.SPHERE]
    assert scene.ambient.count == 1


def test_load_scene(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text("C 0,0,0 0,0,1 90\nL 0,10,0 0.5 255,255,255\n")
    scene = load_scene(path)
    assert scene.camera.fov == 90
    assert len(scene.lights) == 1


def test_load_scene_missing(tmp_path):
    with pytest.raises(SceneError):
        load_scene(tmp_path / "absent.rt")


def test_check_file_valid(tmp_path):
    path = tmp_path / "a.rt"
    path.write_text("")
    assert check_file(["prog", str(path)]) == str(path)


def test_check_file_wrong_count():
    with pytest.raises(SceneError):
        check_file(["prog"])


def test_check_file_wrong_suffix(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("")
    with pytest.raises(SceneError):
        check_file(["prog", str(path)])


def test_check_file_too_short():
    with pytest.raises(SceneError):
        check_file(["prog", ".rt"])


def test_check_file_missing(tmp_path):
    with pytest.raises(SceneError):
        check_file(["prog", str(tmp_path / "missing.rt")])