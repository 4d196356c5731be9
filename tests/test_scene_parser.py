import math

import pytest

from raytracer.scene_parser import SceneParseError, parse_scene, parse_scene_file
from raytracer.surfaces.sphere import Sphere
from raytracer.typings.color import Color
from raytracer.utils.matrix import Matrix
from raytracer.utils.tuples import point

SCENE = """
# a scene
set 50 6.0 8.0
cam 0 0 -6
lgt -10 10 -10 1 0.9 0.8

sph 1 0.2 1 0.1 0.9 0.9 200
xfm scale 1 0.5 1
xfm rotate_z 90
xfm translate 1 0 0

sph 0.5 0.5 0.5 0.2 0.7 0.3 10
"""


def test_parses_settings_camera_and_light():
    scene = parse_scene(SCENE.splitlines())
    assert (scene.settings.canvas_pixels, scene.settings.wall_size, scene.settings.wall_z) == (50, 6.0, 8.0)
    assert scene.camera_origin == point(0, 0, -6)
    assert scene.light.position == point(-10, 10, -10)
    assert scene.light.intensity == Color(1, 0.9, 0.8)


def test_parses_spheres_with_materials():
    scene = parse_scene(SCENE.splitlines())
    assert len(scene.shapes) == 2
    first, second = scene.shapes
    assert isinstance(first, Sphere)
    assert first.material.color == Color(1, 0.2, 1)
    assert second.material.shininess == 10.0
    assert second.transform == Matrix.identity(4)


def test_transform_lines_compose_in_written_order():
    first = parse_scene(SCENE.splitlines()).shapes[0]
    expected = Matrix.transformation().scale(1, 0.5, 1).rotate_z(math.pi / 2).translate(1, 0, 0)
    assert first.transform == expected
    assert first.inverse_transform == expected.inverse()
    assert first.transform * point(0, 2, 0) == point(0, 0, 0)


def test_defaults_when_lines_are_missing():
    scene = parse_scene(["sph 1 1 1 0.1 0.9 0.9 200"])
    assert scene.settings.canvas_pixels == 100
    assert scene.camera_origin == point(0, 0, -5)
    assert scene.light.position == point(-10, 10, -10)


@pytest.mark.parametrize(
    "text, message",
    [
        ("box 1 2 3", "unknown object type"),
        ("xfm scale 1 1 1", "must follow a shape"),
        ("sph 1 1 1 0.1 0.9 0.9 200\nxfm twist 1", "unknown transformation"),
        ("sph 1 1 1 0.1 0.9 0.9 200\nxfm scale 1 1", "expects 3 values"),
        ("sph 1 1 1 0.1 0.9 0.9 200\nxfm scale 0 1 1", "degenerate"),
        ("cam 0 zero 0", "invalid number"),
        ("lgt 0 0 0", "expects 6 values"),
        ("set 0 7 10", "canvas_pixels"),
    ],
)
def test_invalid_lines_raise_with_line_number(text, message):
    with pytest.raises(SceneParseError, match=message) as excinfo:
        parse_scene(text.splitlines())
    assert excinfo.value.line_number == len(text.splitlines())


def test_parse_scene_file(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text(SCENE)
    scene = parse_scene_file(path)
    assert len(scene.shapes) == 2
