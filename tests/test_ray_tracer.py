from pathlib import Path

from raytracer.ray_tracer import main

SCENE = """
set 12 7.0 10.0
cam 0 0 -5
lgt -10 10 -10 1 1 1
sph 1 0.2 1 0.1 0.9 0.9 200
"""


def _write_scene(tmp_path: Path) -> Path:
    scene_path = tmp_path / "scene.txt"
    scene_path.write_text(SCENE)
    return scene_path


def test_renders_scene_to_ppm(tmp_path, capsys):
    output = tmp_path / "render.ppm"
    assert main([str(_write_scene(tmp_path)), str(output)]) == 0
    text = output.read_text()
    assert text.startswith("P3\n12 12\n255\n")
    assert text.endswith("\n")
    assert "[phase] render" in capsys.readouterr().out


def test_silhouette_mode_and_size_override(tmp_path):
    output = tmp_path / "silhouette.ppm"
    assert main([str(_write_scene(tmp_path)), str(output), "--mode", "silhouette", "--size", "6"]) == 0
    assert output.read_text().splitlines()[1] == "6 6"


def test_bad_scene_exits_with_error(tmp_path):
    scene_path = tmp_path / "broken.txt"
    scene_path.write_text("box 1 2 3\n")
    assert main([str(scene_path), str(tmp_path / "out.ppm")]) == 1
    assert not (tmp_path / "out.ppm").exists()


def test_unwritable_output_exits_with_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    assert main([str(_write_scene(tmp_path)), str(blocker / "out.ppm")]) == 1
