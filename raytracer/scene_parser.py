from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from raytracer.scene_settings import RenderSettings
from raytracer.surfaces.shape import Shape
from raytracer.surfaces.sphere import Sphere
from raytracer.typings.color import Color
from raytracer.typings.light import PointLight
from raytracer.typings.material import Material
from raytracer.utils.tuples import Point

DEFAULT_CAMERA_ORIGIN = (0.0, 0.0, -5.0)
DEFAULT_LIGHT_POSITION = (-10.0, 10.0, -10.0)

# keyword -> number of numeric arguments
TRANSFORM_ARGUMENTS: Dict[str, int] = {
    "translate": 3,
    "scale": 3,
    "rotate_x": 1,
    "rotate_y": 1,
    "rotate_z": 1,
    "shear": 6,
}
ROTATIONS = ("rotate_x", "rotate_y", "rotate_z")


class SceneParseError(ValueError):
    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


@dataclass(slots=True)
class Scene:
    settings: RenderSettings = field(default_factory=RenderSettings)
    camera_origin: Point = field(default_factory=lambda: Point(*DEFAULT_CAMERA_ORIGIN))
    light: PointLight = field(default_factory=lambda: PointLight(Point(*DEFAULT_LIGHT_POSITION)))
    shapes: List[Shape] = field(default_factory=list)


def _expect(line_number: int, obj_type: str, params: List[float], count: int) -> None:
    if len(params) != count:
        raise SceneParseError(line_number, f"'{obj_type}' expects {count} values, got {len(params)}")


def _apply_transform(line_number: int, shape: Shape, args: List[str]) -> None:
    if not args:
        raise SceneParseError(line_number, "'xfm' needs a transformation name")
    operation, values = args[0], args[1:]
    if operation not in TRANSFORM_ARGUMENTS:
        raise SceneParseError(line_number, f"unknown transformation: {operation}")
    params = _parse_floats(line_number, values)
    _expect(line_number, operation, params, TRANSFORM_ARGUMENTS[operation])
    if operation in ROTATIONS:
        params = [math.radians(params[0])]

    # fluent composition: the new step applies after everything already on the shape
    composed = getattr(shape.transform, operation)(*params)
    try:
        shape.set_transform(composed)
    except ValueError as exc:
        raise SceneParseError(line_number, f"transformation makes the shape degenerate: {exc}") from exc


def _parse_floats(line_number: int, values: List[str]) -> List[float]:
    try:
        return [float(p) for p in values]
    except ValueError as exc:
        raise SceneParseError(line_number, f"invalid number in {' '.join(values)!r}") from exc


def parse_scene(lines: Iterable[str]) -> Scene:
    """Builds a Scene from the line-oriented scene format.

    set <canvas_pixels> <wall_size> <wall_z>
    cam <x> <y> <z>
    lgt <x> <y> <z> <r> <g> <b>
    sph <r> <g> <b> <ambient> <diffuse> <specular> <shininess>
    xfm <translate|scale|rotate_x|rotate_y|rotate_z|shear> <values...>

    Rotation angles are in degrees. xfm lines apply to the most recent shape, in
    the order written.
    """
    scene = Scene()
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        obj_type = parts[0]
        if obj_type == "xfm":
            if not scene.shapes:
                raise SceneParseError(line_number, "'xfm' must follow a shape")
            _apply_transform(line_number, scene.shapes[-1], parts[1:])
            continue

        params = _parse_floats(line_number, parts[1:])
        if obj_type == "set":
            _expect(line_number, obj_type, params, 3)
            try:
                scene.settings = RenderSettings(params[0], params[1], params[2])
            except ValueError as exc:
                raise SceneParseError(line_number, str(exc)) from exc
        elif obj_type == "cam":
            _expect(line_number, obj_type, params, 3)
            scene.camera_origin = Point(*params)
        elif obj_type == "lgt":
            _expect(line_number, obj_type, params, 6)
            scene.light = PointLight(Point(*params[:3]), Color(*params[3:6]))
        elif obj_type == "sph":
            _expect(line_number, obj_type, params, 7)
            material = Material(
                Color(*params[:3]),
                params[3],
                params[4],
                params[5],
                params[6],
            )
            scene.shapes.append(Sphere(material=material))
        else:
            raise SceneParseError(line_number, "unknown object type: {}".format(obj_type))
    return scene


def parse_scene_file(file_path: str | os.PathLike) -> Scene:
    with open(file_path, 'r') as f:
        return parse_scene(f)
