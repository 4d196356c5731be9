"""Incremental CPU ray tracer: tuple and matrix algebra, sphere intersection, Phong shading and PPM output."""

from raytracer.canvas import Canvas, CanvasWriteError
from raytracer.hit import Intersection, hit, intersections
from raytracer.lighting import lighting
from raytracer.ray import Ray
from raytracer.surfaces.shape import Shape
from raytracer.surfaces.sphere import Sphere, sphere
from raytracer.typings.color import BLACK, RED, WHITE, Color
from raytracer.typings.light import PointLight
from raytracer.typings.material import Material
from raytracer.utils.matrix import Matrix
from raytracer.utils.tuples import Point, Tuple, Vector, origin, point, vector
from raytracer.utils.vector_operations import EPSILON

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "Canvas",
    "CanvasWriteError",
    "Color",
    "EPSILON",
    "Intersection",
    "Material",
    "Matrix",
    "Point",
    "PointLight",
    "RED",
    "Ray",
    "Shape",
    "Sphere",
    "Tuple",
    "Vector",
    "WHITE",
    "hit",
    "intersections",
    "lighting",
    "origin",
    "point",
    "sphere",
    "vector",
]
