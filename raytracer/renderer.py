from __future__ import annotations

import logging
from typing import List, Sequence

from raytracer.camera import WallCamera
from raytracer.canvas import Canvas
from raytracer.hit import Intersection, hit
from raytracer.lighting import lighting
from raytracer.ray import Ray
from raytracer.surfaces.shape import Shape
from raytracer.typings.color import BLACK, RED, Color
from raytracer.typings.light import PointLight

logger = logging.getLogger(__name__)


def find_closest_hit(ray: Ray, shapes: Sequence[Shape]) -> Intersection | None:
    """Nearest visible intersection of ray with any of the shapes."""
    all_intersections: List[Intersection] = []
    for shape in shapes:
        all_intersections.extend(shape.intersections(ray))
    return hit(all_intersections)


def color_at(ray: Ray, shapes: Sequence[Shape], light: PointLight) -> Color | None:
    """Phong-shaded color of the first surface the ray sees, or None on a miss."""
    best_hit = find_closest_hit(ray, shapes)
    if best_hit is None:
        return None

    hit_point = ray.position(best_hit.t)
    surface = best_hit.object
    surface_normal = surface.normal_at(hit_point)
    eye = -ray.direction
    return lighting(surface.material, light, hit_point, eye, surface_normal)


def render_silhouette(camera: WallCamera, shapes: Sequence[Shape], color: Color = RED) -> Canvas:
    """Flat-colors every pixel whose ray hits a shape."""
    size = camera.canvas_pixels
    canvas = Canvas(size, size)

    for y in range(size):
        logger.debug("silhouette scanline %d/%d", y + 1, size)
        for x in range(size):
            ray = camera.generate_ray(x, y)
            if find_closest_hit(ray, shapes) is not None:
                canvas.write_pixel(x, y, color)

    return canvas


def render_shaded(
    camera: WallCamera,
    shapes: Sequence[Shape],
    light: PointLight,
    background_color: Color = BLACK,
) -> Canvas:
    """Render the scene with Phong shading from a single point light. No shadows."""
    size = camera.canvas_pixels
    canvas = Canvas(size, size)

    for y in range(size):
        logger.debug("shaded scanline %d/%d", y + 1, size)
        for x in range(size):
            ray = camera.generate_ray(x, y)
            color = color_at(ray, shapes, light)
            canvas.write_pixel(x, y, background_color if color is None else color)

    return canvas
