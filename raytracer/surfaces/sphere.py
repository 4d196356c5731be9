from __future__ import annotations

import math
from typing import List

from raytracer.ray import Ray
from raytracer.surfaces.shape import Shape
from raytracer.utils.tuples import Point, Vector, origin


class Sphere(Shape):
    """Unit sphere centred on the object-space origin."""

    def local_intersect(self, local_ray: Ray) -> List[float]:
        ray_direction = local_ray.direction
        sphere_to_ray = local_ray.origin - origin()

        quadratic_a = ray_direction.dot(ray_direction)
        quadratic_b = 2.0 * ray_direction.dot(sphere_to_ray)
        quadratic_c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant < 0.0:
            return []

        sqrt_discriminant = math.sqrt(discriminant)
        inverse_2a = 1.0 / (2.0 * quadratic_a)

        t_near = (-quadratic_b - sqrt_discriminant) * inverse_2a
        t_far = (-quadratic_b + sqrt_discriminant) * inverse_2a
        return [t_near, t_far]

    def local_normal_at(self, object_point: Point) -> Vector:
        return object_point - origin()

    def __repr__(self) -> str:
        return f"Sphere(transform={self.transform!r}, material={self.material!r})"


def sphere() -> Sphere:
    return Sphere()
