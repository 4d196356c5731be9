from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from raytracer.hit import Intersection
from raytracer.ray import Ray
from raytracer.typings.material import Material
from raytracer.utils.matrix import Matrix
from raytracer.utils.tuples import Point, Vector


class Shape(ABC):
    """Base for every intersectable surface.

    A shape lives in its own object space; its transform maps object space to
    world space. The inverse is cached because every ray and every normal goes
    through it, and set_transform is the only way to replace the pair.
    """

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self._transform: Matrix = Matrix.transformation()
        self._inverse_transform: Matrix = Matrix.transformation()
        self.material: Material = material if material is not None else Material()
        if transform is not None:
            self.set_transform(transform)

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse_transform

    def set_transform(self, transform: Matrix) -> None:
        inverse = transform.inverse()
        self._transform = transform
        self._inverse_transform = inverse

    def intersect(self, ray: Ray) -> List[float]:
        """Ray parameters t where the world-space ray crosses this surface."""
        local_ray = ray.transform(self._inverse_transform)
        return self.local_intersect(local_ray)

    def intersections(self, ray: Ray) -> List[Intersection]:
        return [Intersection(t=t, object=self) for t in self.intersect(ray)]

    def normal_at(self, world_point: Point) -> Vector:
        object_point = self._inverse_transform * world_point
        object_normal = self.local_normal_at(object_point)
        # transpose of the inverse keeps normals perpendicular under non-uniform scaling
        world_normal = self._inverse_transform.transpose() * object_normal
        return Vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> List[float]:
        ...

    @abstractmethod
    def local_normal_at(self, object_point: Point) -> Vector:
        ...
