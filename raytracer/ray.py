from __future__ import annotations

from dataclasses import dataclass

from raytracer.utils.matrix import Matrix
from raytracer.utils.tuples import Point, Tuple, Vector


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Point
    direction: Vector

    def position(self, t: float) -> Tuple:
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """The same ray expressed in the coordinate frame that matrix maps into."""
        return Ray(origin=matrix * self.origin, direction=matrix * self.direction)
