from __future__ import annotations

from raytracer.ray import Ray
from raytracer.scene_settings import RenderSettings
from raytracer.utils.tuples import Point


class WallCamera:
    """Casts rays from a fixed origin through a square wall facing +z.

    The canvas is mapped onto the wall so that canvas row 0 is the top edge of
    the wall; rays pass through pixel centres.
    """

    def __init__(self, origin: Point, wall_z: float, wall_size: float, canvas_pixels: int) -> None:
        self.origin: Point = origin
        self.wall_z: float = float(wall_z)
        self.wall_size: float = float(wall_size)
        self.canvas_pixels: int = int(canvas_pixels)

        self._recompute_wall()

    @classmethod
    def from_settings(cls, origin: Point, settings: RenderSettings) -> WallCamera:
        return cls(origin, settings.wall_z, settings.wall_size, settings.canvas_pixels)

    def _recompute_wall(self) -> None:
        self.pixel_size: float = self.wall_size / float(self.canvas_pixels)
        self.half_wall: float = self.wall_size / 2.0

    def wall_point(self, x: int, y: int) -> Point:
        world_x = -self.half_wall + self.pixel_size * (float(x) + 0.5)
        world_y = self.half_wall - self.pixel_size * (float(y) + 0.5)
        return Point(world_x, world_y, self.wall_z)

    def generate_ray(self, x: int, y: int) -> Ray:
        direction = (self.wall_point(x, y) - self.origin).normalize()
        return Ray(origin=self.origin, direction=direction)
