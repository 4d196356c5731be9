from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from raytracer.canvas import Canvas
from raytracer.typings.color import RED, Color
from raytracer.utils.tuples import Point, Vector
from raytracer.utils.vector_operations import round_half_away


@dataclass(frozen=True, slots=True)
class Environment:
    gravity: Vector
    wind: Vector


@dataclass(frozen=True, slots=True)
class Projectile:
    position: Point
    velocity: Vector

    def tick(self, environment: Environment, dtime: float = 1.0) -> Projectile:
        """Advance position by the current velocity, then apply gravity and wind."""
        position = self.position + self.velocity * dtime
        acceleration = (environment.gravity + environment.wind) * dtime
        return Projectile(position=position, velocity=self.velocity + acceleration)

    def coords(self) -> Tuple[int, int]:
        return round_half_away(self.position.x), round_half_away(self.position.y)

    def is_out_of_bounds(self, canvas: Canvas) -> bool:
        x, y = self.coords()
        return x < 0 or y < 0 or x >= canvas.width or y >= canvas.height

    def draw_on(self, canvas: Canvas, color: Color = RED) -> None:
        # canvas rows grow downward, world y grows upward
        x, y = self.coords()
        canvas.write_pixel(x, canvas.height - 1 - y, color)


def trajectory(projectile: Projectile, environment: Environment, canvas: Canvas, dtime: float = 0.1) -> int:
    """Draws the projectile's path until it leaves the canvas; returns the number of ticks drawn."""
    ticks = 0
    while not projectile.is_out_of_bounds(canvas):
        projectile.draw_on(canvas)
        projectile = projectile.tick(environment, dtime)
        ticks += 1
    return ticks
