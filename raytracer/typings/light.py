from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.typings.color import WHITE, Color
from raytracer.utils.tuples import Point, origin


@dataclass(frozen=True, slots=True)
class PointLight:
    position: Point = field(default_factory=origin)
    intensity: Color = field(default_factory=lambda: WHITE)
