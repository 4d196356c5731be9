from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.typings.color import WHITE, Color


@dataclass(slots=True)
class Material:
    """Phong reflectance coefficients of a surface."""

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        self.ambient = float(self.ambient)
        self.diffuse = float(self.diffuse)
        self.specular = float(self.specular)
        self.shininess = float(self.shininess)
