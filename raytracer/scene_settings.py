from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class RenderSettings:
    canvas_pixels: int = 100
    wall_size: float = 7.0
    wall_z: float = 10.0

    def __post_init__(self) -> None:
        self.canvas_pixels = int(self.canvas_pixels)
        self.wall_size = float(self.wall_size)
        self.wall_z = float(self.wall_z)
        if self.canvas_pixels <= 0:
            raise ValueError(f"canvas_pixels must be positive, got {self.canvas_pixels}")
        if self.wall_size <= 0.0:
            raise ValueError(f"wall_size must be positive, got {self.wall_size}")
