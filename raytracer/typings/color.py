from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from raytracer.utils.vector_operations import arrays_equal, clamp_color01, color_to_channels


class Color:
    """RGB triple. Channels are unclamped during arithmetic and clamped only when encoded."""

    __slots__ = ("_rgb",)
    __array_ufunc__ = None

    def __init__(self, red: float, green: float, blue: float) -> None:
        rgb = np.array([red, green, blue], dtype=float)
        rgb.flags.writeable = False
        self._rgb: np.ndarray = rgb

    @classmethod
    def from_array(cls, rgb: np.ndarray) -> Color:
        red, green, blue = (float(channel) for channel in np.asarray(rgb, dtype=float).reshape(3))
        return cls(red, green, blue)

    @property
    def red(self) -> float:
        return float(self._rgb[0])

    @property
    def green(self) -> float:
        return float(self._rgb[1])

    @property
    def blue(self) -> float:
        return float(self._rgb[2])

    @property
    def rgb(self) -> np.ndarray:
        return self._rgb

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._rgb + other._rgb)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._rgb - other._rgb)

    def __neg__(self) -> Color:
        return Color.from_array(-self._rgb)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color blends with the Hadamard product
        if isinstance(other, Color):
            return Color.from_array(self._rgb * other._rgb)
        return Color.from_array(self._rgb * float(other))

    def __rmul__(self, scalar: float) -> Color:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Color:
        return self * (1.0 / float(scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return arrays_equal(self._rgb, other._rgb)

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.red, self.green, self.blue))

    def __repr__(self) -> str:
        return f"Color({self.red:g}, {self.green:g}, {self.blue:g})"

    def clamp(self) -> Color:
        return Color.from_array(clamp_color01(self._rgb))

    def to_ppm_channels(self) -> Tuple[int, int, int]:
        red, green, blue = (int(channel) for channel in color_to_channels(self._rgb))
        return red, green, blue


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
