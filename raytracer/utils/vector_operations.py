from __future__ import annotations

import math

import numpy as np

EPSILON: float = 1e-5 # shared tolerance for every float comparison (tuples, colors, matrices)


def float_equal(a: float, b: float) -> bool:
    return abs(float(a) - float(b)) < EPSILON


def arrays_equal(a: np.ndarray, b: np.ndarray) -> bool:
    """Element-wise comparison within EPSILON; arrays of different shape are never equal."""
    array_a = np.asarray(a, dtype=float)
    array_b = np.asarray(b, dtype=float)
    if array_a.shape != array_b.shape:
        return False
    return bool(np.all(np.abs(array_a - array_b) < EPSILON))


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def color_to_channels(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB array to integers in [0, 255], rounding up."""
    clamped_color = clamp_color01(color_rgb)
    return np.ceil(clamped_color * 255.0).astype(int)


def round_half_away(value: float) -> int:
    """Nearest integer, with halves going away from zero (builtin round() sends them to even)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
