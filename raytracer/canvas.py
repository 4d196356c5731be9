from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

import numpy as np

from raytracer.typings.color import Color
from raytracer.utils.vector_operations import color_to_channels

logger = logging.getLogger(__name__)

PPM_MAX_LINE_LENGTH: int = 70
PPM_MAX_COLOR_VALUE: int = 255


class CanvasWriteError(OSError):
    """Raised when an encoded canvas cannot be written to storage."""

    def __init__(self, path: str | os.PathLike, cause: OSError) -> None:
        super().__init__(f"Could not write canvas to {os.fspath(path)}: {cause}")
        self.path = os.fspath(path)
        self.cause = cause


class Canvas:
    """width x height grid of colors, x = column and y = row from the top-left."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width: int = int(width)
        self.height: int = int(height)
        self.pixels: np.ndarray = np.zeros((self.height, self.width, 3), dtype=float)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self.pixels[y, x, :] = color.rgb

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return Color.from_array(self.pixels[y, x, :])

    def fill(self, color: Color) -> None:
        self.pixels[:, :, :] = color.rgb

    def ppm_lines(self) -> Iterator[str]:
        """Yields PPM (P3) lines without their newline characters."""
        yield "P3"
        yield f"{self.width} {self.height}"
        yield str(PPM_MAX_COLOR_VALUE)

        channels = color_to_channels(self.pixels)
        for scanline in channels:
            yield from _wrap_tokens([f"{value} " for value in scanline.reshape(-1)])

    def to_ppm(self) -> str:
        return "".join(line + "\n" for line in self.ppm_lines())

    def save(self, path: str | os.PathLike) -> None:
        """Writes the canvas as PPM text, raising CanvasWriteError on any I/O failure."""
        output_path = Path(path)
        encoded = self.to_ppm()
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="ascii", newline="\n") as f:
                f.write(encoded)
        except OSError as exc:
            raise CanvasWriteError(output_path, exc) from exc
        logger.info("Wrote %dx%d canvas to %s (%d bytes)", self.width, self.height, output_path, len(encoded))


def _wrap_tokens(tokens: List[str]) -> Iterator[str]:
    # Tokens are never split; a line is flushed before it would pass the limit.
    line = ""
    for token in tokens:
        if line and len(line) + len(token) > PPM_MAX_LINE_LENGTH:
            yield line
            line = ""
        line += token
    if line:
        yield line
