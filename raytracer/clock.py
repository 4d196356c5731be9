from __future__ import annotations

import logging
import math
from typing import List

from raytracer.canvas import Canvas
from raytracer.typings.color import WHITE, Color
from raytracer.utils.matrix import Matrix
from raytracer.utils.tuples import Point, origin
from raytracer.utils.vector_operations import round_half_away

logger = logging.getLogger(__name__)


def clock_positions(radius: float, marks: int, center: float) -> List[Point]:
    """Evenly spaced points on a circle of the given radius around (center, center).

    Mark 0 sits at 3 o'clock and the marks advance counter-clockwise.
    """
    if marks <= 0:
        raise ValueError(f"A clock face needs at least one mark, got {marks}")
    step = 2.0 * math.pi / marks
    positions = []
    for mark in range(marks):
        # out to the rim, around the dial, then into the middle of the canvas
        transform = (
            Matrix.transformation()
            .translate(radius, 0.0, 0.0)
            .rotate_z(mark * step)
            .translate(center, center, 0.0)
        )
        positions.append(transform * origin())
    return positions


def draw_clock_face(canvas: Canvas, radius: float, marks: int = 12, color: Color = WHITE) -> int:
    """Plots the marks of a clock face centred on a square canvas; returns how many landed on it."""
    center = canvas.width / 2.0
    drawn = 0
    for position in clock_positions(radius, marks, center):
        x = round_half_away(position.x)
        row = canvas.height - 1 - round_half_away(position.y)
        if not canvas.in_bounds(x, row):
            logger.debug("Clock mark at (%d, %d) is off the canvas", x, row)
            continue
        canvas.write_pixel(x, row, color)
        drawn += 1
    return drawn
