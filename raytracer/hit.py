from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from raytracer.surfaces.shape import Shape


@dataclass(frozen=True, slots=True)
class Intersection:
    t: float
    object: Shape


def intersections(*xs: Intersection) -> List[Intersection]:
    return sorted(xs, key=lambda intersection: intersection.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """The nearest intersection in front of the ray origin (t > 0), if any."""
    best_hit: Intersection | None = None
    for intersection in xs:
        if intersection.t <= 0.0:
            continue
        if best_hit is None or intersection.t < best_hit.t:
            best_hit = intersection
    return best_hit
