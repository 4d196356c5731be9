from __future__ import annotations

from typing import Iterator

import numpy as np

from raytracer.utils.vector_operations import arrays_equal, float_equal


class Tuple:
    """Homogeneous (x, y, z, w) value. w == 1 marks a point, w == 0 a vector.

    Instances are immutable: every operation returns a new tuple, re-tagged as a
    Point or Vector from the w component of the result.
    """

    __slots__ = ("_components",)
    __array_ufunc__ = None  # numpy scalars on the left defer to __rmul__

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        components = np.array([x, y, z, w], dtype=float)
        components.flags.writeable = False
        self._components: np.ndarray = components

    @staticmethod
    def of(x: float, y: float, z: float, w: float) -> Tuple:
        if float_equal(w, 1.0):
            return Point(x, y, z)
        if float_equal(w, 0.0):
            return Vector(x, y, z)
        return Tuple(x, y, z, w)

    @staticmethod
    def from_array(components: np.ndarray) -> Tuple:
        x, y, z, w = (float(c) for c in np.asarray(components, dtype=float).reshape(4))
        return Tuple.of(x, y, z, w)

    @property
    def x(self) -> float:
        return float(self._components[0])

    @property
    def y(self) -> float:
        return float(self._components[1])

    @property
    def z(self) -> float:
        return float(self._components[2])

    @property
    def w(self) -> float:
        return float(self._components[3])

    @property
    def components(self) -> np.ndarray:
        return self._components

    def is_point(self) -> bool:
        return float_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        return float_equal(self.w, 0.0)

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._components + other._components)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._components - other._components)

    def __neg__(self) -> Tuple:
        return Tuple.from_array(-self._components)

    def __mul__(self, scalar: float) -> Tuple:
        if isinstance(scalar, Tuple):
            return NotImplemented
        return Tuple.from_array(self._components * float(scalar))

    def __rmul__(self, scalar: float) -> Tuple:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        return self * (1.0 / float(scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return arrays_equal(self._components, other._components)

    __hash__ = None  # tolerant equality cannot be hashed consistently

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self) -> str:
        return f"Tuple({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"

    def _require_vectors(self, operation: str, other: Tuple) -> None:
        if not self.is_vector():
            raise TypeError(f"{operation} requires two vectors, left side was {self!r}")
        if not isinstance(other, Tuple) or not other.is_vector():
            raise TypeError(f"{operation} requires two vectors, right side was {other!r}")

    def hadamard(self, other: Tuple) -> Tuple:
        return Tuple.from_array(self._components * other._components)

    def magnitude(self) -> float:
        """Euclidean length of the x, y, z part; w does not participate."""
        return float(np.linalg.norm(self._components[:3]))

    def normalize(self) -> Tuple:
        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise ValueError(f"Cannot normalize zero-length vector {self!r}")
        return self / magnitude

    def dot(self, other: Tuple) -> float:
        """Cosine of the angle between two unit vectors; larger means more aligned."""
        self._require_vectors("dot product", other)
        return float(np.dot(self._components, other._components))

    def cross(self, other: Tuple) -> Vector:
        self._require_vectors("cross product", other)
        x, y, z = np.cross(self._components[:3], other._components[:3])
        return Vector(x, y, z)

    def reflect(self, normal: Tuple) -> Vector:
        """Mirrors this vector about the plane defined by normal."""
        return self - normal * (2.0 * self.dot(normal))

    def round(self, digits: int = 5) -> Tuple:
        return Tuple.from_array(np.round(self._components, digits))


class Point(Tuple):
    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, 1.0)

    def __repr__(self) -> str:
        return f"Point({self.x:g}, {self.y:g}, {self.z:g})"


class Vector(Tuple):
    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, 0.0)

    def __repr__(self) -> str:
        return f"Vector({self.x:g}, {self.y:g}, {self.z:g})"


def point(x: float, y: float, z: float) -> Point:
    return Point(x, y, z)


def vector(x: float, y: float, z: float) -> Vector:
    return Vector(x, y, z)


def origin() -> Point:
    return Point(0.0, 0.0, 0.0)
