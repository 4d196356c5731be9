from __future__ import annotations

import math
from typing import Callable, List, Sequence

import numpy as np

from raytracer.utils.tuples import Tuple
from raytracer.utils.vector_operations import arrays_equal

DETERMINANT_EPSILON: float = float(np.finfo(float).eps)


class Matrix:
    """Rectangular grid of floats, indexed (row, col) from the top-left.

    Any shape can be read, written, transposed and multiplied. Determinant,
    cofactors and inversion need a square matrix. The transformation builders
    at the bottom of the class always produce 4x4 matrices.
    """

    __slots__ = ("_elements",)
    __array_ufunc__ = None

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        row_lists = [list(row) for row in rows]
        if not row_lists or not row_lists[0]:
            raise ValueError("A matrix needs at least one row and one column")
        width = len(row_lists[0])
        for index, row in enumerate(row_lists):
            if len(row) != width:
                raise ValueError(
                    "All matrix rows must have the same length: row {} has {} elements, expected {}".format(
                        index, len(row), width
                    )
                )
        self._elements: np.ndarray = np.array(row_lists, dtype=float)

    @classmethod
    def _wrap(cls, elements: np.ndarray) -> Matrix:
        m = cls.__new__(cls)
        m._elements = np.array(elements, dtype=float)
        return m

    @classmethod
    def zeros(cls, width: int, height: int) -> Matrix:
        return cls._wrap(np.zeros((height, width), dtype=float))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls._wrap(np.eye(size, dtype=float))

    @classmethod
    def from_tuple(cls, t: Tuple) -> Matrix:
        """A 1x4 row matrix; transpose it for the column form."""
        return cls([[t.x, t.y, t.z, t.w]])

    @classmethod
    def parse(cls, text: str) -> Matrix:
        """Builds a matrix from a pipe-delimited table, one row per line.

        Example::

            | -2 | -8 |  3 |
            | -3 |  1 |  7 |
            |  1 |  2 | -9 |
        """
        rows: List[List[float]] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            cells = line.strip("|").split("|")
            try:
                rows.append([float(cell) for cell in cells])
            except ValueError as exc:
                raise ValueError(f"Invalid matrix value on line {line_number}: {line!r}") from exc
        return cls(rows)

    @property
    def width(self) -> int:
        return int(self._elements.shape[1])

    @property
    def height(self) -> int:
        return int(self._elements.shape[0])

    @property
    def shape(self) -> str:
        return f"{self.width}x{self.height}"

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Position ({row}, {col}) is outside a {self.shape} matrix")

    def get(self, row: int, col: int) -> float:
        self._check_bounds(row, col)
        return float(self._elements[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_bounds(row, col)
        self._elements[row, col] = float(value)

    def rows(self) -> List[List[float]]:
        return self._elements.tolist()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._elements)

    def map_elements(self, fn: Callable[[float], float]) -> Matrix:
        return Matrix([[fn(element) for element in row] for row in self.rows()])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return arrays_equal(self._elements, other._elements)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.rows()!r})"

    def __mul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if isinstance(other, Tuple):
            if (self.width, self.height) != (4, 4):
                raise ValueError(f"Multiplying by a tuple requires a 4x4 matrix, got {self.shape}")
            return Tuple.from_array(self._elements @ other.components)
        if isinstance(other, Matrix):
            # each cell is the dot product of a row of self and a column of other
            if self.width != other.height:
                raise ValueError(
                    f"Cannot multiply a {self.shape} matrix by a {other.shape} matrix: "
                    f"left width {self.width} != right height {other.height}"
                )
            return Matrix._wrap(self._elements @ other._elements)
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._elements.T)

    def _require_square(self, operation: str) -> None:
        if self.width != self.height:
            raise ValueError(f"{operation} requires a square matrix, got {self.shape}")

    def submatrix(self, row: int, col: int) -> Matrix:
        """The matrix with the given row and column removed."""
        self._check_bounds(row, col)
        without_row = np.delete(self._elements, row, axis=0)
        return Matrix._wrap(np.delete(without_row, col, axis=1))

    def determinant(self) -> float:
        self._require_square("determinant")
        if self.width == 1:
            return float(self._elements[0, 0])
        if self.width == 2:
            a, b = self._elements[0]
            c, d = self._elements[1]
            return float(a * d - b * c)
        # cofactor expansion along the first row
        return sum(self.get(0, col) * self.cofactor(0, col) for col in range(self.width))

    def minor(self, row: int, col: int) -> float:
        self._require_square("minor")
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def is_invertible(self) -> bool:
        self._require_square("is_invertible")
        return abs(self.determinant()) > DETERMINANT_EPSILON

    def inverse(self) -> Matrix:
        self._require_square("inverse")
        determinant = self.determinant()
        if abs(determinant) <= DETERMINANT_EPSILON:
            raise ValueError(f"Matrix is not invertible (determinant {determinant:g}): {self!r}")

        inverted = np.zeros_like(self._elements)
        for row in range(self.height):
            for col in range(self.width):
                # writing to [col, row] transposes the cofactor matrix in the same pass
                inverted[col, row] = self.cofactor(row, col) / determinant
        return Matrix._wrap(inverted)

    # Transformation builders

    @classmethod
    def transformation(cls) -> Matrix:
        """Identity 4x4, the starting point for the fluent API."""
        return cls.identity(4)

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix:
        return cls([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        return cls([
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_x(cls, radians: float) -> Matrix:
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        return cls([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos_r, -sin_r, 0.0],
            [0.0, sin_r, cos_r, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_y(cls, radians: float) -> Matrix:
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        return cls([
            [cos_r, 0.0, sin_r, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin_r, 0.0, cos_r, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_z(cls, radians: float) -> Matrix:
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        return cls([
            [cos_r, -sin_r, 0.0, 0.0],
            [sin_r, cos_r, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def shearing(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return cls([
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    # Fluent API: each call left-multiplies, so operations apply to a point in written order.

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return Matrix.translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return Matrix.scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> Matrix:
        return Matrix.rotation_x(radians) * self

    def rotate_y(self, radians: float) -> Matrix:
        return Matrix.rotation_y(radians) * self

    def rotate_z(self, radians: float) -> Matrix:
        return Matrix.rotation_z(radians) * self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        return Matrix.shearing(xy, xz, yx, yz, zx, zy) * self
