"""Dense float matrices with rotation helpers for the 3x3 case."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, List, Sequence, Tuple

from .limits import constrain
from .matrix_alg import mat_inverse
from .vector import Vector

__all__ = ["Matrix"]

_HALF_PI = math.pi / 2.0


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Matrix:
    """An M x N matrix of floats stored row by row."""

    __slots__ = ("_data",)
    __hash__ = None  # mutable

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        data = [[float(x) for x in row] for row in rows]
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        self._data: List[List[float]] = data

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls([[0.0] * cols for _ in range(rows)])

    @classmethod
    def identity(cls, rows: int, cols: int) -> "Matrix":
        return cls(
            [[1.0 if i == j else 0.0 for j in range(cols)] for i in range(rows)]
        )

    @classmethod
    def from_euler(cls, roll: float, pitch: float, yaw: float) -> "Matrix":
        """Build the 3x3 rotation matrix for the given roll, pitch and yaw."""
        cp, sp = math.cos(pitch), math.sin(pitch)
        cr, sr = math.cos(roll), math.sin(roll)
        cy, sy = math.cos(yaw), math.sin(yaw)
        return cls(
            [
                [cp * cy, sr * sp * cy - cr * sy, cr * sp * cy + sr * sy],
                [cp * sy, sr * sp * sy + cr * cy, cr * sp * sy - sr * cy],
                [-sp, sr * cp, cr * cp],
            ]
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._data), len(self._data[0])

    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __getitem__(self, index):
        """``m[i, j]`` gives an element, ``m[i]`` a copy of row ``i``."""
        if isinstance(index, tuple):
            row, col = index
            return self._data[row][col]
        return Vector(self._data[index])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._data[row][col] = float(value)
        else:
            self.set_row(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __neg__(self) -> "Matrix":
        return Matrix([[-x for x in row] for row in self._data])

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        )

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        )

    def __mul__(self, other: object):
        """Scale by a number, or multiply by a matrix or a vector."""
        if isinstance(other, Matrix):
            if self.shape[1] != other.shape[0]:
                raise ValueError(
                    f"cannot multiply {self.shape} by {other.shape}"
                )
            columns = list(zip(*other._data))
            return Matrix(
                [
                    [sum(a * b for a, b in zip(row, col)) for col in columns]
                    for row in self._data
                ]
            )
        if isinstance(other, Vector):
            if self.shape[1] != len(other):
                raise ValueError(
                    f"cannot multiply {self.shape} by a vector of size {len(other)}"
                )
            return Vector(sum(a * b for a, b in zip(row, other)) for row in self._data)
        if _is_scalar(other):
            return Matrix([[x * other for x in row] for row in self._data])  # type: ignore[operator]
        return NotImplemented

    def __truediv__(self, other: object) -> "Matrix":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix([[x / other for x in row] for row in self._data])  # type: ignore[operator]

    def set_row(self, row: int, v: Sequence[float]) -> None:
        """Replace row ``row`` with the values of ``v``."""
        values = [float(x) for x in v]
        if len(values) != self.shape[1]:
            raise ValueError("row length does not match the matrix")
        self._data[row] = values

    def set_col(self, col: int, v: Sequence[float]) -> None:
        """Replace column ``col`` with the values of ``v``."""
        values = [float(x) for x in v]
        if len(values) != self.shape[0]:
            raise ValueError("column length does not match the matrix")
        for row, value in zip(self._data, values):
            row[col] = value

    def transposed(self) -> "Matrix":
        return Matrix(list(zip(*self._data)))

    def inversed(self) -> "Matrix":
        """Return the inverse; raises SingularMatrixError if there is none."""
        rows, cols = self.shape
        if rows != cols:
            raise ValueError("only square matrices can be inverted")
        return Matrix(mat_inverse(self._data))

    def zero(self) -> None:
        rows, cols = self.shape
        self._data = [[0.0] * cols for _ in range(rows)]

    def set_identity(self) -> None:
        """Set ones on the leading diagonal and zeros elsewhere."""
        rows, cols = self.shape
        self._data = [
            [1.0 if i == j else 0.0 for j in range(cols)] for i in range(rows)
        ]

    def to_euler(self) -> Vector:
        """Return (roll, pitch, yaw) of a 3x3 rotation matrix."""
        if self.shape != (3, 3):
            raise ValueError("Euler angles need a 3x3 matrix")
        d = self._data
        pitch = math.asin(constrain(-d[2][0], -1.0, 1.0))
        if abs(pitch - _HALF_PI) < 1.0e-3 or abs(pitch + _HALF_PI) < 1.0e-3:
            roll = 0.0
            yaw = math.atan2(d[1][2] - d[0][1], d[0][2] + d[1][1]) + roll
        else:
            roll = math.atan2(d[2][1], d[2][2])
            yaw = math.atan2(d[1][0], d[0][0])
        return Vector(roll, pitch, yaw)

    def __str__(self) -> str:
        return "\n".join(
            "[ " + "".join(f"{x:.3f}\t" for x in row) + " ]" for row in self._data
        )