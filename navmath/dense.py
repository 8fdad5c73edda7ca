"""General dense matrices with element-wise, block and comparison helpers."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, List, Sequence, Tuple

from .matrix import Matrix
from .vector import Vector

__all__ = [
    "DenseMatrix",
    "zeros",
    "ones",
    "eye",
    "is_equal",
    "is_equal_f",
]

_DEFAULT_EPS = 1e-4


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class DenseMatrix:
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

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._data), len(self._data[0])

    def _check_same_shape(self, other: "DenseMatrix") -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def _map(self, func) -> "DenseMatrix":
        return DenseMatrix([[func(x) for x in row] for row in self._data])

    def _zip_map(self, other: "DenseMatrix", func) -> "DenseMatrix":
        self._check_same_shape(other)
        return DenseMatrix(
            [
                [func(a, b) for a, b in zip(r1, r2)]
                for r1, r2 in zip(self._data, other._data)
            ]
        )

    def __iter__(self) -> Iterator[List[float]]:
        return (list(row) for row in self._data)

    def __getitem__(self, index):
        """``m[i, j]`` gives an element, ``m[i]`` a copy of row ``i``."""
        if isinstance(index, tuple):
            row, col = index
            return self._data[row][col]
        return list(self._data[index])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._data[row][col] = float(value)
        else:
            self.set_row(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __neg__(self) -> "DenseMatrix":
        return self._map(lambda x: -x)

    def __add__(self, other: object) -> "DenseMatrix":
        """Element-wise sum with a matrix, or add a number to every element."""
        if isinstance(other, DenseMatrix):
            return self._zip_map(other, lambda a, b: a + b)
        if _is_scalar(other):
            return self._map(lambda x: x + other)  # type: ignore[operator]
        return NotImplemented

    def __sub__(self, other: object) -> "DenseMatrix":
        """Element-wise difference, or subtract a number from every element."""
        if isinstance(other, DenseMatrix):
            return self._zip_map(other, lambda a, b: a - b)
        if _is_scalar(other):
            return self + (-1 * other)  # type: ignore[operator]
        return NotImplemented

    def __mul__(self, other: object):
        """Matrix product, product with a column vector, or scaling."""
        if isinstance(other, DenseMatrix):
            if self.shape[1] != other.shape[0]:
                raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
            columns = list(zip(*other._data))
            return DenseMatrix(
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
            return self._map(lambda x: x * other)  # type: ignore[operator]
        return NotImplemented

    def __rmul__(self, other: object) -> "DenseMatrix":
        if _is_scalar(other):
            return self._map(lambda x: x * other)  # type: ignore[operator]
        return NotImplemented

    def __truediv__(self, other: object) -> "DenseMatrix":
        if not _is_scalar(other):
            return NotImplemented
        return self * (1 / other)  # type: ignore[operator]

    def emult(self, other: "DenseMatrix") -> "DenseMatrix":
        """Element-by-element product."""
        return self._zip_map(other, lambda a, b: a * b)

    def edivide(self, other: "DenseMatrix") -> "DenseMatrix":
        """Element-by-element quotient."""
        return self._zip_map(other, lambda a, b: a / b)

    def transpose(self) -> "DenseMatrix":
        return DenseMatrix(zip(*self._data))

    def T(self) -> "DenseMatrix":
        """Alias of :meth:`transpose`."""
        return self.transpose()

    def slice(self, rows: int, cols: int, x0: int, y0: int) -> "DenseMatrix":
        """Return the ``rows`` x ``cols`` block whose top-left corner is ``(x0, y0)``."""
        m, n = self.shape
        if rows < 1 or cols < 1 or x0 < 0 or y0 < 0 or x0 + rows > m or y0 + cols > n:
            raise IndexError("block lies outside the matrix")
        return DenseMatrix(row[y0:y0 + cols] for row in self._data[x0:x0 + rows])

    def set_block(self, m: "DenseMatrix", x0: int, y0: int) -> None:
        """Copy ``m`` into this matrix with its top-left corner at ``(x0, y0)``."""
        rows, cols = m.shape
        height, width = self.shape
        if x0 < 0 or y0 < 0 or x0 + rows > height or y0 + cols > width:
            raise IndexError("block lies outside the matrix")
        for i, row in enumerate(m._data):
            self._data[x0 + i][y0:y0 + cols] = row

    def set_row(self, i: int, row: Sequence[float]) -> None:
        values = [float(x) for x in row]
        if len(values) != self.shape[1]:
            raise ValueError("row length does not match the matrix")
        self._data[i] = values

    def set_col(self, j: int, col: Sequence[float]) -> None:
        values = [float(x) for x in col]
        if len(values) != self.shape[0]:
            raise ValueError("column length does not match the matrix")
        for row, value in zip(self._data, values):
            row[j] = value

    def set_zero(self) -> None:
        self.set_all(0.0)

    def set_all(self, val: float) -> None:
        rows, cols = self.shape
        self._data = [[float(val)] * cols for _ in range(rows)]

    def set_one(self) -> None:
        self.set_all(1.0)

    def set_identity(self) -> None:
        """Ones on the leading diagonal, zeros elsewhere."""
        rows, cols = self.shape
        self._data = [
            [1.0 if i == j else 0.0 for j in range(cols)] for i in range(rows)
        ]

    def swap_rows(self, a: int, b: int) -> None:
        if a != b:
            self._data[a], self._data[b] = self._data[b], self._data[a]

    def swap_cols(self, a: int, b: int) -> None:
        if a != b:
            for row in self._data:
                row[a], row[b] = row[b], row[a]

    def abs(self) -> "DenseMatrix":
        return self._map(math.fabs)

    def max(self) -> float:
        return max(x for row in self._data for x in row)

    def min(self) -> float:
        return min(x for row in self._data for x in row)

    def to_list(self) -> List[List[float]]:
        """A nested-list copy of the elements."""
        return [list(row) for row in self._data]

    def write_string(self) -> str:
        """Each element as a tab followed by ``%g``, one line per row."""
        return "".join(
            "".join("\t%g" % x for x in row) + "\n" for row in self._data
        )

    def __str__(self) -> str:
        return self.write_string()


def zeros(rows: int, cols: int) -> DenseMatrix:
    return DenseMatrix([[0.0] * cols for _ in range(rows)])


def ones(rows: int, cols: int) -> DenseMatrix:
    return DenseMatrix([[1.0] * cols for _ in range(rows)])


def eye(n: int) -> DenseMatrix:
    m = zeros(n, n)
    m.set_identity()
    return m


def _rows_of(x) -> List[List[float]]:
    if isinstance(x, DenseMatrix):
        return x.to_list()
    if isinstance(x, Matrix):
        rows, cols = x.shape
        return [[x[i, j] for j in range(cols)] for i in range(rows)]
    items = list(x)
    if items and all(_is_scalar(v) for v in items):
        return [[float(v)] for v in items]
    return [[float(v) for v in row] for row in items]


def is_equal(x, y, eps: float = _DEFAULT_EPS) -> bool:
    """True if ``x`` and ``y`` agree element by element within ``eps``.

    Accepts matrices, vectors (taken as columns) and nested sequences.
    Prints both operands when they differ.
    """
    a = DenseMatrix(_rows_of(x))
    b = DenseMatrix(_rows_of(y))
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} and {b.shape}")
    equal = all(
        math.fabs(p - q) <= eps
        for r1, r2 in zip(a.to_list(), b.to_list())
        for p, q in zip(r1, r2)
    )
    if not equal:
        print(f"not equal\nx:\n{a.write_string()}\ny:\n{b.write_string()}")
    return equal


def is_equal_f(x: float, y: float, eps: float = _DEFAULT_EPS) -> bool:
    """True if two scalars differ by no more than ``eps``; prints them otherwise."""
    equal = math.fabs(x - y) <= eps
    if not equal:
        print("not equal\nx:\n%g\ny:\n%g" % (x, y))
    return equal