"""Fixed-size float vectors with the usual arithmetic."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, List, Union

__all__ = ["Vector"]


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Vector:
    """A vector of floats whose size is fixed at construction.

    ``Vector(1, 2, 3)`` and ``Vector([1, 2, 3])`` build the same vector.
    """

    __slots__ = ("_data",)
    __hash__ = None  # mutable

    def __init__(self, *args: Union[float, Iterable[float]]) -> None:
        if len(args) == 1 and not _is_scalar(args[0]):
            values = list(args[0])  # type: ignore[arg-type]
        else:
            values = list(args)
        if not values:
            raise ValueError("a vector needs at least one component")
        self._data: List[float] = [float(x) for x in values]

    def _check_same_size(self, other: "Vector") -> None:
        if len(self._data) != len(other._data):
            raise ValueError(
                f"size mismatch: {len(self._data)} and {len(other._data)}"
            )

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self._data)})"

    def __neg__(self) -> "Vector":
        return Vector(-x for x in self._data)

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, other: object):
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vector):
            return self.dot(other)
        if _is_scalar(other):
            return Vector(x * other for x in self._data)  # type: ignore[operator]
        return NotImplemented

    def __rmul__(self, other: object):
        if _is_scalar(other):
            return Vector(x * other for x in self._data)  # type: ignore[operator]
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        return Vector(x / other for x in self._data)  # type: ignore[operator]

    def __mod__(self, other: object):
        """Cross product: a float for 2-vectors, a vector for 3-vectors."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        a, b = self._data, other._data
        if len(a) == 2:
            return a[0] * b[1] - a[1] * b[0]
        if len(a) == 3:
            return Vector(
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            )
        raise ValueError("cross product is defined for 2- and 3-vectors only")

    def dot(self, other: "Vector") -> float:
        """Return the dot product with ``other``."""
        self._check_same_size(other)
        return sum(a * b for a, b in zip(self._data, other._data))

    def emult(self, other: "Vector") -> "Vector":
        """Element-by-element product."""
        self._check_same_size(other)
        return Vector(a * b for a, b in zip(self._data, other._data))

    def edivide(self, other: "Vector") -> "Vector":
        """Element-by-element quotient."""
        self._check_same_size(other)
        return Vector(a / b for a, b in zip(self._data, other._data))

    def length_squared(self) -> float:
        return sum(x * x for x in self._data)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        norm = self.length()
        self._data = [x / norm for x in self._data]

    def normalized(self) -> "Vector":
        """Return a unit-length copy of this vector."""
        return self / self.length()

    def zero(self) -> None:
        """Set every component to zero."""
        self._data = [0.0] * len(self._data)

    def __str__(self) -> str:
        return "[ " + "".join(f"{x:.3f}\t" for x in self._data) + "]"