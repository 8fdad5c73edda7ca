"""Direction cosine matrices."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Optional

from .dense import DenseMatrix
from .vector import Vector

__all__ = ["Dcm"]


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Dcm(DenseMatrix):
    """A 3x3 rotation matrix transforming vectors from frame 2 to frame 1.

    ``Dcm()`` is the identity; ``Dcm(rows)`` takes three rows or nine
    row-major values.
    """

    __slots__ = ()

    def __init__(self, rows: Optional[Iterable] = None) -> None:
        if rows is None:
            super().__init__([[1.0 if i == j else 0.0 for j in range(3)] for i in range(3)])
            return
        items = list(rows)
        if items and all(_is_scalar(v) for v in items):
            if len(items) != 9:
                raise ValueError("a direction cosine matrix needs 9 values")
            items = [items[0:3], items[3:6], items[6:9]]
        super().__init__(items)
        if self.shape != (3, 3):
            raise ValueError("a direction cosine matrix must be 3x3")

    @classmethod
    def from_quaternion(cls, q: Iterable[float]) -> "Dcm":
        """Rotation matrix for the quaternion ``(w, x, y, z)``."""
        a, b, c, d = q
        a_sq, b_sq, c_sq, d_sq = a * a, b * b, c * c, d * d
        return cls(
            [
                [a_sq + b_sq - c_sq - d_sq, 2 * (b * c - a * d), 2 * (a * c + b * d)],
                [2 * (b * c + a * d), a_sq - b_sq + c_sq - d_sq, 2 * (c * d - a * b)],
                [2 * (b * d - a * c), 2 * (a * b + c * d), a_sq - b_sq - c_sq + d_sq],
            ]
        )

    @classmethod
    def from_euler(cls, roll: float, pitch: float, yaw: float) -> "Dcm":
        """Rotation matrix for a 3-2-1 intrinsic Tait-Bryan sequence."""
        cos_phi, sin_phi = math.cos(roll), math.sin(roll)
        cos_the, sin_the = math.cos(pitch), math.sin(pitch)
        cos_psi, sin_psi = math.cos(yaw), math.sin(yaw)
        return cls(
            [
                [
                    cos_the * cos_psi,
                    -cos_phi * sin_psi + sin_phi * sin_the * cos_psi,
                    sin_phi * sin_psi + cos_phi * sin_the * cos_psi,
                ],
                [
                    cos_the * sin_psi,
                    cos_phi * cos_psi + sin_phi * sin_the * sin_psi,
                    -sin_phi * cos_psi + cos_phi * sin_the * sin_psi,
                ],
                [-sin_the, sin_phi * cos_the, cos_phi * cos_the],
            ]
        )

    def vee(self) -> Vector:
        """Inverse of the skew-symmetric (hat) operator."""
        return Vector(-self[1, 2], self[0, 2], -self[0, 1])