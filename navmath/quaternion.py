"""Attitude quaternions built on the fixed-size vector type."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Union

from .limits import constrain
from .matrix import Matrix
from .vector import Vector

__all__ = ["Quaternion"]


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Quaternion(Vector):
    """A quaternion ``(w, x, y, z)`` with the scalar part first.

    ``Quaternion()`` is all zeros; ``Quaternion(a, b, c, d)`` and
    ``Quaternion([a, b, c, d])`` set the four components.
    """

    __slots__ = ()

    def __init__(self, *args: Union[float, Iterable[float]]) -> None:
        if not args:
            super().__init__(0.0, 0.0, 0.0, 0.0)
            return
        super().__init__(*args)
        if len(self) != 4:
            raise ValueError(f"a quaternion has 4 components, got {len(self)}")

    def __mul__(self, other: object):
        """Hamilton product with a quaternion, scaling by a number,
        or the dot product with a plain 4-vector."""
        if isinstance(other, Quaternion):
            a0, a1, a2, a3 = self
            b0, b1, b2, b3 = other
            return Quaternion(
                a0 * b0 - a1 * b1 - a2 * b2 - a3 * b3,
                a0 * b1 + a1 * b0 + a2 * b3 - a3 * b2,
                a0 * b2 - a1 * b3 + a2 * b0 + a3 * b1,
                a0 * b3 + a1 * b2 - a2 * b1 + a3 * b0,
            )
        if _is_scalar(other):
            return Quaternion(x * other for x in self)  # type: ignore[operator]
        return super().__mul__(other)

    def __rmul__(self, other: object):
        if _is_scalar(other):
            return Quaternion(x * other for x in self)  # type: ignore[operator]
        return NotImplemented

    def __truediv__(self, other: object):
        """Divide by a quaternion (``self * other⁻¹``) or by a number."""
        if isinstance(other, Quaternion):
            norm = other.length_squared()
            a0, a1, a2, a3 = self
            b0, b1, b2, b3 = other
            return Quaternion(
                (a0 * b0 + a1 * b1 + a2 * b2 + a3 * b3) / norm,
                (-a0 * b1 + a1 * b0 - a2 * b3 + a3 * b2) / norm,
                (-a0 * b2 + a1 * b3 + a2 * b0 - a3 * b1) / norm,
                (-a0 * b3 - a1 * b2 + a2 * b1 + a3 * b0) / norm,
            )
        if _is_scalar(other):
            return Quaternion(x / other for x in self)  # type: ignore[operator]
        return NotImplemented

    def derivative(self, w: Iterable[float]) -> "Quaternion":
        """Rate of change of this quaternion under body angular rate ``w``."""
        wx, wy, wz = w
        q0, q1, q2, q3 = self
        q_mat = Matrix(
            [
                [q0, -q1, -q2, -q3],
                [q1, q0, -q3, q2],
                [q2, q3, q0, -q1],
                [q3, -q2, q1, q0],
            ]
        )
        return Quaternion(q_mat * Vector(0.0, wx, wy, wz) * 0.5)

    def conjugated(self) -> "Quaternion":
        q0, q1, q2, q3 = self
        return Quaternion(q0, -q1, -q2, -q3)

    def inversed(self) -> "Quaternion":
        norm = self.length_squared()
        q0, q1, q2, q3 = self
        return Quaternion(q0 / norm, -q1 / norm, -q2 / norm, -q3 / norm)

    def conjugate(self, v: Iterable[float]) -> Vector:
        """Rotate ``v`` by this quaternion."""
        v0, v1, v2 = v
        q0, q1, q2, q3 = self
        q0q0, q1q1, q2q2, q3q3 = q0 * q0, q1 * q1, q2 * q2, q3 * q3
        return Vector(
            v0 * (q0q0 + q1q1 - q2q2 - q3q3)
            + v1 * 2.0 * (q1 * q2 - q0 * q3)
            + v2 * 2.0 * (q0 * q2 + q1 * q3),
            v0 * 2.0 * (q1 * q2 + q0 * q3)
            + v1 * (q0q0 - q1q1 + q2q2 - q3q3)
            + v2 * 2.0 * (q2 * q3 - q0 * q1),
            v0 * 2.0 * (q1 * q3 - q0 * q2)
            + v1 * 2.0 * (q0 * q1 + q2 * q3)
            + v2 * (q0q0 - q1q1 - q2q2 + q3q3),
        )

    def conjugate_inversed(self, v: Iterable[float]) -> Vector:
        """Rotate ``v`` by the inverse of this quaternion."""
        v0, v1, v2 = v
        q0, q1, q2, q3 = self
        q0q0, q1q1, q2q2, q3q3 = q0 * q0, q1 * q1, q2 * q2, q3 * q3
        return Vector(
            v0 * (q0q0 + q1q1 - q2q2 - q3q3)
            + v1 * 2.0 * (q1 * q2 + q0 * q3)
            + v2 * 2.0 * (q1 * q3 - q0 * q2),
            v0 * 2.0 * (q1 * q2 - q0 * q3)
            + v1 * (q0q0 - q1q1 + q2q2 - q3q3)
            + v2 * 2.0 * (q2 * q3 + q0 * q1),
            v0 * 2.0 * (q1 * q3 + q0 * q2)
            + v1 * 2.0 * (q2 * q3 - q0 * q1)
            + v2 * (q0q0 - q1q1 - q2q2 + q3q3),
        )

    def imag(self) -> Vector:
        """The vector part ``(x, y, z)``."""
        return Vector(list(self)[1:])

    @classmethod
    def from_euler(cls, roll: float, pitch: float, yaw: float) -> "Quaternion":
        """Quaternion for a 3-2-1 rotation by the given Euler angles."""
        c_phi, s_phi = math.cos(roll / 2.0), math.sin(roll / 2.0)
        c_the, s_the = math.cos(pitch / 2.0), math.sin(pitch / 2.0)
        c_psi, s_psi = math.cos(yaw / 2.0), math.sin(yaw / 2.0)
        return cls(
            c_phi * c_the * c_psi + s_phi * s_the * s_psi,
            s_phi * c_the * c_psi - c_phi * s_the * s_psi,
            c_phi * s_the * c_psi + s_phi * c_the * s_psi,
            c_phi * c_the * s_psi - s_phi * s_the * c_psi,
        )

    @classmethod
    def from_yaw(cls, yaw: float) -> "Quaternion":
        """Quaternion for a rotation about the z axis only."""
        return cls(math.cos(yaw / 2.0), 0.0, 0.0, math.sin(yaw / 2.0))

    def to_euler(self) -> Vector:
        """Return (roll, pitch, yaw)."""
        q0, q1, q2, q3 = self
        return Vector(
            math.atan2(2.0 * (q0 * q1 + q2 * q3), 1.0 - 2.0 * (q1 * q1 + q2 * q2)),
            math.asin(constrain(2.0 * (q0 * q2 - q3 * q1), -1.0, 1.0)),
            math.atan2(2.0 * (q0 * q3 + q1 * q2), 1.0 - 2.0 * (q2 * q2 + q3 * q3)),
        )

    @classmethod
    def from_dcm(cls, dcm) -> "Quaternion":
        """Quaternion for a 3x3 direction cosine matrix."""
        if not isinstance(dcm, Matrix):
            dcm = Matrix(dcm)
        if dcm.shape != (3, 3):
            raise ValueError("a direction cosine matrix must be 3x3")
        d = [[dcm[i, j] for j in range(3)] for i in range(3)]
        q = [0.0] * 4
        tr = d[0][0] + d[1][1] + d[2][2]
        if tr > 0.0:
            s = math.sqrt(tr + 1.0)
            q[0] = s * 0.5
            s = 0.5 / s
            q[1] = (d[2][1] - d[1][2]) * s
            q[2] = (d[0][2] - d[2][0]) * s
            q[3] = (d[1][0] - d[0][1]) * s
        else:
            i = max(range(3), key=lambda n: (d[n][n], -n))
            j = (i + 1) % 3
            k = (i + 2) % 3
            s = math.sqrt((d[i][i] - d[j][j] - d[k][k]) + 1.0)
            q[i + 1] = s * 0.5
            s = 0.5 / s
            q[j + 1] = (d[i][j] + d[j][i]) * s
            q[k + 1] = (d[k][i] + d[i][k]) * s
            q[0] = (d[k][j] - d[j][k]) * s
        return cls(q)

    def to_dcm(self) -> Matrix:
        """The 3x3 rotation matrix for this quaternion."""
        a, b, c, d = self
        a_sq, b_sq, c_sq, d_sq = a * a, b * b, c * c, d * d
        return Matrix(
            [
                [a_sq + b_sq - c_sq - d_sq, 2.0 * (b * c - a * d), 2.0 * (a * c + b * d)],
                [2.0 * (b * c + a * d), a_sq - b_sq + c_sq - d_sq, 2.0 * (c * d - a * b)],
                [2.0 * (b * d - a * c), 2.0 * (a * b + c * d), a_sq - b_sq - c_sq + d_sq],
            ]
        )