"""Square-matrix algebra on nested lists: product, LU inverse and a closed-form 4x4 inverse."""

from __future__ import annotations

import math
from typing import List, Sequence

__all__ = ["SingularMatrixError", "mat_mul", "mat_inverse", "inverse4x4"]

SquareMatrix = List[List[float]]

_DET_EPSILON = 1.1755e-38


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix cannot be inverted."""


def _check_square(a: Sequence[Sequence[float]], name: str) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError(f"{name} must be a square matrix")
    return n


def _zeros(n: int) -> SquareMatrix:
    return [[0.0] * n for _ in range(n)]


def _identity(n: int) -> SquareMatrix:
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def mat_mul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> SquareMatrix:
    """Return the product ``a * b`` of two square matrices of the same size."""
    n = _check_square(a, "a")
    if _check_square(b, "b") != n:
        raise ValueError("matrices must have the same dimension")
    columns = list(zip(*b))
    return [
        [float(sum(x * y for x, y in zip(row, col))) for col in columns]
        for row in a
    ]


def _pivot(a: Sequence[Sequence[float]]) -> SquareMatrix:
    """Build a permutation matrix moving the largest column entries onto the diagonal."""
    n = len(a)
    pivot = _identity(n)
    for i in range(n):
        max_j = i
        for j in range(i, n):
            if abs(a[j][i]) > abs(a[max_j][i]):
                max_j = j
        if max_j != i:
            pivot[i], pivot[max_j] = pivot[max_j], pivot[i]
    return pivot


def _lu_decompose(
    a: Sequence[Sequence[float]],
) -> tuple[SquareMatrix, SquareMatrix, SquareMatrix]:
    """Decompose so that ``P * A = L * U``; returns ``(L, U, P)``."""
    n = len(a)
    p = _pivot(a)
    a_prime = mat_mul(p, a)
    lower = _identity(n)
    upper = _zeros(n)
    for i in range(n):
        for j in range(n):
            if j <= i:
                upper[j][i] = a_prime[j][i] - sum(
                    lower[j][k] * upper[k][i] for k in range(j)
                )
            if j >= i:
                value = a_prime[j][i] - sum(
                    lower[j][k] * upper[k][i] for k in range(i)
                )
                lower[j][i] = value / upper[i][i]
    return lower, upper, p


def _forward_sub(lower: SquareMatrix) -> SquareMatrix:
    """Invert a lower triangular matrix by forward substitution."""
    n = len(lower)
    out = _zeros(n)
    for i in range(n):
        out[i][i] = 1.0 / lower[i][i]
        for j in range(i + 1, n):
            acc = out[j][i] - sum(lower[j][k] * out[k][i] for k in range(i, j))
            out[j][i] = acc / lower[j][j]
    return out


def _back_sub(upper: SquareMatrix) -> SquareMatrix:
    """Invert an upper triangular matrix by backward substitution."""
    n = len(upper)
    out = _zeros(n)
    for i in reversed(range(n)):
        out[i][i] = 1.0 / upper[i][i]
        for j in reversed(range(i)):
            acc = out[j][i] - sum(
                upper[j][k] * out[k][i] for k in range(i, j, -1)
            )
            out[j][i] = acc / upper[j][j]
    return out


def mat_inverse(a: Sequence[Sequence[float]]) -> SquareMatrix:
    """Invert a square matrix by LU decomposition.

    Raises :class:`SingularMatrixError` if the result is not finite.
    """
    _check_square(a, "a")
    try:
        lower, upper, p = _lu_decompose(a)
        lower_inv = _forward_sub(lower)
        upper_inv = _back_sub(upper)
    except ZeroDivisionError as exc:
        raise SingularMatrixError("matrix is singular") from exc
    result = mat_mul(mat_mul(upper_inv, lower_inv), p)
    if not all(math.isfinite(x) for row in result for x in row):
        raise SingularMatrixError("matrix is singular")
    return result


def inverse4x4(m: Sequence[float]) -> List[float]:
    """Invert a 4x4 matrix given as 16 row-major values; returns 16 values."""
    if len(m) != 16:
        raise ValueError("expected 16 values for a 4x4 matrix")
    inv = [0.0] * 16

    inv[0] = (m[5] * m[10] * m[15] - m[5] * m[11] * m[14] - m[9] * m[6] * m[15]
              + m[9] * m[7] * m[14] + m[13] * m[6] * m[11] - m[13] * m[7] * m[10])
    inv[4] = (-m[4] * m[10] * m[15] + m[4] * m[11] * m[14] + m[8] * m[6] * m[15]
              - m[8] * m[7] * m[14] - m[12] * m[6] * m[11] + m[12] * m[7] * m[10])
    inv[8] = (m[4] * m[9] * m[15] - m[4] * m[11] * m[13] - m[8] * m[5] * m[15]
              + m[8] * m[7] * m[13] + m[12] * m[5] * m[11] - m[12] * m[7] * m[9])
    inv[12] = (-m[4] * m[9] * m[14] + m[4] * m[10] * m[13] + m[8] * m[5] * m[14]
               - m[8] * m[6] * m[13] - m[12] * m[5] * m[10] + m[12] * m[6] * m[9])
    inv[1] = (-m[1] * m[10] * m[15] + m[1] * m[11] * m[14] + m[9] * m[2] * m[15]
              - m[9] * m[3] * m[14] - m[13] * m[2] * m[11] + m[13] * m[3] * m[10])
    inv[5] = (m[0] * m[10] * m[15] - m[0] * m[11] * m[14] - m[8] * m[2] * m[15]
              + m[8] * m[3] * m[14] + m[12] * m[2] * m[11] - m[12] * m[3] * m[10])
    inv[9] = (-m[0] * m[9] * m[15] + m[0] * m[11] * m[13] + m[8] * m[1] * m[15]
              - m[8] * m[3] * m[13] - m[12] * m[1] * m[11] + m[12] * m[3] * m[9])
    inv[13] = (m[0] * m[9] * m[14] - m[0] * m[10] * m[13] - m[8] * m[1] * m[14]
               + m[8] * m[2] * m[13] + m[12] * m[1] * m[10] - m[12] * m[2] * m[9])
    inv[2] = (m[1] * m[6] * m[15] - m[1] * m[7] * m[14] - m[5] * m[2] * m[15]
              + m[5] * m[3] * m[14] + m[13] * m[2] * m[7] - m[13] * m[3] * m[6])
    inv[6] = (-m[0] * m[6] * m[15] + m[0] * m[7] * m[14] + m[4] * m[2] * m[15]
              - m[4] * m[3] * m[14] - m[12] * m[2] * m[7] + m[12] * m[3] * m[6])
    inv[10] = (m[0] * m[5] * m[15] - m[0] * m[7] * m[13] - m[4] * m[1] * m[15]
               + m[4] * m[3] * m[13] + m[12] * m[1] * m[7] - m[12] * m[3] * m[5])
    inv[14] = (-m[0] * m[5] * m[14] + m[0] * m[6] * m[13] + m[4] * m[1] * m[14]
               - m[4] * m[2] * m[13] - m[12] * m[1] * m[6] + m[12] * m[2] * m[5])
    inv[3] = (-m[1] * m[6] * m[11] + m[1] * m[7] * m[10] + m[5] * m[2] * m[11]
              - m[5] * m[3] * m[10] - m[9] * m[2] * m[7] + m[9] * m[3] * m[6])
    inv[7] = (m[0] * m[6] * m[11] - m[0] * m[7] * m[10] - m[4] * m[2] * m[11]
              + m[4] * m[3] * m[10] + m[8] * m[2] * m[7] - m[8] * m[3] * m[6])
    inv[11] = (-m[0] * m[5] * m[11] + m[0] * m[7] * m[9] + m[4] * m[1] * m[11]
               - m[4] * m[3] * m[9] - m[8] * m[1] * m[7] + m[8] * m[3] * m[5])
    inv[15] = (m[0] * m[5] * m[10] - m[0] * m[6] * m[9] - m[4] * m[1] * m[10]
               + m[4] * m[2] * m[9] + m[8] * m[1] * m[6] - m[8] * m[2] * m[5])

    det = m[0] * inv[0] + m[1] * inv[4] + m[2] * inv[8] + m[3] * inv[12]
    if abs(det) < _DET_EPSILON:
        raise SingularMatrixError("matrix is singular")
    scale = 1.0 / det
    return [float(x * scale) for x in inv]