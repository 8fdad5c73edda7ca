"""Scalar limiting, angle conversion and stick-shaping helpers."""

from __future__ import annotations

import math
from typing import TypeVar

_T = TypeVar("_T", int, float)

__all__ = [
    "constrain",
    "radians",
    "degrees",
    "sign",
    "expo",
    "deadzone",
    "expo_deadzone",
    "wrap_pi",
]


def constrain(val: _T, min_val: _T, max_val: _T) -> _T:
    """Clamp ``val`` to the closed interval ``[min_val, max_val]``."""
    if val < min_val:
        return min_val
    if val > max_val:
        return max_val
    return val


def radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return (degrees / 180.0) * math.pi


def degrees(radians: float) -> float:
    """Convert an angle from radians to degrees."""
    return (radians / math.pi) * 180.0


def sign(val: float) -> int:
    """Return 1 for positive, -1 for negative and 0 for zero input."""
    return int(val > 0) - int(val < 0)


def expo(value: float, e: float) -> float:
    """Blend a linear and a cubic response; input is clamped to [-1, 1]."""
    x = constrain(value, -1.0, 1.0)
    return (1 - e) * x + e * x * x * x


def deadzone(value: float, dz: float) -> float:
    """Zero the input around the centre and rescale the rest to stay continuous."""
    x = constrain(value, -1.0, 1.0)
    if abs(x) <= dz:
        return 0.0
    return (x - sign(x) * dz) / (1 - dz)


def expo_deadzone(value: float, e: float, dz: float) -> float:
    """Apply a deadzone followed by an expo curve."""
    x = constrain(value, -1.0, 1.0)
    return expo(deadzone(x, dz), e)


def wrap_pi(x: float) -> float:
    """Wrap an angle into ``[-pi, pi)``; non-finite values pass through."""
    if not math.isfinite(x):
        return x
    while x >= math.pi:
        x -= 2.0 * math.pi
    while x < -math.pi:
        x += 2.0 * math.pi
    return x