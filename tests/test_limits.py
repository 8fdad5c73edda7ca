import math

import pytest

from navmath.limits import (
    constrain,
    deadzone,
    degrees,
    expo,
    expo_deadzone,
    radians,
    sign,
    wrap_pi,
)


@pytest.mark.parametrize(
    "val, lo, hi, expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (12, 0, 10, 10), (0.5, 0.5, 2.0, 0.5)],
)
def test_constrain(val, lo, hi, expected):
    assert constrain(val, lo, hi) == expected


def test_radians_of_half_turn_is_pi():
    assert radians(180.0) == pytest.approx(math.pi)


def test_degrees_of_pi_is_half_turn():
    assert degrees(math.pi) == pytest.approx(180.0)


@pytest.mark.parametrize("angle", [-720.0, -90.0, 0.0, 33.3, 359.0])
def test_degree_radian_round_trip(angle):
    assert degrees(radians(angle)) == pytest.approx(angle)


@pytest.mark.parametrize("val, expected", [(-3.5, -1), (0.0, 0), (7, 1), (-0.0, 0)])
def test_sign(val, expected):
    assert sign(val) == expected


@pytest.mark.parametrize("e", [0.0, 0.3, 0.7, 1.0])
def test_expo_endpoints_fixed(e):
    assert expo(1.0, e) == pytest.approx(1.0)
    assert expo(-1.0, e) == pytest.approx(-1.0)


@pytest.mark.parametrize("x", [-0.8, -0.2, 0.25, 0.6])
def test_expo_linear_when_zero_exponent(x):
    assert expo(x, 0.0) == pytest.approx(x)


@pytest.mark.parametrize("x", [0.1, 0.4, 0.9])
def test_expo_is_odd(x):
    assert expo(-x, 0.5) == pytest.approx(-expo(x, 0.5))


def test_expo_clamps_input():
    assert expo(5.0, 0.4) == pytest.approx(expo(1.0, 0.4))
    assert expo(-5.0, 0.4) == pytest.approx(expo(-1.0, 0.4))


@pytest.mark.parametrize("x", [-0.1, 0.0, 0.05, 0.1])
def test_deadzone_zero_inside(x):
    assert deadzone(x, 0.1) == 0.0


def test_deadzone_full_scale_preserved():
    assert deadzone(1.0, 0.2) == pytest.approx(1.0)
    assert deadzone(-1.0, 0.2) == pytest.approx(-1.0)
    assert deadzone(3.0, 0.2) == pytest.approx(1.0)


def test_deadzone_continuous_at_edge():
    assert abs(deadzone(0.2 + 1e-9, 0.2)) < 1e-6
    assert abs(deadzone(-0.2 - 1e-9, 0.2)) < 1e-6


def test_deadzone_monotonic():
    xs = [i / 20 - 1 for i in range(41)]
    ys = [deadzone(x, 0.3) for x in xs]
    assert all(a <= b for a, b in zip(ys, ys[1:]))


def test_expo_deadzone_composes():
    for x in (-0.9, -0.3, 0.05, 0.5, 2.0):
        assert expo_deadzone(x, 0.4, 0.1) == pytest.approx(expo(deadzone(x, 0.1), 0.4))


def test_expo_deadzone_zero_inside_deadzone():
    assert expo_deadzone(0.05, 0.6, 0.1) == 0.0


@pytest.mark.parametrize("x", [-10.0, -math.pi, -1.0, 0.0, 3.0, math.pi, 7.5, 100.0])
def test_wrap_pi_range_and_equivalence(x):
    w = wrap_pi(x)
    assert -math.pi <= w < math.pi
    turns = (x - w) / (2 * math.pi)
    assert turns == pytest.approx(round(turns), abs=1e-9)


def test_wrap_pi_maps_pi_to_minus_pi():
    assert wrap_pi(math.pi) == pytest.approx(-math.pi)


def test_wrap_pi_leaves_in_range_value():
    assert wrap_pi(1.25) == 1.25


def test_wrap_pi_non_finite_passthrough():
    assert wrap_pi(math.inf) == math.inf
    assert wrap_pi(-math.inf) == -math.inf
    assert math.isnan(wrap_pi(math.nan))