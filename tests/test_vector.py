import math

import pytest

from navmath.vector import Vector


def test_construction_forms_agree():
    assert Vector(1, 2, 3) == Vector([1, 2, 3])
    assert list(Vector((4.0, 5.0))) == [4.0, 5.0]


def test_empty_vector_rejected():
    with pytest.raises(ValueError):
        Vector()


def test_len_and_indexing():
    v = Vector(1, 2, 3, 4)
    assert len(v) == 4
    v[2] = 7
    assert v[2] == 7.0
    assert v[-1] == 4.0


def test_equality_is_exact_and_size_aware():
    assert Vector(1, 2) != Vector(1, 2.0000001)
    assert Vector(1, 2) != Vector(1, 2, 0)


def test_negation_and_subtraction_round_trip():
    a = Vector(1.5, -2.0, 3.25)
    b = Vector(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a + (-a) == Vector(0, 0, 0)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vector(1, 2) + Vector(1, 2, 3)
    with pytest.raises(ValueError):
        Vector(1, 2).dot(Vector(1, 2, 3))


def test_scalar_multiplication_both_sides_and_division():
    v = Vector(1, 2, 3, 4)
    assert 0.5 * v == v * 0.5
    assert (v * 2) / 2 == v


def test_mul_by_vector_is_dot_product():
    a = Vector(1, 2, 3)
    b = Vector(4, 5, 6)
    assert a * b == a.dot(b)
    assert a.dot(b) == sum(a.emult(b))


def test_emult_edivide_round_trip():
    a = Vector(1.0, -3.0, 8.0)
    b = Vector(2.0, 4.0, 0.5)
    assert a.emult(b).edivide(b) == a


def test_cross_product_3d_is_perpendicular_and_anticommutative():
    a = Vector(1.5, 2.2, 3.2)
    b = Vector(-0.4, 1.0, 2.5)
    c = a % b
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)
    assert b % a == -c


def test_cross_product_of_basis_vectors():
    assert Vector(1, 0, 0) % Vector(0, 1, 0) == Vector(0, 0, 1)


def test_cross_product_2d_is_scalar_and_antisymmetric():
    a = Vector(3, 1)
    b = Vector(-2, 5)
    assert a % b == -(b % a)
    assert a % a == 0.0


def test_cross_product_unsupported_size():
    with pytest.raises(ValueError):
        Vector(1, 2, 3, 4) % Vector(4, 3, 2, 1)


def test_length():
    v = Vector(3, 4)
    assert v.length() == 5.0
    assert v.length_squared() == v.length() ** 2


def test_normalized_has_unit_length_and_keeps_original():
    v = Vector(1, 2, 3, 4)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v == Vector(1, 2, 3, 4)
    assert n * v.length() == pytest.approx(list(v)) or all(
        math.isclose(x, y) for x, y in zip(n * v.length(), v)
    )


def test_normalize_in_place():
    v = Vector(0.0, -2.0, 0.0)
    v.normalize()
    assert v == Vector(0.0, -1.0, 0.0)


def test_zero():
    v = Vector(1, 2, 3)
    v.zero()
    assert v == Vector(0, 0, 0)


def test_str_format():
    assert str(Vector(1, 2)) == "[ 1.000\t2.000\t]"