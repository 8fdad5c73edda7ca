import math

import pytest

from navmath.matrix import Matrix
from navmath.matrix_alg import SingularMatrixError
from navmath.vector import Vector

DCM_CHECK = [
    [0.93629336, -0.27509585, 0.21835066],
    [0.28962948, 0.95642509, -0.03695701],
    [-0.19866933, 0.0978434, 0.97517033],
]


def assert_matrix_close(a, b, tol=1e-6):
    assert a.shape == b.shape
    rows, cols = a.shape
    for i in range(rows):
        for j in range(cols):
            assert a[i, j] == pytest.approx(b[i, j], abs=tol)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        Matrix([])


def test_shape_and_element_access():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    assert m.shape == (2, 3)
    assert m[1, 2] == 6.0
    assert m[0] == Vector(1, 2, 3)
    m[0, 1] = 9
    assert m[0, 1] == 9.0


def test_zeros_and_identity():
    assert Matrix.zeros(2, 3) == Matrix([[0, 0, 0], [0, 0, 0]])
    assert Matrix.identity(2, 3) == Matrix([[1, 0, 0], [0, 1, 0]])


def test_add_sub_neg_round_trip():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[0.5, -1], [2, 8]])
    assert (a + b) - b == a
    assert a + (-a) == Matrix.zeros(2, 2)


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix.zeros(2, 2) + Matrix.zeros(2, 3)
    with pytest.raises(ValueError):
        Matrix.zeros(2, 3) * Matrix.zeros(2, 3)
    with pytest.raises(ValueError):
        Matrix.zeros(2, 3) * Vector(1, 2)


def test_scalar_mul_div_round_trip():
    a = Matrix([[1, 2], [3, 4]])
    assert (a * 4) / 4 == a


def test_identity_is_neutral_for_products():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    assert Matrix.identity(2, 2) * a == a
    assert a * Matrix.identity(3, 3) == a
    v = Vector(7, -1, 2)
    assert Matrix.identity(3, 3) * v == v


def test_matrix_vector_product_matches_rows():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    v = Vector(0.5, -1.0, 2.0)
    result = a * v
    assert result == Vector(a[0].dot(v), a[1].dot(v))


def test_transpose_of_product():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    b = Matrix([[1, 0], [2, -1], [0.5, 3]])
    assert (a * b).transposed() == b.transposed() * a.transposed()
    assert a.transposed().transposed() == a


def test_inverse_times_self_is_identity():
    a = Matrix([[4, 7, 2], [3, 6, 1], [2, 5, 3]])
    assert_matrix_close(a * a.inversed(), Matrix.identity(3, 3), 1e-9)


def test_inverse_of_singular_raises():
    with pytest.raises(SingularMatrixError):
        Matrix([[1, 2], [2, 4]]).inversed()


def test_inverse_of_non_square_raises():
    with pytest.raises(ValueError):
        Matrix.zeros(2, 3).inversed()


def test_set_row_and_col():
    m = Matrix.zeros(2, 3)
    m.set_row(0, Vector(1, 2, 3))
    m.set_col(2, [7, 8])
    assert m == Matrix([[1, 2, 7], [0, 0, 8]])
    with pytest.raises(ValueError):
        m.set_row(1, [1, 2])


def test_zero_and_set_identity():
    m = Matrix([[5, 6, 7], [8, 9, 10]])
    m.set_identity()
    assert m == Matrix.identity(2, 3)
    m.zero()
    assert m == Matrix.zeros(2, 3)


def test_from_euler_matches_reference_dcm():
    dcm = Matrix.from_euler(0.1, 0.2, 0.3)
    assert_matrix_close(dcm, Matrix(DCM_CHECK), 1e-6)


def test_reference_dcm_to_euler():
    euler = Matrix(DCM_CHECK).to_euler()
    assert list(euler) == pytest.approx([0.1, 0.2, 0.3], abs=1e-6)


def test_rotation_matrix_is_orthonormal():
    r = Matrix.from_euler(0.7, -0.4, 2.1)
    assert_matrix_close(r * r.transposed(), Matrix.identity(3, 3), 1e-12)
    assert_matrix_close(r.inversed(), r.transposed(), 1e-9)


@pytest.mark.parametrize(
    "roll,pitch,yaw",
    [(0.0, 0.0, 0.0), (0.3, -0.5, 1.2), (-1.0, 0.9, -2.5), (1.5, 0.2, 3.0)],
)
def test_euler_round_trip(roll, pitch, yaw):
    angles = Matrix.from_euler(roll, pitch, yaw).to_euler()
    assert list(angles) == pytest.approx([roll, pitch, yaw], abs=1e-9)


def test_gimbal_lock_sets_roll_to_zero():
    roll, yaw = 0.3, 0.8
    angles = Matrix.from_euler(roll, math.pi / 2, yaw).to_euler()
    assert angles[0] == 0.0
    assert angles[1] == pytest.approx(math.pi / 2, abs=1e-6)
    assert angles[2] == pytest.approx(yaw - roll, abs=1e-9)


def test_to_euler_requires_3x3():
    with pytest.raises(ValueError):
        Matrix.identity(2, 2).to_euler()


def test_str_format():
    assert str(Matrix([[1, 2], [3, 4]])) == "[ 1.000\t2.000\t ]\n[ 3.000\t4.000\t ]"