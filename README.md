# navmath

Pure-Python vector, matrix, quaternion and rotation helpers of the kind used
in attitude and navigation estimators. No third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## What is inside

- `navmath.limits`: `constrain`, `radians`, `degrees`, `sign`, `expo`,
  `deadzone`, `expo_deadzone` and `wrap_pi` (folds an angle into
  `[-pi, pi)`, passing non-finite values through).
- `navmath.matrix_alg`: `mat_mul` and `mat_inverse` (LU decomposition with
  pivoting) on square matrices given as nested lists, and `inverse4x4` on a
  flat list of 16 row-major values. A singular input raises
  `SingularMatrixError`; mismatched sizes raise `ValueError`.
- `navmath.vector`: `Vector`, a fixed-size vector of floats with arithmetic,
  `dot` (also `v * w`), cross product with `%` (a float for 2-vectors, a
  vector for 3-vectors), `emult`, `edivide`, `length`, `length_squared`,
  `normalize`, `normalized` and `zero`.
- `navmath.matrix`: `Matrix`, a dense matrix with arithmetic, products with
  matrices and vectors, `set_row`, `set_col`, `transposed`, `inversed`,
  `zeros`, `identity`, and the 3x3 rotation helpers `from_euler` and
  `to_euler`.
- `navmath.quaternion`: `Quaternion` (scalar part first; `Quaternion()` is
  all zeros), with the Hamilton product, division, `conjugated`, `inversed`,
  `derivative`, vector rotation with `conjugate` and `conjugate_inversed`,
  `imag`, and conversions `from_euler`, `from_yaw`, `to_euler`, `from_dcm`
  and `to_dcm`.
- `navmath.dense`: `DenseMatrix` with element-wise `emult`/`edivide`, scalar
  addition and subtraction, `transpose`/`T`, block access with `slice` and
  `set_block`, `swap_rows`, `swap_cols`, `abs`, `max`, `min`, `to_list` and
  `write_string`, plus the helpers `zeros`, `ones`, `eye`, `is_equal` and
  `is_equal_f` (the comparisons print both operands when they differ).
- `navmath.dcm`: `Dcm`, a direction cosine matrix (identity by default)
  built from three rows or nine values, with `from_quaternion`,
  `from_euler` and `vee`.

## Example

```python
from navmath.quaternion import Quaternion
from navmath.dcm import Dcm
from navmath.limits import wrap_pi

q = Quaternion.from_euler(0.1, 0.2, 0.3)
roll, pitch, yaw = q.to_euler()

R = Dcm.from_euler(0.1, 0.2, 0.3)
print(R.vee())

print(wrap_pi(4.0))   # angle folded into [-pi, pi)
```

## What it does not do

This is a library of building blocks only. It has no state estimator or
sensor-fusion filter, reads no sensor data, and provides no command-line
program.