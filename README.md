# liegroups

A small Lie group toolkit for 2D estimation problems, built on numpy.

- `liegroups.so2`: the rotation group SO(2) as `SO2` (a unit complex number)
  and its tangent space as `SO2Tangent` (a single angle), with composition,
  inverse, exponential and logarithm maps, the right plus and minus
  operators, the action on 2-vectors and their Jacobians.
- `liegroups.se2`: the rigid-motion group SE(2) as `SE2` (translation plus
  unit complex number) and its tangent space as `SE2Tangent`
  (`x`, `y`, `angle`), with the exponential map and the closed-form right
  and left Jacobians.
- `liegroups.factors`: residual helpers for least-squares problems:
  `Constraint`, `Objective`, `local_plus` and `sqrt_information_upper`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## SO(2)

```python
import math
import numpy as np
from liegroups.so2 import SO2, SO2Tangent

r = SO2.from_angle(math.pi / 4)
t = SO2Tangent(0.1)

r2 = r + t                    # right plus: r * exp(t)
d = r2 - r                    # right minus: log(r^-1 * r2), an SO2Tangent
assert d.is_approx(t, 1e-12)

r3 = r * r2                   # composition
rel = r.between(r2)           # r^-1 * r2
v = r.act(np.array([1.0, 0.0]))

# Jacobians are returned alongside the result when asked for
inv, J_inv = r.inverse(jacobian=True)
log, J_log = r.log(jacobian=True)
comp, J_a, J_b = r.compose(r2, jacobians=True)
v, J_v_r, J_v_v = r.act([1.0, 0.0], jacobians=True)
g, J_exp = t.exp(jacobian=True)
```

`SO2(real, imag)` raises `ValueError` when the complex number does not have
unit norm; `SO2.normalized()` returns a normalized copy. `SO2.identity()`,
`SO2.random(rng)` and `SO2Tangent.zero()`, `SO2Tangent.random(rng)` build
special elements; `random` takes an optional `numpy.random.Generator`.
`SO2Tangent` supports `+`, `-` (with another tangent or a one-element
array), unary `-`, and multiplication and division by a scalar.
`SO2Tangent.hat()` gives the 2x2 Lie algebra matrix and
`SO2Tangent.generator(0)` its generator; any other index raises `ValueError`.

`==` on both classes is an approximate comparison (`is_approx` with a
tolerance of `1e-10`).

## SE(2)

```python
import math
from liegroups.se2 import SE2, SE2Tangent

pose = SE2.from_angle(1.0, 2.0, math.pi / 2)
pose = SE2.from_complex([1.0, 2.0], 1j)
pose = SE2.from_coeffs([1.0, 2.0, 0.0, 1.0])
print(pose.x(), pose.y(), pose.angle())

twist = SE2Tangent(0.1, 0.0, 0.05)
moved = twist.exp()
moved, J_r = twist.exp(jacobian=True)
J_r = twist.rjac()
J_l = twist.ljac()
A = twist.small_adj()
H = twist.hat()                 # 3x3 Lie algebra matrix
W = SE2Tangent.weight_matrix()  # diag(1, 1, 2)
```

`SE2` can also be built from a 3x3 homogeneous isometry matrix with
`SE2.from_isometry`. Its constructors raise `ValueError` on a complex part
that is not of unit norm. `SE2Tangent` supports the same arithmetic as
`SO2Tangent`, with three coefficients. `SE2Tangent.generator(i)` takes
`i` in `0..2`.

## Residual helpers

```python
import numpy as np
from liegroups.so2 import SO2, SO2Tangent
from liegroups.factors import Constraint, Objective, local_plus

c = Constraint(SO2Tangent(0.2), np.eye(1))
res = c.residuals(SO2.from_angle(0.0), SO2.from_angle(0.2))  # ~ [0.0]

obj = Objective(SO2.from_angle(0.5), 2.0)
cost = obj.residual(SO2.from_angle(0.5))                      # 0.0

x = local_plus(SO2.identity(), SO2Tangent(0.3))
x = local_plus(SO2.identity(), 0.3)                           # plain angle
```

`Constraint.residuals(past, future)` returns
`sqrt_info @ (measurement - (future - past))`. The whitening matrix comes
from `sqrt_information_upper(covariance)`, which returns an `R` with
`R.T @ R` equal to the inverse covariance (made symmetric from its upper
triangle). It uses a Cholesky factor when that is accurate enough and
otherwise an eigen-decomposition with eigenvalues clamped to at least
`1e-6`. `set_covariance` also symmetrizes the new covariance from its
upper triangle; `set_measurement` replaces the measurement.

`Objective` is a dataclass with `target` and `weight`; its `residual` is
the norm of `target - state` times the weight.

## Limitations

- `SE2` holds and reads a pose but has no group operations: there is no
  composition, inverse, logarithm, action on points, plus or minus, and
  no adjoint. Because of this, `Constraint`, `Objective` and `local_plus`
  work with `SO2` states only.
- There are no interpolation, curve-smoothing or averaging algorithms,
  and no filter or solver; the residual helpers only compute residuals.
- The package has no command-line program.