import numpy as np
import pytest

from liegroups.factors import (
    Constraint,
    Objective,
    local_plus,
    sqrt_information_upper,
)
from liegroups.so2 import SO2, SO2Tangent


def _random_spd(n, seed):
    rng = np.random.default_rng(seed)
    a = rng.normal(size=(n, n))
    return a @ a.T + n * np.eye(n)


def test_sqrt_information_of_identity_is_identity():
    assert np.allclose(sqrt_information_upper(np.eye(3)), np.eye(3))


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sqrt_information_reproduces_information(seed):
    cov = _random_spd(3, seed)
    r = sqrt_information_upper(cov)
    assert np.allclose(r.T @ r, np.linalg.inv(cov), atol=1e-10)
    assert np.allclose(np.tril(r, -1), 0.0)


def test_sqrt_information_falls_back_on_indefinite_matrix():
    cov = np.diag([1.0, -1.0])
    r = sqrt_information_upper(cov)
    assert np.allclose(r.T @ r, np.diag([1.0, 1e-6]), atol=1e-12)


def test_sqrt_information_rejects_non_square():
    with pytest.raises(ValueError):
        sqrt_information_upper(np.ones((2, 3)))


def test_local_plus_zero_is_identity_update():
    state = SO2.from_angle(0.7)
    assert local_plus(state, SO2Tangent.zero()).is_approx(state)


def test_local_plus_inverts_minus():
    a = SO2.from_angle(0.3)
    b = SO2.from_angle(-1.1)
    assert local_plus(a, b - a).is_approx(b, 1e-12)


def test_local_plus_accepts_raw_coefficients():
    state = SO2.from_angle(0.4)
    delta = SO2Tangent(0.25)
    assert local_plus(state, [0.25]).is_approx(local_plus(state, delta))


def test_constraint_default_covariance_is_identity():
    c = Constraint(SO2Tangent(0.1))
    assert np.allclose(c.covariance(), np.eye(1))
    assert np.allclose(c.sqrt_information(), np.eye(1))


def test_constraint_zero_residual_for_exact_measurement():
    past = SO2.from_angle(0.2)
    future = SO2.from_angle(0.9)
    c = Constraint(future - past)
    assert np.allclose(c.residuals(past, future), 0.0, atol=1e-12)


def test_constraint_residual_with_identity_covariance():
    past = SO2.from_angle(0.2)
    future = SO2.from_angle(0.9)
    m = SO2Tangent(0.1)
    c = Constraint(m)
    expected = (m - (future - past)).coeffs()
    assert np.allclose(c.residuals(past, future), expected)


def test_constraint_residual_scales_with_covariance():
    past = SO2.from_angle(-0.4)
    future = SO2.from_angle(0.5)
    m = SO2Tangent(0.3)
    plain = Constraint(m).residuals(past, future)
    weighted = Constraint(m, np.array([[4.0]])).residuals(past, future)
    assert np.allclose(weighted, plain / 2.0)


def test_set_covariance_symmetrizes_from_upper():
    c = Constraint(SO2Tangent(0.0))
    c.set_covariance(np.array([[3.0]]))
    assert np.allclose(c.covariance(), [[3.0]])
    r = c.sqrt_information()
    assert np.allclose(r.T @ r, [[1.0 / 3.0]])


def test_set_covariance_rejects_wrong_shape():
    c = Constraint(SO2Tangent(0.0))
    with pytest.raises(ValueError):
        c.set_covariance(np.eye(2))


def test_constraint_rejects_wrong_shape_covariance():
    with pytest.raises(ValueError):
        Constraint(SO2Tangent(0.0), np.eye(3))


def test_set_measurement_changes_residual():
    past = SO2.from_angle(0.0)
    future = SO2.from_angle(0.6)
    c = Constraint(SO2Tangent(0.0))
    c.set_measurement(future - past)
    assert c.measurement().is_approx(future - past)
    assert np.allclose(c.residuals(past, future), 0.0, atol=1e-12)


def test_objective_zero_at_target():
    target = SO2.from_angle(1.2)
    assert Objective(target).residual(target) == pytest.approx(0.0, abs=1e-12)


def test_objective_matches_distance():
    target = SO2.from_angle(1.2)
    state = SO2.from_angle(-0.3)
    expected = np.linalg.norm((target - state).coeffs())
    assert Objective(target).residual(state) == pytest.approx(expected)


def test_objective_weight_scales_residual():
    target = SO2.from_angle(0.8)
    state = SO2.from_angle(0.1)
    base = Objective(target).residual(state)
    assert Objective(target, 2.5).residual(state) == pytest.approx(2.5 * base)
    assert Objective(target).weight == 1.0