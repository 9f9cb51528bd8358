"""Residual blocks for least-squares problems on Lie groups.

A :class:`Constraint` measures the discrepancy between a measured
relative motion and the motion between two states. An
:class:`Objective` measures the distance of a state to a target.
:func:`local_plus` is the manifold update ``state (+) delta``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from liegroups.so2 import SO2, SO2Tangent

_APPROX_PRECISION = 1e-6
_MIN_EIGENVALUE = 1e-6


def _symmetric_from_upper(matrix: np.ndarray) -> np.ndarray:
    """Mirror the upper triangle of ``matrix`` onto its lower triangle."""
    upper = np.triu(matrix)
    return upper + np.triu(matrix, 1).T


def _is_approx(a: np.ndarray, b: np.ndarray, precision: float) -> bool:
    diff = np.linalg.norm(a - b)
    return bool(diff <= precision * min(np.linalg.norm(a), np.linalg.norm(b)))


def sqrt_information_upper(covariance) -> np.ndarray:
    """Return ``R`` such that ``R.T @ R`` is the information matrix.

    The information matrix is the inverse of ``covariance``, made
    symmetric from its upper triangle. A Cholesky factor is used when
    it reproduces the information matrix; otherwise a factor is built
    from the eigen-decomposition with eigenvalues clamped from below.
    """
    cov = np.asarray(covariance, dtype=float)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise ValueError("Covariance must be a square matrix")
    info = _symmetric_from_upper(np.linalg.inv(cov))

    try:
        r = np.linalg.cholesky(info).T
    except np.linalg.LinAlgError:
        r = None

    if r is None or not _is_approx(info, r.T @ r, _APPROX_PRECISION):
        eigenvalues, eigenvectors = np.linalg.eigh(info)
        eigenvalues = np.maximum(eigenvalues.real, _MIN_EIGENVALUE)
        r = np.diag(np.sqrt(eigenvalues)) @ eigenvectors.real.T

    return r


def local_plus(state, delta):
    """The manifold update ``state (+) delta``, i.e. ``state * exp(delta)``."""
    if isinstance(state, SO2) and not isinstance(delta, SO2Tangent):
        delta = SO2Tangent(delta)
    result = state + delta
    return result


class Constraint:
    """A relative-motion constraint between two states.

    The residual is ``sqrt_info @ (m - (future (-) past))`` where ``m``
    is the measured tangent and ``sqrt_info`` the upper square root of
    the measurement information matrix.
    """

    def __init__(self, measurement, covariance=None) -> None:
        self._measurement = measurement
        dof = np.asarray(measurement.coeffs()).size
        self._dof = dof
        if covariance is None:
            cov = np.eye(dof)
        else:
            cov = self._checked(covariance)
        self._covariance = cov
        self._sqrt_info = sqrt_information_upper(cov)

    def _checked(self, covariance) -> np.ndarray:
        cov = np.array(covariance, dtype=float)
        if cov.shape != (self._dof, self._dof):
            raise ValueError(
                f"Covariance must be a {self._dof}x{self._dof} matrix"
            )
        return cov

    def measurement(self):
        return self._measurement

    def set_measurement(self, measurement) -> None:
        if np.asarray(measurement.coeffs()).size != self._dof:
            raise ValueError("Measurement has the wrong number of coefficients")
        self._measurement = measurement

    def covariance(self) -> np.ndarray:
        return self._covariance.copy()

    def set_covariance(self, covariance) -> None:
        """Set the covariance, made symmetric from its upper triangle."""
        cov = _symmetric_from_upper(self._checked(covariance))
        self._covariance = cov
        self._sqrt_info = sqrt_information_upper(cov)

    def sqrt_information(self) -> np.ndarray:
        return self._sqrt_info.copy()

    def residuals(self, past, future) -> np.ndarray:
        """Weighted residual vector between ``past`` and ``future``."""
        error = self._measurement - (future - past)
        return self._sqrt_info @ np.asarray(error.coeffs(), dtype=float)


@dataclass
class Objective:
    """Weighted distance of a state to a target state."""

    target: object
    weight: float = 1.0

    def residual(self, state) -> float:
        difference = self.target - state
        return float(np.linalg.norm(difference.coeffs()) * self.weight)