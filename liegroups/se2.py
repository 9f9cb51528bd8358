"""The rigid-motion group SE(2) and its tangent space se(2)."""

from __future__ import annotations

import math
from numbers import Real

import numpy as np

from liegroups.so2 import EPS, EPS_S

DIM = 2
DOF = 3
REP_SIZE = 4

_GENERATORS = (
    np.array([[0.0, 0.0, 1.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]),
    np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 0.0, 0.0]]),
    np.array([[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 0.0]]),
)

_WEIGHT = np.diag([1.0, 1.0, 2.0])


class SE2:
    """An element of SE(2): a translation and a unit complex number."""

    __slots__ = ("_data",)

    def __init__(self, x: float, y: float, real: float, imag: float) -> None:
        real = float(real)
        imag = float(imag)
        if not abs(math.hypot(real, imag) - 1.0) < EPS_S:
            raise ValueError("SE2 constructor argument not normalized!")
        self._data = np.array([float(x), float(y), real, imag])

    @classmethod
    def from_angle(cls, x: float, y: float, theta: float) -> SE2:
        """Build from a translation and a rotation angle (rad.)."""
        return cls(x, y, math.cos(theta), math.sin(theta))

    @classmethod
    def from_complex(cls, translation, c: complex) -> SE2:
        """Build from a 2-vector translation and a unit complex number."""
        t = np.asarray(translation, dtype=float).reshape(-1)
        if t.shape != (DIM,):
            raise ValueError("Translation must be of dimension 2!")
        c = complex(c)
        return cls(t[0], t[1], c.real, c.imag)

    @classmethod
    def from_coeffs(cls, data) -> SE2:
        """Build from the coefficients ``(x, y, real, imag)``."""
        d = np.asarray(data, dtype=float).reshape(-1)
        if d.shape != (REP_SIZE,):
            raise ValueError("SE2 coefficients must be of size 4!")
        return cls(*d)

    @classmethod
    def from_isometry(cls, matrix) -> SE2:
        """Build from a 3x3 homogeneous 2D isometry matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (3, 3):
            raise ValueError("Isometry must be a 3x3 matrix!")
        theta = math.atan2(m[1, 0], m[0, 0])
        return cls.from_angle(m[0, 2], m[1, 2], theta)

    @classmethod
    def identity(cls) -> SE2:
        return cls(0.0, 0.0, 1.0, 0.0)

    def coeffs(self) -> np.ndarray:
        return self._data.copy()

    def x(self) -> float:
        return float(self._data[0])

    def y(self) -> float:
        return float(self._data[1])

    def real(self) -> float:
        return float(self._data[2])

    def imag(self) -> float:
        return float(self._data[3])

    def angle(self) -> float:
        return math.atan2(self.imag(), self.real())

    def is_approx(self, other: SE2, tol: float = EPS) -> bool:
        if not isinstance(other, SE2):
            raise TypeError("SE2 can only be compared with SE2")
        return bool(np.all(np.abs(self._data - other._data) <= tol))

    def __eq__(self, other):
        if not isinstance(other, SE2):
            return NotImplemented
        return self.is_approx(other)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SE2(x={self.x()!r}, y={self.y()!r}, "
            f"real={self.real()!r}, imag={self.imag()!r})"
        )


def _sinc_terms(theta: float) -> tuple[float, float, bool]:
    """Return sin(t)/t, (1-cos(t))/t and whether the Taylor branch was used."""
    theta_sq = theta * theta
    if theta_sq < EPS_S:
        a = 1.0 - theta_sq / 6.0
        b = 0.5 * theta - theta * theta_sq / 24.0
        return a, b, True
    return math.sin(theta) / theta, (1.0 - math.cos(theta)) / theta, False


class SE2Tangent:
    """An element of the tangent space of SE(2): ``(x, y, angle)``."""

    __slots__ = ("_data",)

    def __init__(self, x: float, y: float, angle: float) -> None:
        self._data = np.array([float(x), float(y), float(angle)])

    @classmethod
    def _from_data(cls, data) -> SE2Tangent:
        return cls(*_tangent_data(data))

    @classmethod
    def zero(cls) -> SE2Tangent:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> SE2Tangent:
        """Random translation in [-1, 1] and random angle in [-pi, pi]."""
        gen = rng if rng is not None else np.random.default_rng()
        x, y, a = gen.uniform(-1.0, 1.0, size=DOF)
        return cls(x, y, a * math.pi)

    @classmethod
    def generator(cls, i: int) -> np.ndarray:
        if i not in (0, 1, 2):
            raise ValueError("Index i must be in [0,2]!")
        return _GENERATORS[i].copy()

    @classmethod
    def weight_matrix(cls) -> np.ndarray:
        """The inner-product weight matrix of se(2)."""
        return _WEIGHT.copy()

    def coeffs(self) -> np.ndarray:
        return self._data.copy()

    def x(self) -> float:
        return float(self._data[0])

    def y(self) -> float:
        return float(self._data[1])

    def angle(self) -> float:
        return float(self._data[2])

    def hat(self) -> np.ndarray:
        """The Lie algebra element as a 3x3 matrix."""
        x, y, theta = self.x(), self.y(), self.angle()
        return np.array([[0.0, -theta, x], [theta, 0.0, y], [0.0, 0.0, 0.0]])

    def exp(self, jacobian: bool = False):
        """The exponential map; with ``jacobian`` also the right Jacobian."""
        x, y, theta = self.x(), self.y(), self.angle()
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        a, b, taylor = _sinc_terms(theta)
        result = SE2(a * x - b * y, b * x + a * y, cos_t, sin_t)
        if not jacobian:
            return result
        jr = np.eye(DOF)
        jr[0, 0] = a
        jr[0, 1] = b
        jr[1, 0] = -b
        jr[1, 1] = a
        if taylor:
            jr[0, 2] = -y / 2.0 + theta * x / 6.0
            jr[1, 2] = x / 2.0 + theta * y / 6.0
        else:
            theta_sq = theta * theta
            jr[0, 2] = (-y + theta * x + y * cos_t - x * sin_t) / theta_sq
            jr[1, 2] = (x + theta * y - x * cos_t - y * sin_t) / theta_sq
        return result, jr

    def rjac(self) -> np.ndarray:
        return self.exp(jacobian=True)[1]

    def ljac(self) -> np.ndarray:
        x, y, theta = self.x(), self.y(), self.angle()
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        a, b, taylor = _sinc_terms(theta)
        jl = np.eye(DOF)
        jl[0, 0] = a
        jl[0, 1] = -b
        jl[1, 0] = b
        jl[1, 1] = a
        if taylor:
            jl[0, 2] = y / 2.0 + theta * x / 6.0
            jl[1, 2] = -x / 2.0 + theta * y / 6.0
        else:
            theta_sq = theta * theta
            jl[0, 2] = (y + theta * x - y * cos_t - x * sin_t) / theta_sq
            jl[1, 2] = (-x + theta * y + x * cos_t - y * sin_t) / theta_sq
        return jl

    def small_adj(self) -> np.ndarray:
        m = np.zeros((DOF, DOF))
        m[0, 1] = -self.angle()
        m[1, 0] = self.angle()
        m[0, 2] = self.y()
        m[1, 2] = -self.x()
        return m

    def is_approx(self, other, tol: float = EPS) -> bool:
        return bool(np.all(np.abs(self._data - _tangent_data(other)) <= tol))

    def __add__(self, other):
        try:
            return SE2Tangent._from_data(self._data + _tangent_data(other))
        except (TypeError, ValueError):
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        try:
            return SE2Tangent._from_data(self._data - _tangent_data(other))
        except (TypeError, ValueError):
            return NotImplemented

    def __rsub__(self, other):
        try:
            return SE2Tangent._from_data(_tangent_data(other) - self._data)
        except (TypeError, ValueError):
            return NotImplemented

    def __neg__(self) -> SE2Tangent:
        return SE2Tangent._from_data(-self._data)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return SE2Tangent._from_data(self._data * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return SE2Tangent._from_data(self._data / float(scalar))

    def __eq__(self, other):
        if not isinstance(other, SE2Tangent):
            return NotImplemented
        return self.is_approx(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SE2Tangent(x={self.x()!r}, y={self.y()!r}, angle={self.angle()!r})"


def _tangent_data(value) -> np.ndarray:
    if isinstance(value, SE2Tangent):
        return value._data
    data = np.asarray(value, dtype=float).reshape(-1)
    if data.shape != (DOF,):
        raise ValueError("Expected three tangent coefficients")
    return data