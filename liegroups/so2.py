"""The rotation group SO(2) and its tangent space so(2)."""

from __future__ import annotations

import math
from numbers import Real

import numpy as np

EPS = 1e-10
EPS_S = 1e-15

DIM = 2
DOF = 1
REP_SIZE = 2


def _skew(value: float) -> np.ndarray:
    return np.array([[0.0, -value], [value, 0.0]])


def _as_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


class SO2:
    """An element of SO(2), stored as a unit complex number."""

    __slots__ = ("_data",)

    def __init__(self, real: float, imag: float) -> None:
        real = float(real)
        imag = float(imag)
        if not abs(math.hypot(real, imag) - 1.0) < EPS_S:
            raise ValueError("SO2 constructor argument not normalized!")
        self._data = np.array([real, imag])

    @classmethod
    def from_angle(cls, theta: float) -> SO2:
        """Build the rotation of angle ``theta`` (rad.)."""
        return cls(math.cos(theta), math.sin(theta))

    @classmethod
    def identity(cls) -> SO2:
        return cls(1.0, 0.0)

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> SO2:
        """A random rotation, the exponential of a random tangent."""
        return SO2Tangent.random(rng).exp()

    def coeffs(self) -> np.ndarray:
        return self._data.copy()

    def real(self) -> float:
        return float(self._data[0])

    def imag(self) -> float:
        return float(self._data[1])

    def angle(self) -> float:
        return math.atan2(self.imag(), self.real())

    def rotation(self) -> np.ndarray:
        theta = self.angle()
        c, s = math.cos(theta), math.sin(theta)
        return np.array([[c, -s], [s, c]])

    def transform(self) -> np.ndarray:
        """The 3x3 homogeneous transformation matrix."""
        t = np.eye(3)
        t[:2, :2] = self.rotation()
        return t

    def normalized(self) -> SO2:
        """A copy whose underlying complex number has unit norm."""
        norm = math.hypot(self.real(), self.imag())
        return SO2(self.real() / norm, self.imag() / norm)

    def inverse(self, jacobian: bool = False):
        """The inverse; with ``jacobian`` also its Jacobian wrt this."""
        result = SO2(self.real(), -self.imag())
        if jacobian:
            return result, np.full((DOF, DOF), -1.0)
        return result

    def log(self, jacobian: bool = False):
        """The logarithmic map; with ``jacobian`` also its Jacobian."""
        result = SO2Tangent(self.angle())
        if jacobian:
            return result, np.ones((DOF, DOF))
        return result

    def compose(self, other: SO2, jacobians: bool = False):
        """``self * other``; with ``jacobians`` also both Jacobians."""
        if not isinstance(other, SO2):
            raise TypeError("SO2 can only be composed with SO2")
        lr, li = self.real(), self.imag()
        rr, ri = other.real(), other.imag()
        result = SO2(lr * rr - li * ri, lr * ri + li * rr)
        if jacobians:
            return result, np.ones((DOF, DOF)), np.ones((DOF, DOF))
        return result

    def act(self, v, jacobians: bool = False):
        """Rotate a 2-vector; with ``jacobians`` also wrt this and wrt ``v``."""
        vec = np.asarray(v, dtype=float).reshape(-1)
        if vec.shape != (DIM,):
            raise ValueError("Vector must be of dimension 2!")
        rot = self.rotation()
        result = rot @ vec
        if jacobians:
            j_m = (rot @ _skew(1.0) @ vec).reshape(DIM, DOF)
            return result, j_m, rot.copy()
        return result

    def adj(self) -> np.ndarray:
        return np.ones((DOF, DOF))

    def rplus(self, tangent: SO2Tangent) -> SO2:
        return self.compose(tangent.exp())

    def rminus(self, other: SO2) -> SO2Tangent:
        return other.inverse().compose(self).log()

    def between(self, other: SO2) -> SO2:
        return self.inverse().compose(other)

    def is_approx(self, other: SO2, tol: float = EPS) -> bool:
        return bool(np.all(np.abs(self.rminus(other).coeffs()) <= tol))

    def __mul__(self, other):
        if not isinstance(other, SO2):
            return NotImplemented
        return self.compose(other)

    def __add__(self, tangent):
        if not isinstance(tangent, SO2Tangent):
            return NotImplemented
        return self.rplus(tangent)

    def __sub__(self, other):
        if not isinstance(other, SO2):
            return NotImplemented
        return self.rminus(other)

    def __eq__(self, other):
        if not isinstance(other, SO2):
            return NotImplemented
        return self.is_approx(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SO2(real={self.real()!r}, imag={self.imag()!r})"


class SO2Tangent:
    """An element of the tangent space of SO(2): a single angle."""

    __slots__ = ("_data",)

    def __init__(self, angle) -> None:
        data = np.asarray(angle, dtype=float).reshape(-1)
        if data.shape != (DOF,):
            raise ValueError("SO2Tangent holds exactly one coefficient")
        self._data = data.copy()

    @classmethod
    def zero(cls) -> SO2Tangent:
        return cls(0.0)

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> SO2Tangent:
        """A random angle in [-pi, pi]."""
        return cls(_as_rng(rng).uniform(-1.0, 1.0) * math.pi)

    @classmethod
    def generator(cls, i: int) -> np.ndarray:
        if i != 0:
            raise ValueError("Index i must be 0!")
        return _skew(1.0)

    def coeffs(self) -> np.ndarray:
        return self._data.copy()

    def angle(self) -> float:
        return float(self._data[0])

    def hat(self) -> np.ndarray:
        return _skew(self.angle())

    def exp(self, jacobian: bool = False):
        """The exponential map; with ``jacobian`` also the right Jacobian."""
        theta = self.angle()
        result = SO2(math.cos(theta), math.sin(theta))
        if jacobian:
            return result, self.rjac()
        return result

    def rjac(self) -> np.ndarray:
        return np.ones((DOF, DOF))

    def ljac(self) -> np.ndarray:
        return np.ones((DOF, DOF))

    def rjacinv(self) -> np.ndarray:
        return self.rjac()

    def ljacinv(self) -> np.ndarray:
        return self.ljac()

    def small_adj(self) -> np.ndarray:
        return np.ones((DOF, DOF))

    def is_approx(self, other: SO2Tangent, tol: float = EPS) -> bool:
        return bool(np.all(np.abs(self._data - _tangent_data(other)) <= tol))

    def __add__(self, other):
        try:
            return SO2Tangent(self._data + _tangent_data(other))
        except (TypeError, ValueError):
            return NotImplemented

    def __sub__(self, other):
        try:
            return SO2Tangent(self._data - _tangent_data(other))
        except (TypeError, ValueError):
            return NotImplemented

    def __neg__(self) -> SO2Tangent:
        return SO2Tangent(-self._data)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return SO2Tangent(self._data * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return SO2Tangent(self._data / float(scalar))

    def __eq__(self, other):
        if not isinstance(other, SO2Tangent):
            return NotImplemented
        return self.is_approx(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SO2Tangent(angle={self.angle()!r})"


def _tangent_data(value) -> np.ndarray:
    if isinstance(value, SO2Tangent):
        return value._data
    data = np.asarray(value, dtype=float).reshape(-1)
    if data.shape != (DOF,):
        raise ValueError("Expected a single tangent coefficient")
    return data