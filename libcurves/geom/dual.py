"""
Forward-mode automatic differentiation with truncated Taylor series ("jets").

A jet of order n carries the Taylor coefficients of f(t0 + h) in h:

    f(t0 + h) = c_0 + c_1 h + c_2 h^2 + ... + c_n h^n + O(h^(n+1))

so that f^(k)(t0) = k! c_k. An order-1 jet is a classic dual number
(value, derivative). Elementary operations propagate the coefficients exactly:

    (a * b)_k = sum_{j=0..k} a_j b_{k-j}                    (Cauchy product)
    s = sin(u), c = cos(u):
        k s_k =  sum_{j=1..k} j u_j c_{k-j}
        k c_k = -sum_{j=1..k} j u_j s_{k-j}

The result is exact up to floating-point rounding; there is no step size.
"""
from __future__ import annotations

from math import factorial
from numbers import Real
from typing import Tuple, Union

import numpy as np


class Jet:
    """Truncated Taylor expansion of a scalar function around one point."""

    __slots__ = ("_coeffs",)
    # NumPy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, coeffs) -> None:
        c = np.array(coeffs, dtype=np.float64).reshape(-1)
        if c.size == 0:
            raise ValueError("Jet needs at least the value coefficient.")
        c.setflags(write=False)
        self._coeffs = c

    @property
    def coeffs(self) -> np.ndarray:
        return self._coeffs

    @property
    def order(self) -> int:
        return self._coeffs.size - 1

    @property
    def value(self) -> float:
        return float(self._coeffs[0])

    def derivative(self, k: int = 1) -> float:
        """Return the k-th derivative f^(k)(t0) = k! c_k."""
        k = int(k)
        if k < 0 or k > self.order:
            raise ValueError(f"Derivative order {k} outside [0, {self.order}] for this jet.")
        return float(self._coeffs[k] * factorial(k))

    # ---------- arithmetic ----------

    def _coerce(self, other) -> np.ndarray | None:
        if isinstance(other, Jet):
            if other.order != self.order:
                raise ValueError(f"Cannot combine jets of order {self.order} and {other.order}.")
            return other._coeffs
        if isinstance(other, Real):
            c = np.zeros_like(self._coeffs)
            c[0] = float(other)
            return c
        return None

    def __add__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Jet(self._coeffs + c)

    __radd__ = __add__

    def __sub__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Jet(self._coeffs - c)

    def __rsub__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Jet(c - self._coeffs)

    def __neg__(self) -> "Jet":
        return Jet(-self._coeffs)

    def __pos__(self) -> "Jet":
        return self

    def __mul__(self, other):
        if isinstance(other, Real):
            return Jet(self._coeffs * float(other))
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        n = self._coeffs.size
        return Jet(np.convolve(self._coeffs, c)[:n])

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Real):
            return Jet(self._coeffs / float(other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"Jet({self._coeffs.tolist()!r})"


Scalar = Union[Real, Jet]


def make_jet(t: Real, order: int = 1) -> Jet:
    """Seed the independent variable at ``t``: coefficients [t, 1, 0, ...]."""
    order = int(order)
    if order < 1:
        raise ValueError("A differentiation variable needs order >= 1.")
    c = np.zeros(order + 1, dtype=np.float64)
    c[0] = float(t)
    c[1] = 1.0
    return Jet(c)


def sincos(x: Scalar) -> Tuple[Scalar, Scalar]:
    """Return (sin x, cos x); jets are expanded together since each needs the other."""
    if not isinstance(x, Jet):
        return float(np.sin(x)), float(np.cos(x))

    u = x.coeffs
    n = u.size
    s = np.empty(n, dtype=np.float64)
    c = np.empty(n, dtype=np.float64)
    s[0] = np.sin(u[0])
    c[0] = np.cos(u[0])
    for k in range(1, n):
        j = np.arange(1, k + 1)
        ju = j * u[j]
        s[k] = np.dot(ju, c[k - j]) / k
        c[k] = -np.dot(ju, s[k - j]) / k
    return Jet(s), Jet(c)


def sin(x: Scalar) -> Scalar:
    return sincos(x)[0]


def cos(x: Scalar) -> Scalar:
    return sincos(x)[1]


__all__ = ["Jet", "make_jet", "sin", "cos", "sincos"]
