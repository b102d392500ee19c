from __future__ import annotations

import math
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import Dict, Iterator

import numpy as np

from .geom import dual


@dataclass(frozen=True)
class Point:
    """
    Position in 3-space.
    - x, y, z: float coordinates
    """
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, a: np.ndarray) -> "Point":
        a = np.asarray(a, dtype=np.float64).reshape(3)
        return cls(float(a[0]), float(a[1]), float(a[2]))


@dataclass(frozen=True)
class Vector:
    """
    Tangent direction in 3-space (not normalized).
    - x, y, z: float components
    """
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, a: np.ndarray) -> "Vector":
        a = np.asarray(a, dtype=np.float64).reshape(3)
        return cls(float(a[0]), float(a[1]), float(a[2]))


class CurveType(Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


class Curve(ABC):
    """
    Parametric space curve c(t): R -> R^3.

    Accessors:
        get_point(t):       position c(t)
        get_derivative(t):  tangent c'(t), evaluated with forward-mode jets
        get_type():         CurveType of the variant
        get_radii_sum():    variant-specific scalar magnitude
    Instances are immutable; all accessors are pure.
    """

    @abstractmethod
    def get_point(self, t: Real) -> Point:
        ...

    @abstractmethod
    def get_derivative(self, t: Real) -> Vector:
        ...

    @abstractmethod
    def get_type(self) -> CurveType:
        ...

    @abstractmethod
    def get_radii_sum(self) -> Real:
        ...

    def params(self) -> Dict[str, object]:
        """Defining constants as a params mapping accepted by :func:`libcurves.build.build_curve`."""
        out: Dict[str, object] = {"type": self.get_type().value}
        for f in fields(self):
            out[f.name] = getattr(self, f.name)
        return out

    def _check_constants(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, Real):
                raise TypeError(f"{type(self).__name__}.{f.name} must be a real number, got {type(value).__name__}.")
            if not math.isfinite(value):
                warnings.warn(
                    f"{type(self).__name__}.{f.name} is not finite ({value!r}); evaluations will propagate it.",
                    RuntimeWarning,
                    stacklevel=4,
                )


@dataclass(frozen=True)
class Circle(Curve):
    """
    x(t) = r cos(t)
    y(t) = r sin(t)
    z(t) = 0
    """
    radius: Real

    def __post_init__(self) -> None:
        self._check_constants()

    def get_point(self, t: Real) -> Point:
        return Point(float(self.radius * np.cos(t)), float(self.radius * np.sin(t)), 0.0)

    def get_derivative(self, t: Real) -> Vector:
        x = dual.cos(dual.make_jet(t)) * self.radius
        y = dual.sin(dual.make_jet(t)) * self.radius
        return Vector(x.derivative(1), y.derivative(1), 0.0)

    def get_type(self) -> CurveType:
        return CurveType.CIRCLE

    def get_radii_sum(self) -> Real:
        return self.radius


@dataclass(frozen=True)
class Ellipse(Curve):
    """
    x(t) = a cos(t)
    y(t) = b sin(t)
    z(t) = 0
    """
    x_radius: Real
    y_radius: Real

    def __post_init__(self) -> None:
        self._check_constants()

    def get_point(self, t: Real) -> Point:
        return Point(float(self.x_radius * np.cos(t)), float(self.y_radius * np.sin(t)), 0.0)

    def get_derivative(self, t: Real) -> Vector:
        x = dual.cos(dual.make_jet(t)) * self.x_radius
        y = dual.sin(dual.make_jet(t)) * self.y_radius
        return Vector(x.derivative(1), y.derivative(1), 0.0)

    def get_type(self) -> CurveType:
        return CurveType.ELLIPSE

    def get_radii_sum(self) -> Real:
        return self.x_radius + self.y_radius


@dataclass(frozen=True)
class Helix(Curve):
    """
    x(t) = r cos(t)
    y(t) = r sin(t)
    z(t) = s t        (s: rise per radian)
    """
    radius: Real
    step: Real

    def __post_init__(self) -> None:
        self._check_constants()

    def get_point(self, t: Real) -> Point:
        return Point(
            float(self.radius * np.cos(t)),
            float(self.radius * np.sin(t)),
            float(self.step * t),
        )

    def get_derivative(self, t: Real) -> Vector:
        x = dual.cos(dual.make_jet(t)) * self.radius
        y = dual.sin(dual.make_jet(t)) * self.radius
        z = dual.make_jet(t) * self.step
        return Vector(x.derivative(1), y.derivative(1), z.derivative(1))

    def get_type(self) -> CurveType:
        return CurveType.HELIX

    def get_radii_sum(self) -> Real:
        return self.radius
