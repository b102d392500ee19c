"""
libcurves: positions and autodiff tangents of parametric space curves.

This package exposes:
- Value types Point and Vector
- The Curve base class and its variants Circle, Ellipse, Helix
- build_curve() for constructing curves from a params mapping
"""

from .models import (
    Point,
    Vector,
    CurveType,
    Curve,
    Circle,
    Ellipse,
    Helix,
)
from .build import build_curve, curve_params

__all__ = [
    "Point",
    "Vector",
    "CurveType",
    "Curve",
    "Circle",
    "Ellipse",
    "Helix",
    "build_curve",
    "curve_params",
    "name",
]

__version__ = "0.1.0"


def name() -> str:
    return "libcurves"
