from __future__ import annotations

import warnings
from typing import Any, Dict, Mapping, Optional

from .models import Circle, Curve, CurveType, Ellipse, Helix

_CONSTANTS = {
    CurveType.CIRCLE: (Circle, ("radius",)),
    CurveType.ELLIPSE: (Ellipse, ("x_radius", "y_radius")),
    CurveType.HELIX: (Helix, ("radius", "step")),
}


def curve_type(value: Any) -> CurveType:
    """Parse a CurveType from an enum member or its (case-insensitive) name."""
    if isinstance(value, CurveType):
        return value
    key = str(value).strip().lower()
    try:
        return CurveType(key)
    except ValueError:
        known = ", ".join(ct.value for ct in CurveType)
        raise ValueError(f"Unknown curve type '{value}' (expected one of: {known}).") from None


def build_curve(params: Optional[Mapping[str, Any]] = None, **overrides: Any) -> Curve:
    """
    Construct a curve from a params mapping.

    params:
      type (str):          'circle' | 'ellipse' | 'helix'
      radius (number):     circle, helix
      x_radius (number):   ellipse
      y_radius (number):   ellipse
      step (number):       helix rise per radian

    Keyword overrides take precedence over ``params``. Keys that the selected
    curve type does not use are ignored with a warning.
    """
    merged: Dict[str, Any] = dict(params or {})
    merged.update(overrides)
    if "type" not in merged:
        raise ValueError("params must name a curve 'type'.")
    kind = curve_type(merged.pop("type"))
    cls, names = _CONSTANTS[kind]

    missing = [name for name in names if merged.get(name) is None]
    if missing:
        raise ValueError(f"Missing constant(s) for {kind.value}: {', '.join(missing)}.")

    unused = sorted(k for k, v in merged.items() if k not in names and v is not None)
    if unused:
        warnings.warn(
            f"Ignoring parameter(s) not used by {kind.value}: {', '.join(unused)}.",
            UserWarning,
            stacklevel=2,
        )
    return cls(*(merged[name] for name in names))


def curve_params(curve: Curve) -> Dict[str, Any]:
    """Inverse of :func:`build_curve`: ``build_curve(curve_params(c)) == c``."""
    return curve.params()


__all__ = ["build_curve", "curve_params", "curve_type"]
