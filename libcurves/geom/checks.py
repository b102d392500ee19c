from __future__ import annotations

from math import tau as TWO_PI

import numpy as np

from ..models import Curve


def _sample_params(t_start: float, t_end: float, n: int) -> np.ndarray:
    return np.linspace(float(t_start), float(t_end), max(int(n), 2), dtype=np.float64)


def check_tangent_consistency(
    curve: Curve,
    t_start: float = 0.0,
    t_end: float = TWO_PI,
    n: int = 64,
    h: float = 1e-5,
) -> dict:
    """
    Compare the autodiff tangent c'(t) against central differences
    (c(t+h) - c(t-h)) / 2h at ``n`` samples in [t_start, t_end].
    The differences carry O(h^2) truncation error; the autodiff side does not.
    Returns summary dict with absolute/relative maxima.
    """
    ts = _sample_params(t_start, t_end, n)
    errs = np.empty(ts.size, float)
    mags = np.empty(ts.size, float)
    for i, t in enumerate(ts):
        d_ad = curve.get_derivative(t).to_array()
        d_fd = (curve.get_point(t + h).to_array() - curve.get_point(t - h).to_array()) / (2.0 * h)
        errs[i] = float(np.linalg.norm(d_ad - d_fd))
        mags[i] = float(np.linalg.norm(d_ad))
    rel = errs / np.maximum(mags, 1e-12)
    return {
        "n": int(ts.size),
        "max_abs_err": float(np.nanmax(errs)),
        "max_rel_err": float(np.nanmax(rel)),
    }


def check_periodicity(curve: Curve, t_start: float = 0.0, t_end: float = TWO_PI, n: int = 64) -> dict:
    """
    x/y periodicity: ||c_xy(t + 2π) - c_xy(t)|| for sampled t.
    z is excluded (a helix rises linearly); its per-turn rise is reported instead.
    """
    ts = _sample_params(t_start, t_end, n)
    gaps = np.empty(ts.size, float)
    rise = np.empty(ts.size, float)
    for i, t in enumerate(ts):
        p0 = curve.get_point(t).to_array()
        p1 = curve.get_point(t + TWO_PI).to_array()
        gaps[i] = float(np.linalg.norm(p1[:2] - p0[:2]))
        rise[i] = float(p1[2] - p0[2])
    return {
        "n": int(ts.size),
        "max_xy_gap": float(np.nanmax(gaps)),
        "z_rise_per_turn": float(np.nanmedian(rise)),
    }


__all__ = ["check_tangent_consistency", "check_periodicity"]
