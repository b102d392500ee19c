"""Dense sampling of a curve for drawing; one get_point/get_derivative call per sample."""
from __future__ import annotations

from typing import Tuple

import numpy as np

from ..models import Curve


def sample_curve(curve: Curve, t_start: float, t_end: float, n: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (ts, points (n,3), tangents (n,3)) for ``n`` uniform samples in [t_start, t_end]."""
    n = int(n)
    if n < 2:
        raise ValueError("Need at least 2 samples to draw a curve.")
    ts = np.linspace(float(t_start), float(t_end), n, dtype=np.float64)
    pts = np.empty((n, 3), dtype=np.float64)
    tans = np.empty((n, 3), dtype=np.float64)
    for i, t in enumerate(ts):
        pts[i] = curve.get_point(t).to_array()
        tans[i] = curve.get_derivative(t).to_array()
    return ts, pts, tans
