from __future__ import annotations

import math
from typing import List

import numpy as np
import pyvista as pv

from ..geom.sampling import sample_curve
from ..models import Curve


def _line_from_points(P: np.ndarray) -> pv.PolyData:
    """
    Build a PolyData polyline from a sequence of points.
    Compatible with modern PyVista (no .lines_from_points).
    """
    P = np.asarray(P, dtype=float)
    n = P.shape[0]
    # PolyData expects a connectivity array: [n, 0,1,2,...,n-1]
    cells = np.hstack([[n], np.arange(n, dtype=np.int32)])
    return pv.PolyData(P, lines=cells)


def curve_polydata(curve: Curve, t_start: float = 0.0, t_end: float = 2.0 * math.pi, n: int = 400) -> pv.PolyData:
    """Curve sampled at ``n`` parameters as a polyline; tangents attached as point data 'tangent'."""
    ts, pts, tans = sample_curve(curve, t_start, t_end, n)
    line = _line_from_points(pts)
    line.point_data["t"] = ts
    line.point_data["tangent"] = tans
    return line


def tangent_arrows(
    curve: Curve,
    t_start: float = 0.0,
    t_end: float = 2.0 * math.pi,
    n: int = 12,
    scale: float = 1.0,
) -> List[pv.PolyData]:
    """One arrow glyph per sample, starting at c(t) and pointing along c'(t)."""
    _, pts, tans = sample_curve(curve, t_start, t_end, n)
    arrows = []
    for p, d in zip(pts, tans):
        norm = float(np.linalg.norm(d))
        if not np.isfinite(norm) or norm < 1e-12:
            continue
        arrows.append(
            pv.Arrow(
                start=p,
                direction=d / norm,
                scale=scale * norm,
                tip_length=0.25,
                tip_radius=0.08,
                shaft_radius=0.035,
            )
        )
    return arrows


def show_curve_overlay(
    curve: Curve,
    t_start: float = 0.0,
    t_end: float = 2.0 * math.pi,
    n_tangents: int = 12,
    tangent_scale: float = 0.25,
    screenshot: str | None = "curve_debug.png",
    window_size: tuple[int, int] = (1400, 900),
    theme: str = "document",
) -> pv.Plotter:
    """
    Render the curve as a tube with tangent arrows at ``n_tangents`` parameters.
    If `screenshot` is provided, save the image and close the window (off-screen render).
    """
    pv.set_plot_theme(theme)
    pl = pv.Plotter(off_screen=screenshot is not None, window_size=window_size)

    line = curve_polydata(curve, t_start, t_end)
    # tube radius ~ 0.5% of bbox diagonal
    b = np.asarray(line.bounds, dtype=float).reshape(3, 2)
    diag = float(np.linalg.norm(b[:, 1] - b[:, 0]))
    r_tube = max(0.005 * diag, 1e-3)
    line_tube = line.tube(radius=r_tube, n_sides=16)
    pl.add_mesh(line_tube, color="#00a3ff", specular=0.3, name="curve_tube")

    for i, arrow in enumerate(tangent_arrows(curve, t_start, t_end, n_tangents, scale=tangent_scale)):
        pl.add_mesh(arrow, color="#ff3333", name=f"tangent_{i}")

    pl.add_axes(line_width=2)
    pl.camera.zoom(1.2)

    if screenshot:
        pl.show(screenshot=screenshot, auto_close=True)
    else:
        pl.show()

    return pl
