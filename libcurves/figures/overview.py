from __future__ import annotations

import math
import os
from typing import Tuple

import matplotlib

matplotlib.use("Agg", force=True)
matplotlib.rcParams["figure.facecolor"] = "white"
matplotlib.rcParams["savefig.facecolor"] = "white"
matplotlib.rcParams["pdf.fonttype"] = 42
matplotlib.rcParams["ps.fonttype"] = 42
matplotlib.rcParams["svg.fonttype"] = "none"

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import cm, colors
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401 (required for 3D projection)

from ..geom.sampling import sample_curve
from ..models import Curve


def _equal_box(points: np.ndarray) -> Tuple[np.ndarray, float]:
    lo = np.nanmin(points, axis=0)
    hi = np.nanmax(points, axis=0)
    center = 0.5 * (lo + hi)
    half = 0.5 * float(np.nanmax(hi - lo))
    return center, max(half, 1e-9)


def _title(curve: Curve) -> str:
    consts = ", ".join(f"{k}={v:g}" for k, v in curve.params().items() if k != "type")
    return f"{curve.get_type().value} ({consts})"


def make_curve_overview(
    curve: Curve,
    out_path: str,
    *,
    t_start: float = 0.0,
    t_end: float = 2.0 * math.pi,
    n_samples: int = 240,
    n_tangents: int = 12,
    tangent_scale: float = 0.25,
    cmap: str = "viridis",
    dpi: int = 200,
    elev: float = 28.0,
    azim: float = -55.0,
) -> str:
    """
    Two-panel figure: the curve in 3D with tangent arrows (left) and the
    tangent components c'(t) against t (right). Returns the written path.

    Arrows are scaled by ``tangent_scale`` relative to the curve's bounding box.
    """
    ts, pts, tans = sample_curve(curve, t_start, t_end, n_samples)
    idx = np.unique(np.linspace(0, ts.size - 1, max(int(n_tangents), 1)).round().astype(int))
    p_arrows, d_arrows = pts[idx], tans[idx]

    center, half = _equal_box(pts)
    d_norm = float(np.nanmax(np.linalg.norm(d_arrows, axis=1)))
    arrow_len = tangent_scale * 2.0 * half / max(d_norm, 1e-12)

    fig = plt.figure(figsize=(12.0, 5.6), dpi=dpi)
    ax3d = fig.add_axes([0.02, 0.06, 0.50, 0.88], projection="3d")
    norm = colors.Normalize(vmin=float(ts[0]), vmax=float(ts[-1]))
    mapper = cm.ScalarMappable(norm=norm, cmap=cmap)
    for i in range(ts.size - 1):
        ax3d.plot(
            pts[i : i + 2, 0],
            pts[i : i + 2, 1],
            pts[i : i + 2, 2],
            color=mapper.to_rgba(0.5 * (ts[i] + ts[i + 1])),
            linewidth=2.0,
        )
    ax3d.quiver(
        p_arrows[:, 0],
        p_arrows[:, 1],
        p_arrows[:, 2],
        d_arrows[:, 0] * arrow_len,
        d_arrows[:, 1] * arrow_len,
        d_arrows[:, 2] * arrow_len,
        color="#d62728",
        linewidth=1.2,
        arrow_length_ratio=0.2,
    )
    ax3d.scatter(p_arrows[:, 0], p_arrows[:, 1], p_arrows[:, 2], color="#111111", s=12, depthshade=False)
    ax3d.set_xlim(center[0] - half, center[0] + half)
    ax3d.set_ylim(center[1] - half, center[1] + half)
    ax3d.set_zlim(center[2] - half, center[2] + half)
    ax3d.set_box_aspect((1.0, 1.0, 1.0))
    ax3d.view_init(elev=elev, azim=azim)
    ax3d.set_xlabel("x", labelpad=6)
    ax3d.set_ylabel("y", labelpad=6)
    ax3d.set_zlabel("z", labelpad=6)
    ax3d.tick_params(axis="both", labelsize=8)
    ax3d.set_title(_title(curve), fontsize=11)

    ax_d = fig.add_axes([0.60, 0.14, 0.37, 0.74])
    for k, (label, color) in enumerate((("x'(t)", "#1f77b4"), ("y'(t)", "#ff7f0e"), ("z'(t)", "#2ca02c"))):
        ax_d.plot(ts, tans[:, k], color=color, linewidth=1.6, label=label)
    ax_d.axhline(0.0, color="#9a9a9a", linewidth=0.6)
    ax_d.set_xlim(float(ts[0]), float(ts[-1]))
    ax_d.set_xlabel(r"$t$")
    ax_d.set_ylabel("tangent component")
    ax_d.legend(loc="upper right", fontsize=9, frameon=False)
    ax_d.tick_params(axis="both", labelsize=9)

    extension = os.path.splitext(out_path)[1].lower()
    if extension not in {".png", ".pdf", ".svg"}:
        out_path = f"{out_path}.png"

    fig.savefig(out_path, dpi=dpi, facecolor="white", bbox_inches="tight")
    plt.close(fig)
    return out_path
