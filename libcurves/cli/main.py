#!/usr/bin/env python
from __future__ import annotations

import argparse
import math
import os
from pathlib import Path

from libcurves import name
from libcurves.build import build_curve
from libcurves.figures.overview import make_curve_overview
from libcurves.models import Curve, CurveType


def _ensure_parent(path: str | os.PathLike[str]) -> None:
    parent = Path(path).expanduser().parent
    if parent != Path('.'):
        parent.mkdir(parents=True, exist_ok=True)


def _fmt(values) -> str:
    return " ".join(f"{float(v):.12g}" for v in values)


def _add_curve_arguments(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("--type", required=True, choices=[ct.value for ct in CurveType], help="Curve kind.")
    sub.add_argument("--radius", type=float, default=None, help="Radius (circle, helix).")
    sub.add_argument("--x-radius", type=float, default=None, help="Radius along x (ellipse).")
    sub.add_argument("--y-radius", type=float, default=None, help="Radius along y (ellipse).")
    sub.add_argument("--step", type=float, default=None, help="Rise per radian (helix).")


def _add_eval_arguments(sub: argparse.ArgumentParser) -> None:
    _add_curve_arguments(sub)
    sub.add_argument("-t", "--t", dest="t", type=float, required=True, help="Curve parameter (radians).")


def _add_figure_arguments(sub: argparse.ArgumentParser) -> None:
    _add_curve_arguments(sub)
    sub.add_argument("--out", required=True, help="Output figure path.")
    sub.add_argument("--t-start", type=float, default=0.0, help="First parameter value.")
    sub.add_argument("--t-end", type=float, default=2.0 * math.pi, help="Last parameter value.")
    sub.add_argument("--n-samples", type=int, default=240, help="Samples along the curve.")
    sub.add_argument("--n-tangents", type=int, default=12, help="Tangent arrows to draw.")
    sub.add_argument("--dpi", type=int, default=200, help="Figure DPI for raster outputs.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=name(), description="Parametric curve point/tangent CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    point_parser = subparsers.add_parser("point", help="Print the curve position at t.")
    _add_eval_arguments(point_parser)

    derivative_parser = subparsers.add_parser("derivative", help="Print the tangent vector at t.")
    _add_eval_arguments(derivative_parser)

    info_parser = subparsers.add_parser("info", help="Print curve kind and radii sum.")
    _add_curve_arguments(info_parser)

    figure_parser = subparsers.add_parser("figure", help="Render an overview figure with tangents.")
    _add_figure_arguments(figure_parser)

    return parser


def _curve_from_args(args: argparse.Namespace) -> Curve:
    params = {
        "type": args.type,
        "radius": args.radius,
        "x_radius": args.x_radius,
        "y_radius": args.y_radius,
        "step": args.step,
    }
    return build_curve(params)


def _run_point(curve: Curve, args: argparse.Namespace) -> None:
    print(f"[point] {_fmt(curve.get_point(args.t))}")


def _run_derivative(curve: Curve, args: argparse.Namespace) -> None:
    print(f"[derivative] {_fmt(curve.get_derivative(args.t))}")


def _run_info(curve: Curve, args: argparse.Namespace) -> None:
    print(f"[info] type={curve.get_type().value} radii_sum={float(curve.get_radii_sum()):.12g}")


def _run_figure(curve: Curve, args: argparse.Namespace) -> None:
    _ensure_parent(args.out)
    out = make_curve_overview(
        curve,
        args.out,
        t_start=float(args.t_start),
        t_end=float(args.t_end),
        n_samples=int(args.n_samples),
        n_tangents=int(args.n_tangents),
        dpi=int(args.dpi),
    )
    print(f"[figure] wrote {out}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        curve = _curve_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "point":
        _run_point(curve, args)
    elif args.command == "derivative":
        _run_derivative(curve, args)
    elif args.command == "info":
        _run_info(curve, args)
    elif args.command == "figure":
        _run_figure(curve, args)
    else:
        parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
