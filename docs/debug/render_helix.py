from libcurves import Helix
from libcurves.geom.checks import check_tangent_consistency
from libcurves.visualize.debug import show_curve_overlay

helix = Helix(radius=10.0, step=2.5)
print(check_tangent_consistency(helix, 0.0, 6 * 3.141592653589793, n=200))
show_curve_overlay(helix, 0.0, 6 * 3.141592653589793, n_tangents=24, tangent_scale=0.3, screenshot="helix_debug.png")
print("Wrote helix_debug.png")
