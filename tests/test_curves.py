from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from libcurves.models import Circle, Curve, CurveType, Ellipse, Helix, Point, Vector

TS = np.linspace(-2.0 * np.pi, 3.0 * np.pi, 41)


def _curves():
    return [Circle(2.5), Ellipse(3.0, 1.25), Helix(1.5, 0.4)]


def test_circle_point_and_derivative():
    r = 2.5
    c = Circle(r)
    for t in TS:
        np.testing.assert_allclose(c.get_point(t).to_array(), [r * np.cos(t), r * np.sin(t), 0.0], atol=1e-12)
        np.testing.assert_allclose(c.get_derivative(t).to_array(), [-r * np.sin(t), r * np.cos(t), 0.0], atol=1e-12)


def test_ellipse_point_and_derivative():
    a, b = 3.0, 1.25
    e = Ellipse(a, b)
    for t in TS:
        np.testing.assert_allclose(e.get_point(t).to_array(), [a * np.cos(t), b * np.sin(t), 0.0], atol=1e-12)
        np.testing.assert_allclose(e.get_derivative(t).to_array(), [-a * np.sin(t), b * np.cos(t), 0.0], atol=1e-12)


def test_helix_point_and_derivative():
    r, s = 1.5, 0.4
    h = Helix(r, s)
    for t in TS:
        np.testing.assert_allclose(h.get_point(t).to_array(), [r * np.cos(t), r * np.sin(t), s * t], atol=1e-12)
        np.testing.assert_allclose(h.get_derivative(t).to_array(), [-r * np.sin(t), r * np.cos(t), s], atol=1e-12)


def test_reference_values():
    p = Circle(2).get_point(0)
    d = Circle(2).get_derivative(0)
    assert tuple(p) == (2.0, 0.0, 0.0)
    np.testing.assert_allclose(tuple(d), (0.0, 2.0, 0.0), atol=1e-15)

    e = Ellipse(3, 1)
    np.testing.assert_allclose(e.get_point(math.pi / 2).to_array(), [0.0, 1.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(e.get_derivative(math.pi / 2).to_array(), [-3.0, 0.0, 0.0], atol=1e-15)

    h = Helix(1, 2)
    np.testing.assert_allclose(h.get_point(0).to_array(), [1.0, 0.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(h.get_derivative(0).to_array(), [0.0, 1.0, 2.0], atol=1e-15)


def test_xy_periodicity():
    for c in _curves():
        for t in TS:
            p0 = c.get_point(t).to_array()
            p1 = c.get_point(t + 2.0 * np.pi).to_array()
            np.testing.assert_allclose(p1[:2], p0[:2], atol=1e-12)


def test_helix_rises_one_pitch_per_turn():
    h = Helix(1.0, 0.5)
    dz = h.get_point(1.0 + 2.0 * np.pi).z - h.get_point(1.0).z
    assert dz == pytest.approx(0.5 * 2.0 * np.pi)


def test_radii_sum_exact():
    assert Circle(2.5).get_radii_sum() == 2.5
    assert Ellipse(3.0, 1.25).get_radii_sum() == 4.25
    assert Helix(1.5, 0.4).get_radii_sum() == 1.5
    assert Ellipse(3, 1).get_radii_sum() == 4


def test_get_type_stable():
    kinds = [CurveType.CIRCLE, CurveType.ELLIPSE, CurveType.HELIX]
    for c, kind in zip(_curves(), kinds):
        assert isinstance(c, Curve)
        assert c.get_type() is kind
        assert c.get_type() is c.get_type()


def test_variant_constants_readable():
    assert Circle(2.0).radius == 2.0
    e = Ellipse(3.0, 1.0)
    assert (e.x_radius, e.y_radius) == (3.0, 1.0)
    h = Helix(1.0, 2.0)
    assert (h.radius, h.step) == (1.0, 2.0)


def test_curves_are_immutable_values():
    c = Circle(1.0)
    with pytest.raises(FrozenInstanceError):
        c.radius = 2.0
    assert Circle(1.0) == c
    assert Circle(1.0) != Helix(1.0, 0.0)
    p = c.get_point(0.0)
    with pytest.raises(FrozenInstanceError):
        p.x = 5.0


def test_point_vector_array_conversion():
    p = Point.from_array(np.array([1, 2, 3]))
    assert p == Point(1.0, 2.0, 3.0)
    v = Vector(0.5, -1.0, 2.0)
    assert Vector.from_array(v.to_array()) == v
    assert list(v) == [0.5, -1.0, 2.0]


def test_integral_constants_and_numpy_scalars():
    c = Circle(np.int64(3))
    np.testing.assert_allclose(c.get_derivative(np.float32(0.0)).to_array(), [0.0, 3.0, 0.0], atol=1e-7)
    h = Helix(2, 3)
    assert h.get_derivative(1).z == 3.0
    assert h.get_point(2).z == 6.0


def test_non_numeric_constants_rejected():
    with pytest.raises(TypeError):
        Circle("2")
    with pytest.raises(TypeError):
        Ellipse(1.0, None)


def test_non_finite_constants_warn_and_propagate():
    with pytest.warns(RuntimeWarning):
        c = Circle(float("nan"))
    p = c.get_point(0.3)
    d = c.get_derivative(0.3)
    assert math.isnan(p.x) and math.isnan(d.y)
    assert p.z == 0.0


def test_non_finite_parameter_propagates():
    h = Helix(1.0, 1.0)
    p = h.get_point(float("nan"))
    d = h.get_derivative(float("nan"))
    assert all(math.isnan(v) for v in p)
    assert math.isnan(d.x) and math.isnan(d.y)
    assert d.z == 1.0


def test_abstract_curve_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Curve()
