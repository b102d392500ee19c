import math

import numpy as np
import pytest

from libcurves.geom import dual
from libcurves.geom.dual import Jet, make_jet


def test_seed_is_identity_with_unit_derivative():
    x = make_jet(0.7)
    assert x.order == 1
    assert x.value == pytest.approx(0.7)
    assert x.derivative(1) == 1.0


def test_sin_cos_first_derivative_exact():
    for t in np.linspace(-4.0, 4.0, 17):
        s, c = dual.sincos(make_jet(t))
        assert s.value == pytest.approx(math.sin(t), abs=1e-15)
        assert s.derivative(1) == pytest.approx(math.cos(t), abs=1e-15)
        assert c.derivative(1) == pytest.approx(-math.sin(t), abs=1e-15)


def test_higher_order_taylor_coefficients():
    # d^k/dt^k sin(t) cycles sin, cos, -sin, -cos
    t = 0.3
    s = dual.sin(make_jet(t, order=5))
    expected = [math.sin(t), math.cos(t), -math.sin(t), -math.cos(t), math.sin(t), math.cos(t)]
    got = [s.derivative(k) for k in range(6)]
    np.testing.assert_allclose(got, expected, atol=1e-13)


def test_chain_rule_through_scaled_argument():
    # f(t) = cos(3t) * 2 -> f'(t) = -6 sin(3t)
    t = 1.1
    f = dual.cos(make_jet(t) * 3) * 2
    assert f.derivative(1) == pytest.approx(-6.0 * math.sin(3.0 * t))


def test_product_rule():
    # f(t) = t * sin(t) -> f'(t) = sin t + t cos t, f''(t) = 2 cos t - t sin t
    t = 0.9
    x = make_jet(t, order=2)
    f = x * dual.sin(x)
    assert f.derivative(1) == pytest.approx(math.sin(t) + t * math.cos(t))
    assert f.derivative(2) == pytest.approx(2.0 * math.cos(t) - t * math.sin(t))


def test_linear_combination_and_reflected_ops():
    x = make_jet(2.0)
    f = 5.0 - 3 * x + x / 2 + np.float64(4.0) * x
    assert isinstance(f, Jet)
    assert f.value == pytest.approx(5.0 - 6.0 + 1.0 + 8.0)
    assert f.derivative(1) == pytest.approx(-3.0 + 0.5 + 4.0)
    assert (-x).derivative(1) == -1.0


def test_plain_numbers_pass_through():
    assert dual.sin(0.0) == 0.0
    assert dual.cos(0) == 1.0


def test_nan_propagates():
    s = dual.sin(make_jet(float("nan")))
    assert math.isnan(s.value) and math.isnan(s.derivative(1))


def test_invalid_orders_rejected():
    with pytest.raises(ValueError):
        make_jet(0.0, order=0)
    with pytest.raises(ValueError):
        make_jet(0.0).derivative(2)
    with pytest.raises(ValueError):
        make_jet(0.0, order=1) + make_jet(0.0, order=2)


def test_jet_coefficients_are_read_only():
    x = make_jet(1.0)
    with pytest.raises(ValueError):
        x.coeffs[0] = 3.0
