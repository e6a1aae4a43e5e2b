import math

import numpy as np
import pytest
from scipy import integrate

from train_sim.errors import ConfigError
from train_sim.quadrature import QUADRATURE_RULES, QuadratureMethod, get_rule, parse_method

ALL_METHODS = list(QuadratureMethod)


@pytest.mark.parametrize("method", ALL_METHODS)
@pytest.mark.parametrize("subdivisions", [1, 2, 3, 7, 100])
def test_constant_function_integrates_exactly(method, subdivisions):
    rule = get_rule(method)
    result = rule.integrate(3.0, 4.0, subdivisions, lambda x: 2.5)
    assert result == pytest.approx(2.5, rel=1e-12)

    wide = rule.integrate(-2.0, 6.0, subdivisions, lambda x: -1.25)
    assert wide == pytest.approx(-10.0, rel=1e-12)


@pytest.mark.parametrize("method", [QuadratureMethod.TRAPEZOIDAL, QuadratureMethod.SIMPSONS])
@pytest.mark.parametrize("subdivisions", [1, 2, 5, 16])
def test_linear_function_is_exact_for_trapezoidal_and_simpson(method, subdivisions):
    rule = get_rule(method)
    result = rule.integrate(2.0, 5.0, subdivisions, lambda x: 3.0 * x - 1.0)
    assert result == pytest.approx(28.5, rel=1e-12)


@pytest.mark.parametrize("subdivisions", [2, 3, 4, 10])
def test_simpson_is_exact_for_cubics(subdivisions):
    rule = get_rule(QuadratureMethod.SIMPSONS)
    result = rule.integrate(0.0, 2.0, subdivisions, lambda x: x**3 - 2.0 * x**2 + x + 4.0)
    assert result == pytest.approx(26.0 / 3.0, rel=1e-12)


def test_riemann_sums_sample_left_mid_and_right_points():
    f = lambda x: x
    assert get_rule("left-riemann").integrate(0.0, 1.0, 4, f) == pytest.approx(0.375)
    assert get_rule("mid-riemann").integrate(0.0, 1.0, 4, f) == pytest.approx(0.5)
    assert get_rule("right-riemann").integrate(0.0, 1.0, 4, f) == pytest.approx(0.625)


def test_simpson_error_shrinks_with_more_subdivisions():
    rule = get_rule(QuadratureMethod.SIMPSONS)
    exact = 1.0 - math.cos(1.0)
    errors = [abs(rule.integrate(0.0, 1.0, n, math.sin) - exact) for n in (2, 4, 8, 16, 32)]
    for coarse, fine in zip(errors, errors[1:]):
        assert fine < coarse


@pytest.mark.parametrize("n", [2, 8, 20])
def test_simpson_and_trapezoidal_match_scipy(n):
    x = np.linspace(0.0, 1.0, n + 1)
    y = np.exp(x) * np.cos(3.0 * x)
    f = lambda t: math.exp(t) * math.cos(3.0 * t)

    assert get_rule("simpsons").integrate(0.0, 1.0, n, f) == pytest.approx(integrate.simpson(y, x=x), rel=1e-12)
    assert get_rule("trapezoidal").integrate(0.0, 1.0, n, f) == pytest.approx(integrate.trapezoid(y, x=x), rel=1e-12)


def test_odd_simpson_counts_round_up_to_even():
    simpson = get_rule(QuadratureMethod.SIMPSONS)
    assert simpson.effective_subdivisions(1) == 2
    assert simpson.effective_subdivisions(3) == 4
    assert simpson.effective_subdivisions(4) == 4
    assert get_rule(QuadratureMethod.LEFT_RIEMANN).effective_subdivisions(3) == 3

    calls = []
    simpson.integrate(0.0, 1.0, 3, lambda x: calls.append(x) or 0.0)
    assert len(calls) == 5


@pytest.mark.parametrize(
    "name, expected",
    [
        ("left-riemann", QuadratureMethod.LEFT_RIEMANN),
        ("MID_RIEMANN", QuadratureMethod.MID_RIEMANN),
        (" right-riemann ", QuadratureMethod.RIGHT_RIEMANN),
        ("Trapezoidal", QuadratureMethod.TRAPEZOIDAL),
        ("simpson", QuadratureMethod.SIMPSONS),
        ("simpsons", QuadratureMethod.SIMPSONS),
        (QuadratureMethod.SIMPSONS, QuadratureMethod.SIMPSONS),
    ],
)
def test_parse_method(name, expected):
    assert parse_method(name) is expected
    assert get_rule(name) is QUADRATURE_RULES[expected]


def test_unknown_method_is_a_config_error():
    with pytest.raises(ConfigError, match="Unknown quadrature method"):
        get_rule("monte-carlo")
    with pytest.raises(ValueError):
        parse_method("gauss")


def test_every_method_has_a_rule():
    assert set(QUADRATURE_RULES) == set(QuadratureMethod)
    for method, rule in QUADRATURE_RULES.items():
        assert rule.method is method
        assert rule.name == method.value
