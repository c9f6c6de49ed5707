import math

import pytest

from labtasks.taylor_variant import taylor_a, taylor_b, taylor_c, taylor_d


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.5, 1.0, 3.0])
def test_taylor_a_matches_closed_form(x):
    assert taylor_a(x, 1e-13) == pytest.approx(math.expm1(x) / x, abs=1e-9)


def test_taylor_a_at_zero():
    assert taylor_a(0.0, 1e-9) == 1.0


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.5, 1.0, 3.0])
def test_taylor_b_matches_closed_form(x):
    expected = 2 * (1 - math.cos(x)) / (x * x)
    assert taylor_b(x, 1e-13) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("function", [taylor_a, taylor_b])
def test_overflow_raises(function):
    with pytest.raises(OverflowError):
        function(1000.0, 1e-6)


def test_taylor_c_at_zero():
    assert taylor_c(0.0, 1e-9) == 1.0


@pytest.mark.parametrize("x", [0.2, 0.5, 0.8])
def test_taylor_c_is_even(x):
    assert taylor_c(x, 1e-12) == pytest.approx(taylor_c(-x, 1e-12))


def test_taylor_c_grows_with_x():
    assert 1.0 < taylor_c(0.3, 1e-12) < taylor_c(0.6, 1e-12)


@pytest.mark.parametrize("x", [0.1, 0.5, 0.9, -0.7])
def test_taylor_d_matches_closed_form(x):
    expected = 1 / math.sqrt(1 + x * x) - 1 + x * x / 2
    assert taylor_d(x, 1e-12) == pytest.approx(expected, abs=1e-9)


def test_taylor_d_at_zero():
    assert taylor_d(0.0, 1e-9) == 0


@pytest.mark.parametrize("function", [taylor_c, taylor_d])
@pytest.mark.parametrize("x", [1.0, -1.0, 2.5])
def test_outside_unit_interval_rejected(function, x):
    with pytest.raises(ValueError):
        function(x, 1e-6)