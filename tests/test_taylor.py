import math

import pytest

from labtasks.taylor import main, parse_double, taylor_a, taylor_b, taylor_c, taylor_d


def test_parse_double_valid_and_invalid():
    assert parse_double("2.5") == 2.5
    with pytest.raises(ValueError):
        parse_double("2.5abc")


@pytest.mark.parametrize("x", [-2.0, 0.0, 0.5, 1.0, 3.0])
def test_taylor_a_is_exponential(x):
    assert taylor_a(x, 1e-12) == pytest.approx(math.exp(x), abs=1e-9)


@pytest.mark.parametrize("x", [-2.0, 0.0, 0.5, 1.0, 3.0])
def test_taylor_b_is_cosine(x):
    assert taylor_b(x, 1e-12) == pytest.approx(math.cos(x), abs=1e-9)


@pytest.mark.parametrize("x", [0.1, 0.5, 0.9])
def test_taylor_c_is_even(x):
    assert taylor_c(x, 1e-12) == pytest.approx(taylor_c(-x, 1e-12))


def test_taylor_c_at_zero_and_growth():
    assert taylor_c(0.0, 1e-9) == 1.0
    assert 1.0 < taylor_c(0.3, 1e-12) < taylor_c(0.6, 1e-12)


@pytest.mark.parametrize("x", [0.1, 0.5, 0.9])
def test_taylor_d_is_even(x):
    assert taylor_d(x, 1e-12) == pytest.approx(taylor_d(-x, 1e-12))


def test_taylor_d_at_zero():
    assert taylor_d(0.0, 1e-9) == 0


def test_taylor_d_leading_term():
    x = 0.1
    assert abs(taylor_d(x, 1e-15) + x * x / 2) <= x ** 4


@pytest.mark.parametrize("function", [taylor_c, taylor_d])
@pytest.mark.parametrize("x", [1.0, -1.5, 2.0])
def test_outside_unit_interval_rejected(function, x):
    with pytest.raises(ValueError):
        function(x, 1e-6)


@pytest.mark.parametrize("function", [taylor_a, taylor_b])
def test_overflow_raises(function):
    with pytest.raises(OverflowError):
        function(1000.0, 1e-6)


def test_main_inside_interval(capsys):
    assert main(["0.5", "0.000001"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"A: {taylor_a(0.5, 1e-6):.6f}"
    assert lines[1] == f"B: {taylor_b(0.5, 1e-6):.6f}"
    assert lines[2] == f"C: {taylor_c(0.5, 1e-6):.6f}"
    assert lines[3] == f"D: {taylor_d(0.5, 1e-6):.6f}"


def test_main_outside_interval(capsys):
    assert main(["2", "0.001"]) == 0
    out = capsys.readouterr().out
    assert "x must be between -1 and 1" in out
    assert "C:" not in out


def test_main_wrong_argument_count(capsys):
    assert main(["1"]) == 2
    assert "Error: invalid input" in capsys.readouterr().out


@pytest.mark.parametrize("args", [["x", "0.1"], ["1", "0"], ["1", "-0.5"]])
def test_main_incorrect_input(args, capsys):
    assert main(args) == 2
    assert "Error: incorrect input" in capsys.readouterr().out


def test_main_overflow(capsys):
    assert main(["1000", "0.000001"]) == 3
    assert "overflow" in capsys.readouterr().out