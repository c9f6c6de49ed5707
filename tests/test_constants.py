import math

import pytest

from labtasks.constants import (
    equation_e,
    equation_ln,
    equation_pi,
    equation_sqrt,
    equation_y,
    harmonic_sum,
    is_composite,
    limit_e,
    limit_ln,
    limit_pi,
    limit_sqrt,
    limit_y,
    main,
    parse_double,
    row_e,
    row_ln,
    row_pi,
    row_sqrt,
    row_y,
)


@pytest.mark.parametrize("text", ["0.001", "2.5", "-3", "1e-3", ".5"])
def test_parse_double_accepts_numbers(text):
    assert parse_double(text) == float(text)


def test_parse_double_allows_leading_space():
    assert parse_double("  2.5") == 2.5


@pytest.mark.parametrize("text", ["abc", "1.5x", "2.5 ", "1e400", "-1e400", "1e-400", " "])
def test_parse_double_rejects(text):
    with pytest.raises(ValueError):
        parse_double(text)


def test_parse_double_infinity_literal():
    assert parse_double("inf") == math.inf


def test_harmonic_sum_starts_at_one():
    assert harmonic_sum(1) == 1.0


@pytest.mark.parametrize("n", [2, 5, 10, 100])
def test_harmonic_sum_increments(n):
    assert harmonic_sum(n) - harmonic_sum(n - 1) == pytest.approx(1.0 / n)


@pytest.mark.parametrize("p", [3, 5, 7, 11, 13, 97, 101, -7])
def test_is_composite_false_for_odd_primes(p):
    assert not is_composite(p)


@pytest.mark.parametrize("n", [9, 15, 21, 25, 49, 100, -9])
def test_is_composite_true_for_composites(n):
    assert is_composite(n)


def test_is_composite_edge_values():
    assert is_composite(2)
    assert not is_composite(0)
    assert not is_composite(1)


def test_limits_approach_constants():
    assert abs(limit_e(1e-6) - math.e) < 1e-4
    assert abs(limit_pi(1e-6) - math.pi) < 1e-2
    assert abs(limit_ln(1e-6) - math.log(2)) < 1e-4
    assert abs(limit_sqrt(1e-10) - math.sqrt(2)) < 1e-8


def test_limit_y_approaches_gamma():
    assert abs(limit_y(1e-4) - 0.5772) < 1e-3


def test_rows_approach_constants():
    assert abs(row_e(1e-10) - math.e) < 1e-9
    assert abs(row_pi(1e-6) - math.pi) < 1e-2
    assert abs(row_ln(1e-6) - math.log(2)) < 1e-2
    assert abs(row_sqrt(1e-10) - math.sqrt(2)) < 1e-9


def test_row_y_is_finite_and_small():
    value = row_y(1e-3)
    assert math.isfinite(value)
    assert abs(value) < 1


def test_equations_approach_constants():
    assert abs(equation_e(1e-10) - math.e) < 1e-9
    assert abs(equation_pi(1e-10) - math.pi) < 1e-4
    assert abs(equation_ln(1e-10) - math.log(2)) < 1e-9
    assert abs(equation_sqrt(1e-10) - math.sqrt(2)) < 1e-9


def test_equation_y_is_positive_and_bounded():
    value = equation_y(1e-3)
    assert 0 < value < 1


def test_tighter_epsilon_is_not_worse():
    assert abs(limit_e(1e-7) - math.e) <= abs(limit_e(1e-3) - math.e)


def test_main_prints_all_sections(capsys):
    assert main(["0.1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Solution with accuracy 0.1")
    for heading in ("-LIMITS", "-ROWS", "-EQUATIONS"):
        assert heading in out
    assert out.count("result for gamma:") == 3
    assert out.count("result for e:") == 3


def test_main_wrong_argument_count(capsys):
    assert main([]) == 2
    assert "Invalid input" in capsys.readouterr().out


@pytest.mark.parametrize("arg", ["-1", "0", "abc"])
def test_main_bad_epsilon(arg, capsys):
    assert main([arg]) == 2
    assert "Incorrect epsilon" in capsys.readouterr().out