import pytest

from labtasks.powers import geometric_mean, int_pow, main


def test_geometric_mean_of_equal_values():
    assert geometric_mean(4.0, 4.0, 4.0) == pytest.approx(4.0)
    assert geometric_mean(7.5) == pytest.approx(7.5)


def test_geometric_mean_between_min_and_max():
    values = (5.6, 2.4, 9.2, 5.5, 7.3)
    mean = geometric_mean(*values)
    assert min(values) < mean < max(values)


def test_geometric_mean_with_zero():
    assert geometric_mean(0.0, 3.0) == 0.0


def test_geometric_mean_scales_linearly():
    base = geometric_mean(1.5, 2.0, 9.0)
    assert geometric_mean(3.0, 4.0, 18.0) == pytest.approx(2 * base)


def test_geometric_mean_errors():
    with pytest.raises(ValueError):
        geometric_mean()
    with pytest.raises(ValueError):
        geometric_mean(1.0, -2.0)
    with pytest.raises(OverflowError):
        geometric_mean(1e200, 1e200, 1e200)


@pytest.mark.parametrize("base,degree", [(2.0, 12), (3.0, 5), (1.5, 7), (-2.0, 3), (2.0, -3), (10.0, 0)])
def test_int_pow_matches_builtin(base, degree):
    assert int_pow(base, degree) == pytest.approx(base ** degree)


def test_int_pow_zero_degree_is_one():
    assert int_pow(123.0, 0) == 1.0


def test_int_pow_overflow():
    with pytest.raises(OverflowError):
        int_pow(10.0, 400)
    with pytest.raises(OverflowError):
        int_pow(0.0, -1)


def test_main_prints_results(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Geometric mean: ")
    assert lines[1] == "int pow 2^12: 4096.00"