"""An alternative set of the four series sums, with shifted indexing."""

import math


def _check_unit_interval(x: float) -> None:
    if not abs(x) < 1:
        raise ValueError("x must be between -1 and 1")


def taylor_a(x, epsilon):
    """Sum of x^n / (n+1)!, which equals (e^x - 1) / x."""
    result = 0.0
    element = 1.0
    n = 0
    while abs(element) > epsilon:
        result += element
        n += 1
        element *= x / (n + 1.0)
        if math.isinf(element):
            raise OverflowError("series term overflowed")
    return result


def taylor_b(x, epsilon):
    """Sum of 2 (-1)^n x^2n / (2n+2)!, which equals 2 (1 - cos x) / x^2."""
    result = 0.0
    element = 1.0
    n = 0
    while abs(element) > epsilon:
        result += element
        n += 1
        element *= ((-1.0) * x * x) / ((2.0 * n + 2.0) * (2.0 * n + 1.0))
        if math.isinf(element):
            raise OverflowError("series term overflowed")
    return result


def taylor_c(x, epsilon):
    """Sum of 3^3n (n!)^3 x^2n / (3n)!, stopping when terms settle; requires |x| < 1."""
    _check_unit_interval(x)
    current = 1.0
    result = 1.0
    n = 0
    while True:
        previous = current
        current = (previous * (27.0 * (n + 1.0) * (n + 1.0) * (n + 1.0) * x * x)) / (
            (3.0 * n + 3.0) * (3.0 * n + 2.0) * (3.0 * n + 1.0)
        )
        n += 1
        result += current
        if not abs(previous - current) > epsilon:
            return result


def taylor_d(x, epsilon):
    """Terms from x^4 on of the series of 1/sqrt(1 + x^2); requires |x| < 1."""
    _check_unit_interval(x)
    current = (-1.0) * x * x * 0.5
    result = 0.0
    n = 1
    while True:
        previous = current
        current = previous * ((x * x * (-1.0) * (2.0 * n + 1.0)) / (2.0 * n + 2.0))
        n += 1
        result += current
        if not abs(previous - current) > epsilon:
            return result