"""Sums of four power series, each to a given accuracy."""

import math
import sys
from collections.abc import Callable

from .constants import parse_double as _parse_number

INVALID_INPUT = 2
OVERFLOW_ERROR = 3


def parse_double(text):
    """Parse a command-line number; raise ValueError if it is not one."""
    return _parse_number(text)


def _check_unit_interval(x: float) -> None:
    if not abs(x) < 1:
        raise ValueError("x must be between -1 and 1")


def _series(first: float, ratio: Callable[[int], float], epsilon: float) -> float:
    """Add terms while they exceed epsilon; each term is the last times ratio(n)."""
    result = 0.0
    element = first
    n = 0
    while abs(element) > epsilon:
        result += element
        n += 1
        element *= ratio(n)
        if math.isinf(element):
            raise OverflowError("series term overflowed")
    return result


def taylor_a(x, epsilon):
    """Sum of x^n / n!."""
    return _series(1.0, lambda n: x / n, epsilon)


def taylor_b(x, epsilon):
    """Sum of (-1)^n x^2n / (2n)!."""
    return _series(1.0, lambda n: (-1.0 * x * x) / (2 * n * (2 * n - 1.0)), epsilon)


def taylor_c(x, epsilon):
    """Sum of 3^3n (n!)^3 x^2n / (3n)!; requires |x| < 1."""
    _check_unit_interval(x)
    return _series(
        1.0,
        lambda n: (9.0 * n * n * x * x) / (9.0 * n * n - 9.0 * n + 2.0),
        epsilon,
    )


def taylor_d(x, epsilon):
    """Alternating sum of x^2n weighted by double-factorial ratios; requires |x| < 1."""
    _check_unit_interval(x)
    return _series(
        -1.0 * x * x / 2.0,
        lambda n: (-1.0 * x * x * (2.0 * n - 1)) / (2.0 * n),
        epsilon,
    )


def main(argv=None):
    """Print the four sums for x and epsilon given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Error: invalid input")
        return INVALID_INPUT
    try:
        x = parse_double(args[0])
        epsilon = parse_double(args[1])
    except ValueError:
        print("Error: incorrect input")
        return INVALID_INPUT
    if epsilon <= 0:
        print("Error: incorrect input")
        return INVALID_INPUT

    try:
        print(f"A: {taylor_a(x, epsilon):.6f}")
        print(f"B: {taylor_b(x, epsilon):.6f}")
        if abs(x) < 1:
            print(f"C: {taylor_c(x, epsilon):.6f}")
            print(f"D: {taylor_d(x, epsilon):.6f}")
        else:
            print("x must be between -1 and 1")
    except OverflowError:
        print("Error: overflow")
        return OVERFLOW_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())