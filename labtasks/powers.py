"""Geometric mean of several numbers and integer powers by repeated squaring."""

import math
import sys

OVERFLOW_ERROR = 3


def geometric_mean(*args):
    """Return the geometric mean of the arguments.

    Raise ValueError with no arguments or a negative one, and OverflowError
    when the running product leaves the range of a float.
    """
    if not args:
        raise ValueError("at least one value is required")
    product = 1.0
    for value in args:
        if value < 0:
            raise ValueError(f"negative value: {value}")
        product *= value
        if math.isnan(product) or math.isinf(product):
            raise OverflowError("product overflowed")
    return product ** (1.0 / len(args))


def _power(base: float, degree: int) -> float:
    if degree == 0:
        return 1.0
    if degree & 1:
        return _power(base, degree - 1) * base
    half = _power(base, degree // 2)
    return half * half


def int_pow(base, degree):
    """Return base raised to the integer degree; raise OverflowError if out of range."""
    if degree < 0:
        if base == 0:
            raise OverflowError("zero to a negative power")
        return int_pow(1.0 / base, -degree)
    result = _power(float(base), degree)
    if math.isnan(result) or math.isinf(result):
        raise OverflowError("power overflowed")
    return result


def main(argv=None):
    """Print a sample geometric mean and a sample power."""
    try:
        mean = geometric_mean(5.6, 2.4, 9.2, 5.5, 7.3)
    except ValueError:
        print("invalid_input")
        return 1
    except OverflowError:
        print("overflow error")
        return OVERFLOW_ERROR
    print(f"Geometric mean: {mean:.6f}")

    x = 2.0
    grad = 12
    try:
        result = int_pow(x, grad)
    except OverflowError:
        print("overflow error")
        return OVERFLOW_ERROR
    print(f"int pow {x:.0f}^{grad}: {result:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())