"""Approximations of e, pi, ln 2, sqrt 2 and the Euler-Mascheroni constant.

Each constant is computed three ways: as the limit of a sequence, as the sum
of a series and as the root of an equation.
"""

import math
import re
import sys
from collections.abc import Callable, Iterable, Iterator

INVALID_INPUT = 2

_FLOAT_RE = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_NONZERO_DIGIT = re.compile(r"[1-9]")


def parse_double(text):
    """Parse a decimal number, rejecting trailing garbage and out-of-range values."""
    if text == "":
        # An empty string converts to zero without error.
        return 0.0
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    value = float(text)
    literal = text.strip().lstrip("+-").lower()
    if math.isinf(value) and not literal.startswith("inf"):
        raise ValueError(f"number out of range: {text!r}")
    mantissa = re.split(r"e", literal)[0]
    if value == 0.0 and _NONZERO_DIGIT.search(mantissa):
        raise ValueError(f"number out of range: {text!r}")
    return value


def harmonic_sum(n):
    """Return 1 + 1/2 + ... + 1/n, summed from the left."""
    total = 1.0
    for i in range(2, n + 1):
        total += 1.0 / i
    return total


def is_composite(number):
    """Return True when number has a divisor other than 1 and itself.

    Every even number, 2 included, counts as composite; 0 and 1 do not.
    """
    number = abs(number)
    if number in (0, 1):
        return False
    if number % 2 == 0:
        return True
    return any(number % d == 0 for d in range(3, math.isqrt(number) + 1, 2))


def _until_stable(initial: float, values: Iterable[float], epsilon: float) -> float:
    """Return the first value that differs from its predecessor by less than epsilon."""
    previous = initial
    for current in values:
        if not abs(previous - current) >= epsilon:
            return current
        previous = current
    return previous


def _newton(
    f: Callable[[float], float],
    df: Callable[[float], float],
    x: float,
    epsilon: float,
) -> float:
    residual = 1.0
    try:
        while abs(residual) > epsilon:
            residual = f(x)
            x -= residual / df(x)
    except (ValueError, ZeroDivisionError, OverflowError):
        return math.nan
    return x


def limit_e(epsilon):
    """e as the limit of (1 + 1/n)^n."""

    def values() -> Iterator[float]:
        n = 1.0
        while True:
            n *= 2
            yield (1.0 + 1.0 / n) ** n

    return _until_stable(0.0, values(), epsilon)


def limit_pi(epsilon):
    """pi as the Wallis product."""

    def values() -> Iterator[float]:
        current = 4.0
        n = 2
        while True:
            current *= (4.0 * n * (n - 1.0)) / (2.0 * n - 1.0) ** 2
            n += 1
            yield current

    return _until_stable(4.0, values(), epsilon)


def limit_ln(epsilon):
    """ln 2 as the limit of n(2^(1/n) - 1)."""

    def values() -> Iterator[float]:
        n = 1.0
        while True:
            n *= 2
            yield n * (2.0 ** (1.0 / n) - 1.0)

    return _until_stable(0.0, values(), epsilon)


def limit_sqrt(epsilon):
    """sqrt 2 as the limit of x -> (2x - x^2 + 2) / 2 starting at -1/2."""

    def values() -> Iterator[float]:
        x = -0.5
        while True:
            x = (2.0 * x - x * x + 2.0) / 2.0
            yield x

    return _until_stable(-0.5, values(), epsilon)


def limit_y(epsilon):
    """The Euler-Mascheroni constant as the limit of H(n) - ln n."""

    def values() -> Iterator[float]:
        n = 1
        while True:
            n *= 2
            yield harmonic_sum(n) - math.log(n)

    return _until_stable(1.0, values(), epsilon)


def row_e(epsilon):
    """e as the sum of 1/n!, at most twenty terms."""
    current = previous = 0.0
    factorial = 1.0
    for n in range(20):
        factorial = 1.0 if n == 0 else factorial * n
        current += 1.0 / factorial
        if current - previous < epsilon:
            return current
        previous = current
    return current


def row_pi(epsilon):
    """pi as four times the Leibniz series."""

    def values() -> Iterator[float]:
        current = 1.0
        n = 1
        while True:
            n += 1
            current -= 1.0 / (2.0 * n - 1.0)
            n += 1
            current += 1.0 / (2.0 * n - 1.0)
            yield current

    return _until_stable(1.0, values(), epsilon) * 4


def row_ln(epsilon):
    """ln 2 as the alternating harmonic series."""

    def values() -> Iterator[float]:
        current = 1.0
        n = 1
        while True:
            n += 1
            current -= 1.0 / n
            n += 1
            current += 1.0 / n
            yield current

    return _until_stable(1.0, values(), epsilon)


def row_sqrt(epsilon):
    """sqrt 2 as the product of 2^(1/2^k) for k >= 2."""
    first = 2.0 ** 0.25

    def values() -> Iterator[float]:
        current = first
        k = 2
        while True:
            k += 1
            current *= 2.0 ** (1.0 / 2.0 ** k)
            yield current

    return _until_stable(first, values(), epsilon)


def row_y(epsilon):
    """The Euler-Mascheroni constant from the series of 1/floor(sqrt k)^2 - 1/k."""

    def values() -> Iterator[float]:
        current = 0.5
        k = 2
        while True:
            k += 1
            root = math.sqrt(k)
            if math.fmod(root, 1.0) == 0:
                k += 1
                root = int(math.pow(k, 0.5))
            current += 1.0 / float(int(root)) ** 2 - 1.0 / k
            yield current

    return _until_stable(0.5, values(), epsilon) - math.pi ** 2 / 6


def equation_e(epsilon):
    """e as the root of ln x = 1."""
    return _newton(lambda x: math.log(x) - 1, lambda x: 1.0 / x, 3.0, epsilon)


def equation_pi(epsilon):
    """pi as the root of cos x = -1."""
    return _newton(lambda x: math.cos(x) + 1, lambda x: -math.sin(x), 1.0, epsilon)


def equation_ln(epsilon):
    """ln 2 as the root of e^x = 2."""
    return _newton(lambda x: math.exp(x) - 2, math.exp, 1.0, epsilon)


def equation_sqrt(epsilon):
    """sqrt 2 as the root of x^2 = 2."""
    return _newton(lambda x: x * x - 2, lambda x: 2 * x, 1.0, epsilon)


def equation_y(epsilon):
    """The Euler-Mascheroni constant from Mertens' product over primes."""
    first = math.log(2) * 0.5

    def values() -> Iterator[float]:
        p = 2
        product = 0.5
        while True:
            p += 1
            while is_composite(p):
                p += 1
            product *= (p - 1.0) / p
            yield math.log(p) * product

    return -math.log(_until_stable(first, values(), epsilon))


_NAMES = ("e", "pi", "ln2", "sqrt2", "gamma")
_METHODS = (
    ("LIMITS", (limit_e, limit_pi, limit_ln, limit_sqrt, limit_y)),
    ("ROWS", (row_e, row_pi, row_ln, row_sqrt, row_y)),
    ("EQUATIONS", (equation_e, equation_pi, equation_ln, equation_sqrt, equation_y)),
)


def _decimal_places(epsilon: float) -> int:
    places = 0
    temp = epsilon
    while temp < 1:
        temp *= 10
        places += 1
    return places


def main(argv=None):
    """Print every constant computed every way to the accuracy given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Invalid input")
        return INVALID_INPUT
    try:
        epsilon = parse_double(args[0])
    except ValueError:
        epsilon = 0.0
    if not epsilon > 0 and not math.isnan(epsilon):
        print("Incorrect epsilon")
        return INVALID_INPUT

    places = _decimal_places(epsilon)
    parts = [f"Solution with accuracy {epsilon:.{places}f}"]
    for way, functions in _METHODS:
        parts.append(f"\n-{way}")
        for name, function in zip(_NAMES, functions):
            parts.append(f"\nresult for {name}:")
            value = function(epsilon)
            if value != math.inf and not math.isnan(value):
                parts.append(f" {value:.{places}f}")
            else:
                parts.append("Couldn't calculate constant with given accuracy")
    print("".join(parts))
    return 0


if __name__ == "__main__":
    sys.exit(main())