"""Number parsing, quadratic roots, permutations, sorting and right triangles."""

import math
import re
import sys

from .constants import parse_double as _parse_number

_LONG_MIN = -(2 ** 63)
_LONG_MAX = 2 ** 63 - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WHITESPACE = " \t\n\v\f\r"


class PermutationPrinter:
    """Formats successive permutations, numbering each line from 1."""

    def __init__(self, start=1):
        self.number = start

    def format(self, values):
        """Return the numbered line for values and advance the counter."""
        line = f"{self.number}: " + "".join(f" {value:.6f}" for value in values)
        self.number += 1
        return line


def parse_double(text):
    """Parse a decimal number; raise ValueError if the text is not one."""
    return _parse_number(text)


def parse_int(text, base):
    """Parse an integer in the given base the way strtol does, but strictly.

    Leading whitespace and a sign are accepted; base 16 and base 0 accept a
    0x prefix, and base 0 picks octal for a leading zero. Trailing text or a
    value outside the signed 64-bit range raises ValueError. The empty
    string parses as zero.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"unsupported base: {base}")
    if text == "":
        return 0
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if base in (0, 16) and re.match(r"0[xX][0-9a-fA-F]", body):
        body = body[2:]
        base = 16
    elif base == 0:
        base = 8 if body.startswith("0") else 10
    allowed = _DIGITS[:base]
    count = 0
    for char in body:
        if char.lower() not in allowed:
            break
        count += 1
    if count == 0:
        raise ValueError(f"not an integer: {text!r}")
    if count != len(body):
        raise ValueError(f"trailing characters in {text!r}")
    value = sign * int(body[:count], base)
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def check_overflow_double(num1, num2, epsilon):
    """Return True when num1 * num2 stays within the range of a double."""
    product = num1 * num2
    return product - sys.float_info.max <= epsilon and product + sys.float_info.max >= epsilon


def solve_quadratic(a, b, c):
    """Return the real roots of a x^2 + b x + c = 0 as a tuple of 0, 1 or 2 values.

    With a == 0 the single root of the linear equation is returned; with
    a == 0 and b == 0 there is no equation to solve and ZeroDivisionError
    is raised.
    """
    if a == 0:
        if b == 0:
            raise ZeroDivisionError("both a and b are zero")
        return (-c / b,)
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        return (-b / (2 * a),)
    return ()


def next_permutation(values, epsilon):
    """Rearrange values into the next permutation in order, in place.

    Values closer than epsilon count as equal. Return False when values is
    already the last permutation, leaving it unchanged.
    """

    def not_less(x, y):
        return x > y or abs(x - y) < epsilon

    j = len(values) - 2
    while j >= 0 and not_less(values[j], values[j + 1]):
        j -= 1
    if j < 0:
        return False
    k = len(values) - 1
    while not_less(values[j], values[k]):
        k -= 1
    values[j], values[k] = values[k], values[j]
    values[j + 1:] = values[:j:-1]
    return True


def quick_sort(values):
    """Sort values in place in ascending order."""
    if len(values) < 2:
        return
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        left, right = low, high
        pivot = values[left]
        while left < right:
            while values[right] > pivot and left < right:
                right -= 1
            if left != right:
                values[left] = values[right]
                left += 1
            while values[left] < pivot and left < right:
                left += 1
            if left != right:
                values[right] = values[left]
                right -= 1
        values[left] = pivot
        if low < left:
            ranges.append((low, left - 1))
        if high > left:
            ranges.append((left + 1, high))


def is_right_triangle(epsilon, side1, side2, side3):
    """Return True when the three sides form a right triangle, to within epsilon.

    Raise OverflowError when a side's square is out of range and ValueError
    when a side is not larger than epsilon.
    """
    if not all(check_overflow_double(side, side, epsilon) for side in (side1, side2, side3)):
        raise OverflowError("side is too large")
    if side1 <= epsilon or side2 <= epsilon or side3 <= epsilon:
        raise ValueError("sides must be positive")
    s1, s2, s3 = side1 * side1, side2 * side2, side3 * side3
    return (
        abs(s1 + s2 - s3) <= epsilon
        or abs(s1 + s3 - s2) <= epsilon
        or abs(s2 + s3 - s1) <= epsilon
    )