"""Conversion to bases 2, 4, 8, 16 and 32 using only bitwise arithmetic."""

import re
import sys

INVALID_INPUT = 1

_MASK = (1 << 64) - 1
_SIGN_BIT = 1 << 63
_BASE_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_INPUT = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")
_INCOMPLETE = re.compile(r"\s*(?:[+-]|[+-]?\d+\s*[+-]?)?\s*")


def _to_signed(value: int) -> int:
    value &= _MASK
    return value - (1 << 64) if value & _SIGN_BIT else value


def bit_add(a, b):
    """Add two integers with XOR and carries, wrapping as a 64-bit signed integer."""
    result = (a ^ b) & _MASK
    carry = ((a & b) << 1) & _MASK
    while carry:
        result, carry = (result ^ carry) & _MASK, ((result & carry) << 1) & _MASK
    return _to_signed(result)


def negate(n):
    """Return -n computed as ~n + 1."""
    return bit_add(~n, 1)


def subtract(a, b):
    """Return a - b computed as a + (-b)."""
    return bit_add(a, negate(b))


def to_power_of_two_base(num, r):
    """Write num in base 2**r, for r from 1 to 5, with a leading '-' when negative."""
    if not 1 <= r <= 5:
        raise ValueError(f"base exponent must be between 1 and 5: {r}")
    if not -_SIGN_BIT <= num < _SIGN_BIT:
        raise ValueError(f"number out of range: {num}")
    negative = num < 0
    magnitude = negate(num) & _MASK if negative else num
    mask = subtract(1 << r, 1)
    digits = []
    while True:
        digits.append(_BASE_DIGITS[magnitude & mask])
        magnitude >>= r
        if magnitude <= 0:
            break
    return ("-" if negative else "") + "".join(reversed(digits))


def _read_stdin() -> str:
    text = ""
    for line in sys.stdin:
        text += line
        if _INPUT.match(text) or not _INCOMPLETE.fullmatch(text):
            break
    return text


def main(argv=None):
    """Read a decimal number and an exponent r, and print the number in base 2**r."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Enter decimal number and base: ", end="", flush=True)
    text = " ".join(args) if args else _read_stdin()
    match = _INPUT.match(text)
    try:
        if match is None:
            raise ValueError("expected a number and a base")
        digits = to_power_of_two_base(int(match[1]), int(match[2]))
    except ValueError:
        print("Error", end="")
        return INVALID_INPUT
    print(f"Result: {digits}")
    return 0


if __name__ == "__main__":
    sys.exit(main())