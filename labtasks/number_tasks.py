"""Small tasks on a single integer, chosen by a command-line flag."""

import sys

from .numerics import parse_int as _parse_int

INVALID_MEMORY = 1
INVALID_INPUT = 2

_LLONG_MAX = 2 ** 63 - 1
_ULLONG_MAX = 2 ** 64 - 1
_HEX_DIGITS = "0123456789ABCDEF"


def parse_int(text, base):
    """Parse the whole of text as an integer in base; raise ValueError otherwise."""
    return _parse_int(text, base)


def multiples_up_to_100(number):
    """Return the numbers from 1 to 100 that are multiples of number."""
    if number == 0:
        raise ZeroDivisionError("division by zero")
    return [i for i in range(1, 101) if i % number == 0]


def is_prime(n):
    """Return True when |n| is a prime number."""
    n = abs(n)
    if n <= 1:
        return False
    return all(n % d for d in range(2, n))


def hex_to_int(text):
    """Return the value of a string of upper-case hexadecimal digits.

    Characters that are not such digits count as zero digits.
    """
    total = 0
    for power, char in enumerate(reversed(text)):
        digit = _HEX_DIGITS.find(char)
        if digit > 0:
            total += digit * 16 ** power
    return total


def int_to_hex(number):
    """Return number in upper-case hexadecimal, with a leading '-' when negative."""
    sign = "-" if number < 0 else ""
    return sign + format(abs(number), "X")


def split_hex_digits(number):
    """Return the characters of the hexadecimal form of number."""
    return list(int_to_hex(number))


def degrees_table(number):
    """Return rows for the bases 0 to 10 of their powers 0 to number.

    table[base][degree] is base ** degree, with 0 ** 0 taken as 1.
    """
    if not 0 <= number <= 10:
        raise ValueError(f"exponent must be between 0 and 10: {number}")
    return [[base ** degree for degree in range(number + 1)] for base in range(11)]


def numbers_sum(number):
    """Return 1 + 2 + ... + number for a natural number."""
    if number < 1:
        raise ValueError(f"not a natural number: {number}")
    total = (1 + number) * number // 2
    if total > _LLONG_MAX:
        raise OverflowError("sum does not fit in 64 bits")
    return total


def factorial(number):
    """Return number!, raising OverflowError when it exceeds an unsigned 64-bit value."""
    result = 1
    for i in range(2, number + 1):
        if result > _ULLONG_MAX // i:
            raise OverflowError("factorial does not fit in 64 bits")
        result *= i
    return result


def _run_multiples(number: int) -> int:
    try:
        values = multiples_up_to_100(number)
    except ZeroDivisionError:
        print("Error: division by zero")
        return INVALID_INPUT
    if not values:
        print("There are no such numbers")
    else:
        print("Array of numbers:")
        print("".join(f"{value} " for value in values))
    return 0


def _run_prime(number: int) -> int:
    if number in (0, 1):
        print(f"Number {number} is not simple not compound ")
    elif is_prime(number):
        print(f"The number {number} is prime")
    else:
        print(f"The number {number} is compound (not prime)")
    return 0


def _run_hex(number: int) -> int:
    print(f"Hexadecimal representation of a number {number}:")
    print("".join(f"{char} " for char in split_hex_digits(number)))
    return 0


def _run_table(number: int) -> int:
    if number > 10 or number < 0:
        print("Error: invalid number")
        return INVALID_INPUT
    for base, row in enumerate(degrees_table(number)):
        for degree, value in enumerate(row):
            print(f"{base}^{degree} = {value}")
        print()
    return 0


def _run_sum(number: int) -> int:
    try:
        total = numbers_sum(number)
    except ValueError:
        print("Error: invalid input")
        return INVALID_MEMORY
    except OverflowError:
        print("Error: An overflow occurred")
        return INVALID_MEMORY
    print(f"Sum of numbers from 1 to {number}: {total}")
    return 0


def _run_factorial(number: int) -> int:
    if number < 0:
        print("Error: only positive numbers")
        return INVALID_INPUT
    try:
        result = factorial(number)
    except OverflowError:
        print("Error: An overflow occurred")
        return INVALID_MEMORY
    print(f"Factorial of a number {number}: {result}")
    return 0


_HANDLERS = {
    "h": _run_multiples,
    "p": _run_prime,
    "s": _run_hex,
    "e": _run_table,
    "a": _run_sum,
    "f": _run_factorial,
}


def main(argv=None):
    """Run the task named by the flag on the number given after it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("invalid input")
        return 0
    try:
        number = parse_int(args[1], 10)
    except ValueError:
        print("Error: Invalid number format entered")
        return INVALID_INPUT
    handler = _HANDLERS.get(args[0][1:2])
    if handler is None:
        return 0
    return handler(number)


if __name__ == "__main__":
    sys.exit(main())