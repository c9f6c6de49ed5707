"""String operations chosen by a command-line flag."""

import random
import re
import sys

from .numerics import parse_int

VALID = 0
INVALID_MEMORY = 1
INVALID_INPUT = 2

_UINT_MASK = 0xFFFFFFFF


def string_len(text):
    """Return the number of characters in text."""
    return len(text)


def string_reverse(text):
    """Return text reversed."""
    return text[::-1]


def odd_to_upper(text):
    """Upper-case the ASCII letters at odd positions."""
    return "".join(
        char.upper() if index % 2 and "a" <= char <= "z" else char
        for index, char in enumerate(text)
    )


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def change_string(text):
    """Return the digits of text, then its ASCII letters, then everything else."""
    digits = [c for c in text if _is_digit(c)]
    letters = [c for c in text if _is_letter(c)]
    others = [c for c in text if not _is_digit(c) and not _is_letter(c)]
    return "".join(digits + letters + others)


def convert_str_to_int(text, base):
    """Parse an integer and wrap it into the unsigned 32-bit range."""
    return parse_int(text, base) & _UINT_MASK


def concat_random(strings, seed):
    """Concatenate every string once, in an order drawn from a generator seeded by seed."""
    rng = random.Random(seed)
    remaining = list(strings)
    used = [False] * len(remaining)
    parts = []
    for _ in remaining:
        index = rng.randrange(len(remaining))
        while used[index]:
            index = rng.randrange(len(remaining))
        used[index] = True
        parts.append(remaining[index])
    return "".join(parts)


def _atoi(text: str) -> int:
    match = re.match(r"[ \t\n\v\f\r]*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv=None):
    """Run the string operation named by the flag on the arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2 or not args[0].startswith("-"):
        print("invalid_input")
        return INVALID_INPUT

    flag = args[0][1:2]
    single = {
        "l": ("invalid input", lambda s: f"Length of string '{s}': {string_len(s)}"),
        "r": ("invalid_input", lambda s: f"Reverse string of '{s}': {string_reverse(s)}"),
        "u": ("invalid input", lambda s: f"Odd upper string of '{s}': {odd_to_upper(s)}"),
        "n": ("invalid_input", lambda s: f"Processed string of '{s}': {change_string(s)}"),
    }
    if flag in single:
        error, render = single[flag]
        if len(args) != 2:
            print(error)
            return INVALID_INPUT
        print(render(args[1]))
    elif flag == "c":
        seed = _atoi(args[1]) & _UINT_MASK
        print(f"Concat strings: {concat_random(args[2:], seed)}")
    else:
        print("invalid_flag")
    return VALID


if __name__ == "__main__":
    sys.exit(main())