"""Random arrays: swapping extremes and pairing values with their closest partners."""

import random
import sys

from .numerics import parse_int as _parse_int

VALID = 0
INVALID_MEMORY = 1
INVALID_INPUT = 2

_RAND_MAX = 2 ** 31 - 1
_TASK1_SIZE = 20


def _rand(rng: random.Random) -> int:
    return rng.randint(0, _RAND_MAX)


def _to_short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"array size must not be negative: {size}")


def parse_int(text, base):
    """Parse the whole of text as an integer in base; raise ValueError otherwise."""
    return _parse_int(text, base)


def generate_array(start, end, size, rng=None):
    """Return size random values of the form r mod (|end| + 1 - |start|) + start.

    The span is taken from the absolute values of the bounds, so for a
    negative start the values may cover less than the whole range. A zero
    span raises ValueError.
    """
    _check_size(size)
    span = abs(end) + 1 - abs(start)
    if span == 0:
        raise ValueError(f"empty range from {start} to {end}")
    rng = rng if rng is not None else random.Random()
    # The random draw is never negative, so the remainder takes the sign of
    # the draw and only the magnitude of the span matters.
    return [_rand(rng) % abs(span) + start for _ in range(size)]


def swap_min_max(values):
    """Swap the first smallest and the first largest element of values, in place."""
    if not values:
        return
    min_index = max_index = 0
    for index, value in enumerate(values):
        if value < values[min_index]:
            min_index = index
        if value > values[max_index]:
            max_index = index
    values[min_index], values[max_index] = values[max_index], values[min_index]


def generate_array_task2(start, end, size, rng=None):
    """Return size random integers drawn uniformly from start to end inclusive."""
    _check_size(size)
    span = end - start + 1
    if span <= 0:
        raise ValueError(f"empty range from {start} to {end}")
    rng = rng if rng is not None else random.Random()
    return [_to_short(start + _rand(rng) % span) for _ in range(size)]


def bubble_sort_by_abs(values):
    """Sort values in place by absolute value, keeping equal magnitudes in order."""
    values.sort(key=abs)


def find_closest(values, number):
    """Return the element of values closest to number.

    values must be sorted by absolute value. The search narrows on absolute
    values and then picks between the two neighbours by actual distance.
    """
    if not values:
        raise ValueError("cannot search an empty array")
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        diff = abs(values[mid]) - abs(number)
        if diff == 0:
            return values[mid]
        if diff < 0:
            low = mid + 1
        else:
            high = mid - 1
    if low == 0:
        return values[0]
    if low < len(values) and abs(values[low] - number) < abs(values[low - 1] - number):
        return values[low]
    return values[low - 1]


def closest_sums(array_a, array_b):
    """Return each element of array_a added to its closest element of array_b."""
    ordered = list(array_b)
    bubble_sort_by_abs(ordered)
    return [_to_short(a + find_closest(ordered, a)) for a in array_a]


def _line(values) -> str:
    return "".join(f"{value} " for value in values)


def _run_swap(args) -> int:
    try:
        start = parse_int(args[0], 10)
        stop = parse_int(args[1], 10)
    except ValueError:
        start, stop = 1, 0
    if start > stop:
        print("Error: invalid input")
        return INVALID_INPUT
    try:
        values = generate_array(start, stop, _TASK1_SIZE)
    except ValueError:
        print("Error: invalid input")
        return INVALID_INPUT
    print("Input array:")
    print(_line(values))
    swap_min_max(values)
    print("Result array:")
    print(_line(values))
    return VALID


def _run_closest() -> int:
    rng = random.Random()
    size_a = _rand(rng) % (100 + 1 - 10) + 10
    size_b = _rand(rng) % (100 + 1 - 10) + 10

    array_a = generate_array_task2(-1000, 1000, size_a, rng)
    print(f"Log: array is created, size = {size_a}")
    print("Array a")
    print(_line(array_a))
    print()

    array_b = generate_array_task2(-990, 990, size_b, rng)
    print(f"Log: array is created, size = {size_b}")
    print("Array b")
    print(_line(array_b))

    array_c = closest_sums(array_a, array_b)
    print()
    print("Log: array b is sorted")
    print()
    print("Result array c")
    print(_line(array_c))
    print()
    return VALID


def main(argv=None):
    """With two bounds, swap extremes of a random array; with none, pair two random arrays."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 2:
        return _run_swap(args)
    if not args:
        return _run_closest()
    print("Error: invalid input")
    return INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())