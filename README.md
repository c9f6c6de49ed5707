# labtasks

A set of small, self-contained exercises. Each is a Python module, and most have
a command-line front end. They cover approximating mathematical constants,
power series, integer powers and geometric means, string manipulation, number
base conversions, sorting employee records and simple work on random arrays.
The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `labtasks-constants EPSILON` | Approximates e, pi, ln 2, sqrt 2 and the Euler-Mascheroni constant in three ways (limits, series and equations), printed to as many decimal places as EPSILON has. |
| `labtasks-taylor X EPSILON` | Sums four power series at `X`. Series C and D are only computed when `abs(X) < 1`. |
| `labtasks-powers` | Prints the geometric mean of a fixed set of five numbers and `2^12` worked out by repeated squaring. |
| `labtasks-text -l STR` | Prints the length of the string. |
| `labtasks-text -r STR` | Prints the string reversed. |
| `labtasks-text -u STR` | Upper-cases the ASCII lower-case letters at odd positions. |
| `labtasks-text -n STR` | Puts the digits first, then the ASCII letters, then everything else. |
| `labtasks-text -c SEED STR...` | Concatenates every string once, in an order drawn from a generator seeded with `SEED`. |
| `labtasks-numbers -FLAG X` | Runs a task on the integer `X`: `-h` lists the multiples of X from 1 to 100, `-p` says whether X is prime, `-s` prints the hexadecimal digits, `-e` prints a table of powers of 0 to 10 up to exponent X (X from 0 to 10), `-a` sums 1..X and `-f` gives X!, limited to 64-bit values. |
| `labtasks-bitbase [NUM R]` | Prints `NUM` in base 2^R (R from 1 to 5) using only bitwise arithmetic. Without arguments it reads the two numbers from standard input. |
| `labtasks-employees -a\|-d INPUT OUTPUT` | Reads employee records from INPUT, sorts them by salary (ascending with `a`, descending with `d`; ties by surname, name and id) and writes them to OUTPUT. The flag may also start with `/`. |
| `labtasks-arrays START STOP` | Generates 20 random numbers from the bounds and swaps the smallest with the largest. |
| `labtasks-arrays` | Generates two random arrays and adds each element of the first to its closest value in the second. |

Each command returns 0 on success and a non-zero exit status on invalid input,
overflow or a file that cannot be opened.

### Employee records

An input file for `labtasks-employees` holds records of four whitespace-separated
fields, usually one per line: a non-negative integer id, a name, a surname and a
non-negative salary. Names and surnames must be Latin letters only, at most 49
characters each. Output is written one field per line, with the salary to six
decimal places.

## Library use

Every module can be imported on its own:

```python
from labtasks.constants import limit_e, equation_sqrt
from labtasks.taylor import taylor_a
from labtasks.taylor_variant import taylor_b
from labtasks.numerics import solve_quadratic, next_permutation, is_right_triangle
from labtasks.powers import geometric_mean, int_pow
from labtasks.textops import string_reverse, change_string
from labtasks.number_tasks import factorial, int_to_hex
from labtasks.bitbase import to_power_of_two_base
from labtasks.employees import Employee, read_employees, sort_employees
from labtasks.arrays import closest_sums, swap_min_max

limit_e(1e-6)
int_pow(2.0, 12)              # 4096.0
string_reverse("abc")         # "cba"
factorial(5)                  # 120
int_to_hex(-255)              # "-FF"
to_power_of_two_base(10, 1)   # "1010"
solve_quadratic(1, -3, 2)     # (2.0, 1.0)
```

- `labtasks.taylor_variant` sums the same four kinds of series with shifted
  indexing and a different stopping rule.
- `labtasks.numerics` holds strict number parsing (`parse_double`, `parse_int`),
  quadratic roots, in-place `next_permutation` and `quick_sort`, a
  `PermutationPrinter` that numbers lines, and a right-triangle check.
- The random functions in `labtasks.arrays` accept an optional
  `random.Random` instance, so results can be reproduced.

Invalid input raises `ValueError`, and arithmetic overflow raises `OverflowError`.

## What the package does not do

`labtasks.numerics` and `labtasks.taylor_variant` are library modules only: no
command runs them. The `labtasks-arrays` command always draws from an unseeded
generator, so its output cannot be repeated from the command line.