"""Read employee records, sort them by salary and write them back out."""

import functools
import re
import sys
from contextlib import ExitStack
from dataclasses import dataclass

OK = 0
INVALID_INPUT = 1
INVALID_MEMORY = 2
ERROR_OPEN_FILE = 3

EPSILON = 1e-10

_SPACE = re.compile(r"\s*")
_INT = re.compile(r"[+-]?\d+")
_WORD = re.compile(r"\S{1,49}")
_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_LETTERS = re.compile(r"[A-Za-z]+")


@dataclass
class Employee:
    """One employee record."""

    id: int
    name: str
    surname: str
    salary: float


def _scan(pattern: re.Pattern, text: str, pos: int):
    start = _SPACE.match(text, pos).end()
    return pattern.match(text, start)


def _validate(employee: Employee) -> None:
    if employee.id < 0:
        raise ValueError(f"negative id: {employee.id}")
    for field in (employee.name, employee.surname):
        if not _LETTERS.fullmatch(field):
            raise ValueError(f"name must consist of Latin letters: {field!r}")
    if employee.salary < 0:
        raise ValueError(f"negative salary: {employee.salary}")


def read_employees(stream):
    """Read records of id, name, surname and salary until the text ends.

    Reading stops quietly where an id is expected but none is found. A record
    that is cut short or holds an invalid field raises ValueError.
    """
    text = stream.read()
    employees = []
    pos = 0
    while True:
        match = _scan(_INT, text, pos)
        if match is None:
            return employees
        employee_id = int(match[0])
        pos = match.end()
        fields = []
        for pattern in (_WORD, _WORD, _FLOAT):
            match = _scan(pattern, text, pos)
            if match is None:
                raise ValueError("incomplete employee record")
            fields.append(match[0])
            pos = match.end()
        name, surname, salary = fields
        employee = Employee(employee_id, name, surname, float(salary))
        _validate(employee)
        employees.append(employee)


def write_employees(stream, employees):
    """Write each record as four lines: id, name, surname and salary."""
    for employee in employees:
        stream.write(
            f"{employee.id}\n{employee.name}\n{employee.surname}\n{employee.salary:.6f}\n"
        )


def _compare(a: Employee, b: Employee, descending: bool) -> int:
    difference = b.salary - a.salary if descending else a.salary - b.salary
    if difference > EPSILON:
        return 1
    if difference < -EPSILON:
        return -1
    left = (a.surname, a.name, a.id)
    right = (b.surname, b.name, b.id)
    return (left > right) - (left < right)


def sort_employees(employees, descending=False):
    """Return the employees ordered by salary, then surname, name and id.

    Salaries closer than EPSILON count as equal; descending reverses only the
    salary order.
    """
    key = functools.cmp_to_key(lambda a, b: _compare(a, b, descending))
    return sorted(employees, key=key)


def main(argv=None):
    """Sort the records of an input file into an output file: -a ascending, -d descending."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Invalid number of arguments")
        return INVALID_INPUT
    flag, input_path, output_path = args
    if len(flag) != 2 or flag[0] not in "-/":
        print("incorrect input")
        return INVALID_INPUT

    with ExitStack() as stack:
        try:
            source = stack.enter_context(open(input_path, encoding="latin-1"))
            target = stack.enter_context(open(output_path, "w", encoding="latin-1"))
        except OSError:
            print("error when opening file")
            return ERROR_OPEN_FILE
        if flag[1] not in ("a", "d"):
            print("incorrect input")
            return OK
        try:
            employees = read_employees(source)
        except ValueError:
            print("error")
            return INVALID_INPUT
        write_employees(target, sort_employees(employees, flag[1] == "d"))
    return OK


if __name__ == "__main__":
    sys.exit(main())