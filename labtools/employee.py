"""Employees with hours worked and salary, and the comparisons used to sort them."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

NAME_SIZE = 128
"""Bytes reserved for a name in the binary record, terminator included."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_POSITIVE_FIELDS = frozenset({"id", "hours_worked", "salary"})


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Employee:
    """An employee; every assignment is checked.

    ``id``, ``hours_worked`` and ``salary`` must be positive, and ``name``
    must be non-empty and fit in a binary record.
    """

    id: int
    name: str
    hours_worked: int
    salary: int

    def __setattr__(self, field: str, value: object) -> None:
        if field in _POSITIVE_FIELDS:
            if value <= 0:
                raise ValueError(f"{field} must be positive, got {value}")
        elif field == "name":
            if not value:
                raise ValueError("name must not be empty")
            if len(value.encode("utf-8")) >= NAME_SIZE:
                raise ValueError(f"name must be shorter than {NAME_SIZE} bytes")
        super().__setattr__(field, value)

    @classmethod
    def from_strings(cls, id_text: str, name: str, hours_text: str, salary_text: str) -> Employee:
        """Build an employee from text fields, reading the leading integer of each number.

        Text with no leading integer reads as 0, which is rejected.
        """
        return cls(_leading_int(id_text), name, _leading_int(hours_text), _leading_int(salary_text))


def format_employee(employee: Employee) -> str:
    """One table row: id, then name, hours and salary right-aligned."""
    return f"{employee.id}{employee.name:>10}{employee.hours_worked:8d}{employee.salary:20d}"


def _sign(a: object, b: object) -> int:
    return (a > b) - (a < b)


def compare_by_name(a: Employee, b: Employee) -> int:
    """Compare names ignoring case; returns -1, 0 or 1."""
    return _sign(a.name.lower(), b.name.lower())


def compare_by_id(a: Employee, b: Employee) -> int:
    return _sign(a.id, b.id)


def compare_by_hours(a: Employee, b: Employee) -> int:
    return _sign(a.hours_worked, b.hours_worked)


def compare_by_salary(a: Employee, b: Employee) -> int:
    return _sign(a.salary, b.salary)


def max_id(employees: Iterable[Employee]) -> int:
    """Highest id among ``employees``, or 0 when there are none."""
    return max((employee.id for employee in employees), default=0)