"""Reading and writing employees as CSV text and as fixed-size binary records."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import BinaryIO, TextIO

from labtools.employee import NAME_SIZE, Employee
from labtools.linkedlist import LinkedList

TEXT_HEADER = "id,nombre,horas trabajadas,sueldo\n"

_RECORD = struct.Struct(f"<i{NAME_SIZE}sii")


def employees_from_text(stream: TextIO, employees: LinkedList) -> int:
    """Append the employees of a CSV stream to ``employees`` and return how many were added.

    The first line is a header and is skipped. Blank lines, lines with fewer
    than four fields and rows that do not make a valid employee are skipped.
    """
    count = 0
    lines = iter(stream)
    next(lines, None)
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        fields = line.split(",", 3)
        if len(fields) < 4 or not all(fields):
            continue
        try:
            employee = Employee.from_strings(*fields)
        except ValueError:
            continue
        employees.add(employee)
        count += 1
    return count


def employees_from_binary(stream: BinaryIO, employees: LinkedList) -> int:
    """Append the employees of a stream of binary records and return how many were added.

    A trailing partial record is ignored, and so are records that do not
    make a valid employee.
    """
    count = 0
    while True:
        chunk = stream.read(_RECORD.size)
        if len(chunk) < _RECORD.size:
            break
        employee_id, raw_name, hours, salary = _RECORD.unpack(chunk)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        try:
            employee = Employee(employee_id, name, hours, salary)
        except ValueError:
            continue
        employees.add(employee)
        count += 1
    return count


def employees_to_text(stream: TextIO, employees: Iterable[Employee]) -> int:
    """Write a header and one CSV row per employee; return the number of rows."""
    stream.write(TEXT_HEADER)
    count = 0
    for employee in employees:
        stream.write(f"{employee.id},{employee.name},{employee.hours_worked},{employee.salary}\n")
        count += 1
    return count


def employees_to_binary(stream: BinaryIO, employees: Iterable[Employee]) -> int:
    """Write one fixed-size record per employee; return the number of records."""
    count = 0
    for employee in employees:
        stream.write(
            _RECORD.pack(employee.id, employee.name.encode("utf-8"), employee.hours_worked, employee.salary)
        )
        count += 1
    return count