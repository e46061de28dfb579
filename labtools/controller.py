"""Console actions over a list of employees: load, add, edit, remove, list, sort and save."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

from labtools.employee import (
    Employee,
    compare_by_hours,
    compare_by_id,
    compare_by_name,
    compare_by_salary,
    format_employee,
    max_id,
)
from labtools.linkedlist import LinkedList
from labtools.parser import (
    employees_from_binary,
    employees_from_text,
    employees_to_binary,
    employees_to_text,
)
from labtools.prompts import ask_int, ask_word

MAX_NAME_LENGTH = 50
MAX_HOURS = 400_000_000
MAX_SALARY = 40_000_000

_SORT_CRITERIA = {
    1: compare_by_id,
    2: compare_by_name,
    3: compare_by_hours,
    4: compare_by_salary,
}


class Controller:
    """Runs the interactive employee operations, reading answers and writing messages."""

    def __init__(
        self,
        employees: LinkedList | None = None,
        read: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self.employees = employees if employees is not None else LinkedList()
        self.read = read or input
        self.write = write or sys.stdout.write

    def _find(self, employee_id: int) -> int | None:
        return next(
            (index for index, employee in enumerate(self.employees) if employee.id == employee_id),
            None,
        )

    def _ask_int(self, message: str, minimum: int, maximum: int) -> int:
        return ask_int(message, minimum, maximum, self.read, self.write)

    def _ask_word(self, message: str, min_length: int, max_length: int) -> str:
        return ask_word(message, min_length, max_length, self.read, self.write)

    def load_from_text(self, path: str | os.PathLike[str]) -> int:
        """Append the employees of a CSV file; return how many were loaded.

        Raises OSError when the file cannot be opened.
        """
        try:
            stream = open(path, encoding="utf-8", newline="")
        except OSError:
            self.write("no se a podido abrir el archivo")
            raise
        with stream:
            self.write("archivo abierto existosamente ")
            count = employees_from_text(stream, self.employees)
        self.write(f"\n\nSe han cargado {count} empleados\n")
        return count

    def load_from_binary(self, path: str | os.PathLike[str]) -> int:
        """Append the employees of a binary file; return how many were loaded.

        A file that cannot be opened is reported and loads nothing.
        """
        try:
            stream = open(path, "rb")
        except OSError:
            self.write("\nError al leer el archivo\n")
            return 0
        with stream:
            count = employees_from_binary(stream, self.employees)
        self.write(f"se cargaron {count} empleados del archivo {os.path.basename(path)}\n")
        return count

    def add_employee(self) -> Employee:
        """Ask for a new employee's data, append it with the next free id and return it."""
        new_id = max_id(self.employees) + 1
        self.write(f"Empleado n:{new_id}\n")
        name = self._ask_word("Ingrese el nombre del nuevo empleado : ", 1, MAX_NAME_LENGTH)
        hours = self._ask_int("Ingrese las horas trabajadas del nuevo empleado : ", 1, MAX_HOURS)
        salary = self._ask_int("Ingrese el sueldo del nuevo empleado : ", 1, MAX_SALARY)
        employee = Employee(new_id, name, hours, salary)
        self.employees.add(employee)
        return employee

    def edit_employee(self) -> Employee | None:
        """Ask for an id and edit that employee's fields; return it, or None if not found."""
        employee_id = self._ask_int(
            "Ingrese el id del empleado que desea modificar :", 1, len(self.employees)
        )
        index = self._find(employee_id)
        if index is None:
            self.write("id de empleado inexistente\n")
            return None
        employee = self.employees.get(index)
        self.write("Empleado encontrado exitosamente\n\n")
        while True:
            self.write("id-----nombre---horas trabajadas------sueldo\n")
            self.write(format_employee(employee) + "\n\n")
            option = self._ask_int(
                "1. Nombre\n2. Horas trabajadas\n3.Sueldo\n4.Salir\n\n", 1, 4
            )
            if option == 1:
                employee.name = self._ask_word(
                    "Ingrese el nombre del empleado : ", 1, MAX_NAME_LENGTH
                )
            elif option == 2:
                employee.hours_worked = self._ask_int(
                    "Ingrese las horas trabajadas del nuevo empleado : ", 1, MAX_HOURS
                )
            elif option == 3:
                employee.salary = self._ask_int(
                    "Ingrese el sueldo del nuevo empleado : ", 1, MAX_SALARY
                )
            else:
                return employee

    def remove_employee(self) -> bool:
        """Ask for an id and, once confirmed, remove that employee; tell whether one was removed."""
        employee_id = self._ask_int(
            "Ingrese el id del empleado que desea eliminar :", 1, len(self.employees)
        )
        index = self._find(employee_id)
        if index is None:
            return False
        self.write("\n\nid---nombre---horas trabajadas----sueldo\n")
        self.write(format_employee(self.employees.get(index)) + "\n\n")
        while True:
            answer = self._ask_word(
                "\nDesea eliminar este empleado (ingrese si o no)?\n\n", 2, 2
            ).lower()
            if answer in ("si", "no"):
                break
        if answer == "no":
            return False
        self.employees.remove(index)
        self.write("\nEmpleado eliminado exitosamente\n")
        return True

    def list_employees(self) -> None:
        self.write("id---nombre---horas trabajadas----sueldo\n")
        for employee in self.employees:
            self.write(format_employee(employee) + "\n\n")

    def sort_employees(self) -> bool:
        """Ask for a criterion and an order and sort; tell whether a sort took place."""
        option = self._ask_int(
            "ordenar por :\n1.ID\n2.Nombre\n3.Horas trabajadas\n4.Sueldo\n5.Salir\n", 1, 5
        )
        compare = _SORT_CRITERIA.get(option)
        if compare is None:
            return False
        order = self._ask_int("Ordenar...\n1.Acendente\n0.Decendente\n\n", 0, 1)
        self.write("\nOrdenando...espere un momento por favor\n\n")
        self.employees.sort(compare, ascending=bool(order))
        self.write("Ordenamiento terminado\n")
        return True

    def save_as_text(self, path: str | os.PathLike[str]) -> int:
        """Write every employee to a CSV file; return how many were written."""
        try:
            stream = open(path, "w", encoding="utf-8", newline="")
        except OSError:
            self.write("Error.no se a podido abrir el archivo")
            raise
        with stream:
            return employees_to_text(stream, self.employees)

    def save_as_binary(self, path: str | os.PathLike[str]) -> int:
        """Write every employee to a binary file; return how many were written."""
        try:
            stream = open(path, "wb")
        except OSError:
            self.write("no se a podido guardar el archivo")
            raise
        with stream:
            count = employees_to_binary(stream, self.employees)
        self.write("Datos guardados en modo binario!!!\n")
        return count