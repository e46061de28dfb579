"""A fixed-size staff table with hiring, dismissal and salary reports."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass

from labtools.prompts import ask_float, ask_int, ask_word, is_valid_word

MAX_NAME_LENGTH = 50
MAX_SALARY = 40_000_000_000_000
MAX_SECTOR = 100
DEFAULT_SIZE = 1000
HEADER = "id\tnombre\t\tapellido\tsalario\t\tsector\n"


class TableFullError(Exception):
    """Raised when every slot of the table is taken."""


@dataclass
class StaffMember:
    id: int
    name: str
    last_name: str
    salary: float
    sector: int
    active: bool = False


@dataclass(frozen=True)
class SalaryReport:
    total: float
    average: float
    above_average: int


class StaffTable:
    """A table of numbered slots; a member's id is its slot number plus one."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._slots = [StaffMember(slot + 1, " ", " ", 0.0, 0) for slot in range(size)]

    def free_slot(self) -> int | None:
        """Index of the first unused slot, or None when the table is full."""
        return next((slot for slot, member in enumerate(self._slots) if not member.active), None)

    def hire(self, name: str, last_name: str, salary: float, sector: int) -> StaffMember:
        """Store a new member in the first free slot and return it."""
        for word in (name, last_name):
            if not is_valid_word(word, 1, MAX_NAME_LENGTH):
                raise ValueError(f"{word!r} is not a valid name")
        if not 1 <= salary <= MAX_SALARY:
            raise ValueError(f"salary {salary} is out of range")
        if not 1 <= sector <= MAX_SECTOR:
            raise ValueError(f"sector {sector} is out of range")
        slot = self.free_slot()
        if slot is None:
            raise TableFullError("the staff table is full")
        member = StaffMember(slot + 1, name, last_name, float(salary), sector, True)
        self._slots[slot] = member
        return member

    def member(self, member_id: int) -> StaffMember:
        """Return the active member with ``member_id``; raises KeyError otherwise."""
        if 1 <= member_id <= self.size:
            member = self._slots[member_id - 1]
            if member.active:
                return member
        raise KeyError(member_id)

    def fire(self, member_id: int) -> None:
        """Free the slot of the active member with ``member_id``."""
        self.member(member_id).active = False

    def active(self) -> list[StaffMember]:
        return [member for member in self._slots if member.active]

    def sort_by_sector_and_last_name(self) -> list[StaffMember]:
        """Active members ordered by sector, then by last name."""
        return sorted(self.active(), key=lambda member: (member.sector, member.last_name))

    def salary_report(self) -> SalaryReport:
        members = self.active()
        total = sum(member.salary for member in members)
        average = total / len(members) if members else 0.0
        above = sum(1 for member in members if member.salary > average)
        return SalaryReport(total, average, above)


def format_member(member: StaffMember) -> str:
    return f"{member.id}{member.name:>13}{member.last_name:>18}{member.salary:15.2f}{member.sector:15d}"


_Read = Callable[[], str]
_Write = Callable[[str], object]


def _hire(table: StaffTable, read: _Read, write: _Write) -> None:
    slot = table.free_slot()
    if slot is None:
        write("\nmemoria llena\n")
        return
    write(f"id :{slot + 1}.\n")
    name = ask_word("Ingrese el nombre del empleado : ", 1, MAX_NAME_LENGTH, read, write)
    last_name = ask_word("Ingrese el apellido del empleado : ", 1, MAX_NAME_LENGTH, read, write)
    salary = ask_float("Ingrese el sueldo del empleado : ", 1, MAX_SALARY, read, write)
    sector = ask_int("Ingrese el sector del empleado : ", 1, MAX_SECTOR, read, write)
    table.hire(name, last_name, salary, sector)
    write("\nEmpleado ingresado exitosamente!!!\n")


def _modify(table: StaffTable, read: _Read, write: _Write) -> None:
    member_id = ask_int("Ingrese el numero de id del empleado a modificar :", 1, table.size, read, write)
    try:
        member = table.member(member_id)
    except KeyError:
        write("Error,id de empleado inexistente\n\n")
        return
    while True:
        write("\n" + HEADER + "\n" + format_member(member) + "\n")
        option = ask_int(
            "\nQue desea modificar?\n\n1. Nombre\n2. Apellido\n3. Salario\n4. Sector\n5. Para salir\n",
            1, 5, read, write,
        )
        if option == 1:
            member.name = ask_word("Ingrese el nombre del empleado : \n", 1, MAX_NAME_LENGTH, read, write)
        elif option == 2:
            member.last_name = ask_word("Ingrese el apellido del empleado : \n", 1, MAX_NAME_LENGTH, read, write)
        elif option == 3:
            member.salary = ask_float("Ingrese el sueldo del empleado : ", 1, MAX_SALARY, read, write)
        elif option == 4:
            member.sector = ask_int("Ingrese el sector del empleado : ", 1, MAX_SECTOR, read, write)
        else:
            return


def _fire(table: StaffTable, read: _Read, write: _Write) -> None:
    member_id = ask_int("Ingrese el numero de id del empleado a dar de baja :", 1, table.size, read, write)
    try:
        member = table.member(member_id)
    except KeyError:
        write("\nid de empleado inexistente\n")
        return
    write("\n" + HEADER + "\n" + format_member(member) + "\n")
    while True:
        answer = ask_word("\nDesea eliminar a este empleado?\n", 1, 1, read, write).lower()
        if answer == "s":
            table.fire(member_id)
            write("\nSe a eliminado el empleado\n")
            return
        if answer == "n":
            return
        write("error")


def _report(table: StaffTable, read: _Read, write: _Write) -> None:
    option = ask_int(
        "1.Mostrar informacion de empleados\n2.Mostrar informacion de salarios\n3.Salir\nQue desea hacer?\n",
        1, 3, read, write,
    )
    if option == 1:
        members = table.sort_by_sector_and_last_name()
        if not members:
            write("\nNo se han ingresado empleados\n")
            return
        write(HEADER)
        for member in members:
            write("\n" + format_member(member) + "\n")
    elif option == 2:
        report = table.salary_report()
        write(
            f"Suma total de los salarios :{report.total:.2f}\n"
            f"Promedio de los salarios :{report.average:.2f}\n"
            f"Cantidad de empleados que superan el promedio :{report.above_average}\n"
        )


def _run(table: StaffTable, read: _Read, write: _Write) -> None:
    actions = {1: _hire, 2: _modify, 3: _fire, 4: _report}
    while True:
        option = ask_int(
            "1. Altas\n2. Modificar\n3. Bajas\n4. Informar\n5. Salir\nQue desea hacer?\n\n",
            1, 5, read, write,
        )
        if option == 5:
            return
        actions[option](table, read, write)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive staff manager on the console."""
    try:
        _run(StaffTable(DEFAULT_SIZE), input, sys.stdout.write)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())