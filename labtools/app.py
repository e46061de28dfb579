"""The employee manager's main menu."""

from __future__ import annotations

import sys
from collections.abc import Callable

from labtools.controller import Controller
from labtools.linkedlist import LinkedList
from labtools.prompts import ask_int

MENU = (
    "Menu:\n"
    "1. Cargar los datos de los empleados desde el archivo data.csv (modo texto).\n"
    "2. Cargar los datos de los empleados desde el archivo data.bin (modo binario).\n"
    "3. Alta de empleado.\n"
    "4. Modificar datos de empleado.\n"
    "5. Baja de empleado.\n"
    "6. Listar empleados.\n"
    "7. Ordenar empleados.\n"
    "8. Guardar los datos de los empleados en el archivo data.csv (modo texto).\n"
    "9. Guardar los datos de los empleados en el archivo data.bin (modo binario).\n"
    "10. Salir\n\n"
)

NOT_LOADED = "Primero debe cargar el archivo\n"
NO_EMPLOYEES = "No se han ingresado empleados\n"


def run(
    read: Callable[[], str],
    write: Callable[[str], object],
    text_path: str = "data.csv",
    binary_path: str = "data.bin",
) -> LinkedList:
    """Run the menu until the exit option is chosen; return the employees held at the end."""
    controller = Controller(LinkedList(), read, write)
    employees = controller.employees
    loaded = False
    while True:
        option = ask_int(MENU, 1, 10, read, write)
        if option == 10:
            return employees
        if option == 1:
            if loaded:
                write("Ya se ha cargado el archivo\n")
            else:
                controller.load_from_text(text_path)
                loaded = True
        elif option == 2:
            if loaded:
                write("Ya se a cargado el archivo\n")
            else:
                controller.load_from_binary(binary_path)
                loaded = True
        elif option == 3:
            if loaded:
                controller.add_employee()
            else:
                write(NOT_LOADED)
        elif option in (4, 5, 6, 7):
            if not len(employees):
                write(NO_EMPLOYEES)
            elif option == 4:
                controller.edit_employee()
            elif option == 5:
                controller.remove_employee()
            elif option == 6:
                controller.list_employees()
            else:
                controller.sort_employees()
        elif option == 8:
            if loaded:
                controller.save_as_text(text_path)
            else:
                write(NOT_LOADED)
        elif option == 9:
            if loaded:
                controller.save_as_binary(binary_path)
            else:
                write(NOT_LOADED)


def main(argv: list[str] | None = None) -> int:
    """Run the employee manager on the console with data.csv and data.bin."""
    try:
        run(input, sys.stdout.write)
    except EOFError:
        pass
    except OSError as error:
        sys.stderr.write(f"\n{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())