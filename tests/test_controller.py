import pytest

from labtools.controller import Controller
from labtools.employee import Employee, format_employee
from labtools.linkedlist import LinkedList


def _make(answers, employees=None):
    answers_iter = iter(answers)
    output = []
    controller = Controller(
        employees if employees is not None else LinkedList(),
        lambda: next(answers_iter),
        output.append,
    )
    return controller, output


def _staff():
    return LinkedList(
        [
            Employee(1, "Ana", 10, 300),
            Employee(2, "Bob", 30, 100),
            Employee(3, "Carla", 20, 200),
        ]
    )


def test_add_employee_to_empty_list_gets_id_one():
    controller, output = _make(["Ana", "40", "1000"])
    employee = controller.add_employee()
    assert (employee.id, employee.name, employee.hours_worked, employee.salary) == (1, "Ana", 40, 1000)
    assert list(controller.employees) == [employee]
    assert "Empleado n:1\n" in output


def test_add_employee_uses_next_id_after_max():
    employees = LinkedList([Employee(5, "Ana", 1, 1), Employee(2, "Bob", 1, 1)])
    controller, _ = _make(["Dan", "8", "90"], employees)
    employee = controller.add_employee()
    assert employee.id == 6
    assert len(employees) == 3
    assert employees.get(2) is employee


def test_add_employee_retries_invalid_name():
    controller, output = _make(["An4", "Ana", "40", "1000"])
    employee = controller.add_employee()
    assert employee.name == "Ana"
    assert output.count("error\n") == 1


def test_edit_employee_changes_name_and_keeps_position():
    employees = _staff()
    controller, _ = _make(["2", "1", "Dario", "4"], employees)
    edited = controller.edit_employee()
    assert edited.name == "Dario"
    assert employees.get(1) is edited
    assert len(employees) == 3


def test_edit_employee_changes_hours_and_salary():
    employees = _staff()
    controller, _ = _make(["3", "2", "55", "3", "777", "4"], employees)
    edited = controller.edit_employee()
    assert (edited.hours_worked, edited.salary) == (55, 777)


def test_edit_employee_unknown_id():
    employees = LinkedList([Employee(5, "Ana", 1, 1)])
    controller, output = _make(["1"], employees)
    assert controller.edit_employee() is None
    assert "id de empleado inexistente\n" in output
    assert employees.get(0).name == "Ana"


def test_remove_employee_confirmed():
    employees = _staff()
    controller, output = _make(["2", "si"], employees)
    assert controller.remove_employee() is True
    assert [employee.id for employee in employees] == [1, 3]
    assert "\nEmpleado eliminado exitosamente\n" in output


def test_remove_employee_declined_after_bad_answer():
    employees = _staff()
    controller, _ = _make(["1", "ab", "NO"], employees)
    assert controller.remove_employee() is False
    assert [employee.id for employee in employees] == [1, 2, 3]


def test_list_employees_writes_every_row():
    employees = _staff()
    controller, output = _make([], employees)
    controller.list_employees()
    assert output[0] == "id---nombre---horas trabajadas----sueldo\n"
    assert output[1:] == [format_employee(employee) + "\n\n" for employee in employees]


def test_sort_by_salary_descending():
    employees = _staff()
    controller, _ = _make(["4", "0"], employees)
    assert controller.sort_employees() is True
    salaries = [employee.salary for employee in employees]
    assert salaries == sorted(salaries, reverse=True)


def test_sort_by_name_ascending():
    employees = LinkedList([Employee(1, "carla", 1, 1), Employee(2, "Ana", 1, 1), Employee(3, "bob", 1, 1)])
    controller, _ = _make(["2", "1"], employees)
    controller.sort_employees()
    assert [employee.id for employee in employees] == [2, 3, 1]


def test_sort_exit_option_leaves_order():
    employees = _staff()
    controller, _ = _make(["5"], employees)
    assert controller.sort_employees() is False
    assert [employee.id for employee in employees] == [1, 2, 3]


def test_text_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    controller, _ = _make([], _staff())
    assert controller.save_as_text(path) == 3
    loader, output = _make([])
    assert loader.load_from_text(path) == 3
    assert list(loader.employees) == list(controller.employees)
    assert "\n\nSe han cargado 3 empleados\n" in output


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    controller, output = _make([], _staff())
    assert controller.save_as_binary(path) == 3
    assert "Datos guardados en modo binario!!!\n" in output
    loader, _ = _make([])
    assert loader.load_from_binary(path) == 3
    assert list(loader.employees) == list(controller.employees)


def test_load_from_binary_missing_file(tmp_path):
    controller, output = _make([])
    assert controller.load_from_binary(tmp_path / "missing.bin") == 0
    assert output == ["\nError al leer el archivo\n"]
    assert controller.employees.is_empty()


def test_load_from_text_missing_file_raises(tmp_path):
    controller, output = _make([])
    with pytest.raises(FileNotFoundError):
        controller.load_from_text(tmp_path / "missing.csv")
    assert output == ["no se a podido abrir el archivo"]