from labtools.app import NO_EMPLOYEES, NOT_LOADED, main, run
from labtools.employee import Employee
from labtools.linkedlist import LinkedList
from labtools.parser import employees_from_text, employees_to_text


def _run(answers, tmp_path):
    answers_iter = iter(answers)
    output = []
    employees = run(
        lambda: next(answers_iter),
        output.append,
        str(tmp_path / "data.csv"),
        str(tmp_path / "data.bin"),
    )
    return employees, output


def _write_csv(tmp_path):
    with open(tmp_path / "data.csv", "w", encoding="utf-8", newline="") as stream:
        employees_to_text(stream, [Employee(1, "Ana", 10, 300), Employee(2, "Bob", 30, 100)])


def test_exit_immediately(tmp_path):
    employees, _ = _run(["10"], tmp_path)
    assert employees.is_empty()


def test_add_before_loading_is_refused(tmp_path):
    employees, output = _run(["3", "10"], tmp_path)
    assert NOT_LOADED in output
    assert len(employees) == 0


def test_list_with_no_employees(tmp_path):
    _, output = _run(["6", "10"], tmp_path)
    assert NO_EMPLOYEES in output


def test_load_text_and_list(tmp_path):
    _write_csv(tmp_path)
    employees, output = _run(["1", "6", "10"], tmp_path)
    assert [employee.name for employee in employees] == ["Ana", "Bob"]
    assert any("Ana" in line for line in output)


def test_second_load_is_refused(tmp_path):
    _write_csv(tmp_path)
    employees, output = _run(["1", "1", "2", "10"], tmp_path)
    assert "Ya se ha cargado el archivo\n" in output
    assert "Ya se a cargado el archivo\n" in output
    assert len(employees) == 2


def test_missing_binary_still_allows_adding(tmp_path):
    employees, output = _run(["2", "3", "Dan", "5", "50", "10"], tmp_path)
    assert "\nError al leer el archivo\n" in output
    assert [employee.name for employee in employees] == ["Dan"]
    assert employees.get(0).id == 1


def test_add_and_save_text(tmp_path):
    _write_csv(tmp_path)
    employees, _ = _run(["1", "3", "Dan", "5", "50", "8", "10"], tmp_path)
    saved = LinkedList()
    with open(tmp_path / "data.csv", encoding="utf-8", newline="") as stream:
        employees_from_text(stream, saved)
    assert list(saved) == list(employees)
    assert saved.get(2).id == 3


def test_save_binary_and_reload(tmp_path):
    _write_csv(tmp_path)
    first, _ = _run(["1", "9", "10"], tmp_path)
    second, _ = _run(["2", "10"], tmp_path)
    assert list(second) == list(first)


def test_main_stops_at_end_of_input(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    def no_input(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 0


def test_main_reports_missing_text_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    answers = iter(["1"])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    assert main([]) == 1