# labtools

labtools is a set of small interactive console programs, plus the pieces they
are built from. Every program reads its answers through one input library that
checks what you type, prints `error` and asks again until the value is valid.
Menus and messages are in Spanish.

No third-party packages are needed.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

### `labtools-calculator`

A calculator over two integer operands, A and B. The menu offers:

1. enter A
2. enter B
3. compute A+B, A-B, A*B, A/B, A! and B!
4. show the results
5. quit

Computing requires both operands; showing results requires a computation
first. Division by zero is reported as an error and gives no quotient. The
factorial of any number below 1 is 1.

### `labtools-payroll`

A staff table of 1000 numbered slots. Each member has a name and a last name
(ASCII letters only, up to 50), a salary (1 to 40,000,000,000,000) and a
sector (1 to 100). A member's id is its slot number plus one. The menu offers:

1. hire a member into the first free slot
2. change a member's name, last name, salary or sector
3. dismiss a member, after a `s`/`n` confirmation
4. reports
5. quit

There are two reports: the staff list ordered by sector and then by last name,
and the total salary, the average salary and how many members earn more than
the average.

### `labtools-employees`

An employee register. Each employee has an id, a name, hours worked and a
salary; all numbers must be positive and the name must not be empty. The menu
offers:

1. load `data.csv` (text)
2. load `data.bin` (binary)
3. add an employee, with the next id after the highest one
4. edit an employee
5. remove an employee, after a `si`/`no` confirmation
6. list employees
7. sort by id, name (ignoring case), hours or salary, ascending or descending
8. save to `data.csv`
9. save to `data.bin`
10. quit

Only one file can be loaded per session, and adding or saving is refused until
one has been loaded. Both files are read from and written to the current
directory. If `data.csv` cannot be opened the program stops with exit status 1;
a missing `data.bin` is reported and loads nothing.

## File formats

- **Text**: a header line `id,nombre,horas trabajadas,sueldo` followed by one
  `id,name,hours,salary` row per employee. Blank lines, short lines and rows
  that do not make a valid employee are skipped when reading.
- **Binary**: one fixed-size record per employee: a little-endian 32-bit id,
  the name in 128 bytes padded with zero bytes, then 32-bit hours and salary.
  A trailing partial record is ignored.

## Library use

`labtools.linkedlist.LinkedList` is a singly linked list:

- `add`, `get`, `set`, `remove`, `push`, `pop`, `clear`, `is_empty`, `len()`
  and iteration; an index out of range raises `IndexError`
- `index_of` (raises `ValueError` when absent), `contains`, `contains_all`,
  all of which compare elements by identity
- `sub_list(start, stop)` and `clone`, which return new lists
- `sort(compare, ascending=True)`, which takes a three-way comparison function

`labtools.prompts` has checks that never ask for input (`parse_int`,
`parse_float`, `is_valid_word`) and prompting versions of them (`ask_int`,
`ask_float`, `ask_word`) that take optional `read` and `write` callables.

`labtools.calculator` has `add`, `subtract`, `multiply`, `divide`,
`factorial` and the `Calculator` class with its `Results`.

`labtools.payroll` has `StaffTable`, `StaffMember`, `SalaryReport` and
`format_member`.

`labtools.employee` has the `Employee` record, whose fields are checked on
every assignment, `format_employee`, `max_id` and the comparisons
`compare_by_id`, `compare_by_name`, `compare_by_hours` and
`compare_by_salary`. `labtools.parser` reads and writes both file formats, and
`labtools.controller.Controller` and `labtools.app.run` drive the register with
any `read` and `write` callables.

```python
from labtools.employee import Employee, compare_by_name
from labtools.linkedlist import LinkedList

staff = LinkedList([Employee(2, "bruno", 40, 900), Employee(1, "Ana", 30, 1000)])
staff.sort(compare_by_name)
print([employee.name for employee in staff])  # ['Ana', 'bruno']
```

## What it does not do

- The calculator and the staff table keep everything in memory; nothing is
  saved when they quit.
- The employee register always uses `data.csv` and `data.bin` in the current
  directory; the commands take no command-line options.