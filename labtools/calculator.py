"""A menu-driven calculator over two integer operands."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: int, b: int) -> float:
    """Divide ``a`` by ``b``; raises ZeroDivisionError when ``b`` is 0."""
    return a / b


def factorial(n: int) -> int:
    """Product of 1..n; 1 for any ``n`` below 1."""
    return math.prod(range(1, n + 1))


@dataclass(frozen=True)
class Results:
    """Every operation computed over the two operands."""

    total: int
    difference: int
    product: int
    quotient: float | None
    factorial_a: int
    factorial_b: int


class Calculator:
    """Holds the operands A and B and the last computed results."""

    def __init__(self) -> None:
        self.a: int | None = None
        self.b: int | None = None
        self.results: Results | None = None

    def compute(self) -> Results:
        """Compute every operation; raises ValueError if an operand is missing."""
        if self.a is None or self.b is None:
            raise ValueError("both operands must be entered first")
        a, b = self.a, self.b
        self.results = Results(
            total=add(a, b),
            difference=subtract(a, b),
            product=multiply(a, b),
            quotient=divide(a, b) if b != 0 else None,
            factorial_a=factorial(a),
            factorial_b=factorial(b),
        )
        return self.results

    def report(self) -> str:
        """Describe the last results; raises ValueError if nothing was computed."""
        results = self.results
        if results is None:
            raise ValueError("the operations must be computed first")
        if results.quotient is None:
            division = "\nError no se puede dividir por 0"
        else:
            division = f"\nEl resultado de A/B es: {results.quotient:.6f}"
        return (
            f"\nEl resultado de A+B es: {results.total}"
            f"\nEl resultado de A-B es: {results.difference}"
            f"\nEl resultado de A*B es: {results.product}"
            f"{division}"
            f"\nEl factorial de A es: {results.factorial_a}"
            f" y El factorial de B es: {results.factorial_b}\n"
        )

    def menu(self) -> str:
        a = "x" if self.a is None else self.a
        b = "y" if self.b is None else self.b
        return (
            "Calculadora\n"
            f"1. Ingresar 1er operando (A={a})\n"
            f"2. Ingresar 2do operando (B={b})\n"
            "3. Calcular todas las operaciones\n"
            "4. Informar resultados\n"
            "5. Salir"
            "\nQue desea hacer?\n\n"
        )


def _scan_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _run(read: Callable[[], str], write: Callable[[str], object]) -> None:
    calculator = Calculator()
    while True:
        write(calculator.menu())
        option = _scan_int(read())
        if option in (1, 2):
            ordinal = "1er" if option == 1 else "2do"
            write(f"\nIngrese el {ordinal} operando :")
            value = _scan_int(read())
            if value is None:
                write("Error,ese numero no es valido\n")
            elif option == 1:
                calculator.a = value
            else:
                calculator.b = value
        elif option == 3:
            try:
                calculator.compute()
            except ValueError:
                write("\nError,primero ingrese ambos operando\n")
            else:
                write("\nLas operaciones ya se realizaron\n")
        elif option == 4:
            try:
                write(calculator.report())
            except ValueError:
                write("\nError,primero calcule las operaciones\n")
        elif option == 5:
            return
        else:
            write("La opcion ingresada es incorrecta\n\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive calculator on the console."""
    try:
        _run(input, sys.stdout.write)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())