"""Validated console prompts for integers, decimals and plain words."""

from __future__ import annotations

import re
import string
import sys
from collections.abc import Callable
from typing import TypeVar

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

T = TypeVar("T")


def parse_int(text: str, minimum: int, maximum: int) -> int:
    """Parse a string of decimal digits lying within ``minimum`` and ``maximum``.

    Signs, points and any other character are rejected; an empty string reads as 0.
    Raises ValueError when the text is not accepted.
    """
    if any(char not in _DIGITS for char in text):
        raise ValueError(f"{text!r} is not made of digits only")
    value = int(text) if text else 0
    if not minimum <= value <= maximum:
        raise ValueError(f"{value} is outside {minimum}..{maximum}")
    return value


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def parse_float(text: str, minimum: float, maximum: float) -> float:
    """Parse a decimal number lying within ``minimum`` and ``maximum``.

    At most one character that is not a digit is allowed; the number is read
    from the start of the text, ignoring anything after it.
    Raises ValueError when the text is not accepted.
    """
    if sum(char not in _DIGITS for char in text) >= 2:
        raise ValueError(f"{text!r} is not a valid number")
    value = _leading_float(text)
    if not minimum <= value <= maximum:
        raise ValueError(f"{value} is outside {minimum}..{maximum}")
    return value


def is_valid_word(text: str, min_length: int, max_length: int) -> bool:
    """Tell whether ``text`` is made of ASCII letters only and has an allowed length."""
    return min_length <= len(text) <= max_length and all(char in _LETTERS for char in text)


def _ask(
    message: str,
    parse: Callable[[str], T],
    read: Callable[[], str] | None,
    write: Callable[[str], object] | None,
) -> T:
    read = read or input
    write = write or sys.stdout.write
    while True:
        write(message)
        try:
            return parse(read())
        except ValueError:
            write("error\n")


def ask_int(
    message: str,
    minimum: int,
    maximum: int,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> int:
    """Prompt until an integer within range is entered, and return it."""
    return _ask(message, lambda text: parse_int(text, minimum, maximum), read, write)


def ask_float(
    message: str,
    minimum: float,
    maximum: float,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> float:
    """Prompt until a number within range is entered, and return it."""
    return _ask(message, lambda text: parse_float(text, minimum, maximum), read, write)


def ask_word(
    message: str,
    min_length: int,
    max_length: int,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> str:
    """Prompt until a word of letters with an allowed length is entered, and return it."""

    def parse(text: str) -> str:
        if not is_valid_word(text, min_length, max_length):
            raise ValueError(f"{text!r} is not a valid word")
        return text

    return _ask(message, parse, read, write)