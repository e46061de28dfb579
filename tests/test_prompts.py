import pytest

from labtools.prompts import (
    ask_float,
    ask_int,
    ask_word,
    is_valid_word,
    parse_float,
    parse_int,
)


def scripted(lines):
    return iter(lines).__next__


def test_parse_int_accepts_digits_in_range():
    assert parse_int("42", 1, 100) == 42


def test_parse_int_empty_reads_as_zero():
    assert parse_int("", 0, 1) == 0


@pytest.mark.parametrize("text", ["-5", "4.2", "12a", " 7", "101", "0"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text, 1, 100)


def test_parse_float_accepts_decimal():
    assert parse_float("12.5", 1, 100) == 12.5


def test_parse_float_accepts_negative_with_one_sign():
    assert parse_float("-5", -10, 10) == -5.0


def test_parse_float_reads_leading_number_only():
    assert parse_float("12a", 1, 100) == 12.0


@pytest.mark.parametrize("text", ["1.2.3", "-1.5", "abc", "500", "0.5"])
def test_parse_float_rejects(text):
    with pytest.raises(ValueError):
        parse_float(text, 1, 100)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("Ana", True), ("Ana1", False), ("", False), ("a b", False), ("abc", False)],
)
def test_is_valid_word(text, expected):
    assert is_valid_word(text, 1, 2 if text == "abc" else 50) is expected


def test_ask_int_retries_until_valid():
    written = []
    value = ask_int("n? ", 1, 10, scripted(["x", "0", "7"]), written.append)
    assert value == 7
    assert written.count("error\n") == 2
    assert written.count("n? ") == 3


def test_ask_float_retries_until_valid():
    written = []
    value = ask_float("s? ", 1, 1000, scripted(["1..2", "250.75"]), written.append)
    assert value == 250.75
    assert written.count("error\n") == 1


def test_ask_word_retries_until_valid():
    written = []
    value = ask_word("w? ", 1, 50, scripted(["Juan2", "", "Juan"]), written.append)
    assert value == "Juan"
    assert written.count("error\n") == 2


def test_ask_int_propagates_end_of_input():
    with pytest.raises(StopIteration):
        ask_int("n? ", 1, 10, scripted(["bad"]), lambda text: None)