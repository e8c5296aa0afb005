"""Tests for the strict natural-number parser."""

import pytest

from train_search.domain import natural_number
from train_search.domain.errors import InvalidNumberError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", 1),
        ("7", 7),
        ("007", 7),
        ("1902", 1902),
        ("10", 10),
        ("123456789012345678901234567890", 123456789012345678901234567890),
    ],
)
def test_parse_accepts_positive_digit_strings(text: str, expected: int) -> None:
    """Given a string of ASCII digits with a positive value, when parsing, then the value is returned."""
    assert natural_number.parse(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "0",
        "00",
        "000",
        "-1",
        "+1",
        " 1",
        "1 ",
        "1\n",
        "1_000",
        "1,000",
        "1.0",
        "12a",
        "a12",
        "0x1F",
        "١٢",  # Arabic-Indic digits
        "²",
    ],
)
def test_parse_rejects_invalid_input(text: str) -> None:
    """Given an empty, zero-valued or non-digit string, when parsing, then InvalidNumberError is raised."""
    with pytest.raises(InvalidNumberError) as exc_info:
        natural_number.parse(text)

    assert exc_info.value.value == text


@pytest.mark.parametrize("value", [None, 5, 5.0])
def test_parse_rejects_non_strings(value: object) -> None:
    """Given a non-string value, when parsing, then InvalidNumberError is raised."""
    with pytest.raises(InvalidNumberError):
        natural_number.parse(value)  # type: ignore[arg-type]


def test_parse_accepts_numbers_beyond_int_conversion_limit() -> None:
    """Given a 5000-digit string, when parsing, then its exact value is returned."""
    assert natural_number.parse("1" * 5000) == (10**5000 - 1) // 9


def test_parse_rejects_long_zero_string() -> None:
    """Given 5000 zeros, when parsing, then InvalidNumberError is raised."""
    with pytest.raises(InvalidNumberError):
        natural_number.parse("0" * 5000)
