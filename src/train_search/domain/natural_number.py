"""Strict parser for natural numbers written as plain decimal strings."""

from train_search.domain.errors import InvalidNumberError

_DIGITS = frozenset("0123456789")


def parse(text: str) -> int:
    """Convert a string of ASCII digits to a strictly positive integer.

    Leading zeros are fine (``"007"`` is 7), but the value must not be zero.
    Signs, whitespace, grouping characters and non-ASCII digits are rejected.

    Raises:
        InvalidNumberError: If ``text`` is empty, contains anything other than
            ``0-9``, or evaluates to zero.
    """
    if not isinstance(text, str):
        raise InvalidNumberError(
            f"expected a string of digits, got {type(text).__name__}", value=repr(text)
        )
    if not text:
        raise InvalidNumberError("empty number", value=text)
    if not _DIGITS.issuperset(text):
        raise InvalidNumberError(f"bad number {text!r}: only digits 0-9 allowed", value=text)

    # Folded digit by digit; int() refuses strings over the interpreter's digit limit.
    number = 0
    for char in text:
        number = number * 10 + ord(char) - ord("0")
    if number == 0:
        raise InvalidNumberError(f"bad number {text!r}: must be greater than zero", value=text)
    return number
