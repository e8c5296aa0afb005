"""Codec for wall-clock time-of-day strings (``HH:MM:SS``)."""

import re
from datetime import time

from train_search.domain.errors import InvalidTimeFormatError

TIME_FORMAT = "HH:MM:SS"

_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])")


def decode(text: str) -> time:
    """Parse a zero-padded 24-hour ``HH:MM:SS`` string into a ``time``.

    Raises:
        InvalidTimeFormatError: If ``text`` is not a string of exactly that shape
            or a field is out of range.
    """
    if not isinstance(text, str):
        raise InvalidTimeFormatError(
            f"expected time as a {TIME_FORMAT} string, got {type(text).__name__}",
            value=repr(text),
        )

    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidTimeFormatError(
            f"invalid time {text!r}, expected {TIME_FORMAT}", value=text
        )

    hour, minute, second = (int(group) for group in match.groups())
    return time(hour, minute, second)


def encode(value: time) -> str:
    """Format a ``time`` as a zero-padded ``HH:MM:SS`` string.

    Sub-second precision is dropped.
    """
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
