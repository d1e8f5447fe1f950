"""Signed duration text parsing.

Parses durations written as a sequence of decimal numbers with unit
suffixes, optionally signed, e.g. "10m", "-5s", "1h30m", "1.5h", "300ms".
Valid units are "ns", "us" (or "µs"), "ms", "s", "m", "h". The bare string
"0" is also accepted.

The exact value is computed in integer nanoseconds so that the sign and
range checks are not affected by timedelta's microsecond resolution.
"""

from __future__ import annotations

__all__ = [
    "duration_nanoseconds",
    "nanoseconds_to_timedelta",
    "parse_duration",
]

import re
from datetime import timedelta
from fractions import Fraction

from prompting.constants import DURATION_UNIT_NANOSECONDS, MAX_DURATION_NANOSECONDS

# Longest units first so "ms" is not read as "m" followed by garbage
_UNIT_PATTERN = "|".join(sorted(map(re.escape, DURATION_UNIT_NANOSECONDS), key=len, reverse=True))
_TERM = re.compile(rf"(\d+(?:\.\d*)?|\.\d+)({_UNIT_PATTERN})?", re.ASCII)


def duration_nanoseconds(text: str) -> int:
    """Parse duration text into a signed nanosecond count.

    Fractions smaller than a nanosecond are truncated per term.

    Args:
        text: Duration text, e.g. "10m" or "-1h30m".

    Returns:
        Signed number of nanoseconds.

    Raises:
        ValueError: If the text is empty, malformed, lacks a unit, or is
            out of the signed 64-bit nanosecond range.
    """
    original = text
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = 0
    pos = 0
    while pos < len(text):
        match = _TERM.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {original!r}")
        number, unit = match.groups()
        if unit is None:
            raise ValueError(f"missing unit in duration {original!r}")
        total += int(Fraction(number) * DURATION_UNIT_NANOSECONDS[unit])
        pos = match.end()

    # Negative range extends one further than positive
    limit = MAX_DURATION_NANOSECONDS + 1 if negative else MAX_DURATION_NANOSECONDS
    if total > limit:
        raise ValueError(f"invalid duration {original!r}: out of range")

    return -total if negative else total


def nanoseconds_to_timedelta(nanoseconds: int) -> timedelta:
    """Convert a nanosecond count to a timedelta, truncating toward zero."""
    # int() truncates toward zero, unlike floor division for negatives
    return timedelta(microseconds=int(Fraction(nanoseconds, 1000)))


def parse_duration(text: str) -> timedelta:
    """Parse duration text into a timedelta.

    Sub-microsecond precision is truncated toward zero.

    Args:
        text: Duration text, e.g. "10m".

    Returns:
        Equivalent timedelta.

    Raises:
        ValueError: If the text is not a valid duration.
    """
    return nanoseconds_to_timedelta(duration_nanoseconds(text))
