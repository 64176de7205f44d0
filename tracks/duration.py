"""Human readable duration formatting and free-text duration parsing."""

from __future__ import annotations

import math
import re

from tracks.errors import ArgumentInvalidError, ArgumentMissingError

YEAR_MS = 31557600000
MONTH_MS = 2628000000
WEEK_MS = 604800000
DAY_MS = 86400000
HOUR_MS = 3600000
MINUTE_MS = 60000
SECOND_MS = 1000

# Weeks are folded into days when formatting.
_FORMAT_LADDER = (
    ("year", YEAR_MS),
    ("month", MONTH_MS),
    ("day", DAY_MS),
    ("hour", HOUR_MS),
    ("minute", MINUTE_MS),
)

# Colon groups read right to left, lowest unit first.
_COLON_LADDER = ("second", "minute", "hour", "day", "month", "year")

# Checked in order; the first matching unit wins.
_PARSE_UNITS = (
    (("seconds", "second"), "s", SECOND_MS),
    (("minutes", "minute"), "m", MINUTE_MS),
    (("hours", "hour"), "h", HOUR_MS),
    (("days", "day"), "d", DAY_MS),
    (("weeks", "week"), "w", WEEK_MS),
    (("months", "month"), None, MONTH_MS),
    (("years", "year"), "y", YEAR_MS),
)

_TOKEN_RE = re.compile(r"(\d+\.*\d*)(\D+)")
_SEPARATOR_RE = re.compile(r",|\band\b", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"^\d+$")


def _decompose(milliseconds: float) -> list[tuple[str, int]]:
    if milliseconds <= 0:
        return [(unit, 0) for unit, _ in _FORMAT_LADDER] + [("second", 0)]
    remaining = milliseconds
    parts = []
    for unit, weight in _FORMAT_LADDER:
        count, remaining = divmod(remaining, weight)
        parts.append((unit, int(count)))
    # Half-up rounding of the sub-minute residual.
    parts.append(("second", int(math.floor(remaining / SECOND_MS + 0.5))))
    return parts


def format_time(milliseconds: float, minimal: bool = False) -> str:
    """Format ``milliseconds`` as ``"1 day, 1 hour and 5 seconds"`` or ``"01:01:00:05"``.

    The minimal form is colon separated with two-digit columns, leading empty
    columns dropped and at least two columns kept.
    """
    if (
        isinstance(milliseconds, bool)
        or not isinstance(milliseconds, (int, float))
        or math.isnan(milliseconds)
        or math.isinf(milliseconds)
    ):
        raise ArgumentInvalidError("format_time() milliseconds must be a number")
    if not isinstance(minimal, bool):
        raise ArgumentInvalidError("format_time() minimal must be a boolean")

    if milliseconds == 0:
        return "00:00" if minimal else "N/A"

    parts = _decompose(milliseconds)

    if minimal:
        columns: list[str] = []
        for _, value in parts:
            if value == 0 and not columns:
                continue
            columns.append(f"{value:02d}")
        if len(columns) == 1:
            columns.insert(0, "00")
        return ":".join(columns)

    words = [f"{value} {unit if value == 1 else unit + 's'}" for unit, value in parts if value > 0]
    text = ", ".join(words)
    head, sep, tail = text.rpartition(", ")
    if sep:
        text = f"{head} and {tail}"
    return text


def _unit_weight(unit: str) -> int | None:
    for words, letter, weight in _PARSE_UNITS:
        if unit.endswith(words):
            return weight
        if letter is not None and unit == letter:
            return weight
    return None


def _to_number(raw: str) -> int:
    return int(raw.partition(".")[0])


def parse_time(text: str) -> int | None:
    """Parse a duration such as ``"1h30m"``, ``"03:20"`` or ``"2 days and 4 hours"``.

    Returns the total in milliseconds, or ``None`` when nothing (or a total of
    zero) was recognized. A bare integer is read as seconds. Numbers are read
    up to their first dot, so "1.5h" counts as one hour.
    """
    if text is None:
        raise ArgumentMissingError('Argument "text" must be present.')
    if not isinstance(text, str):
        raise ArgumentInvalidError("parse_time() text must be a string")

    if ":" in text:
        groups = reversed(text.split(":"))
        text = "".join(f"{group}{unit}" for group, unit in zip(groups, _COLON_LADDER))
    text = _SEPARATOR_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub("", text)
    if _DIGITS_RE.match(text):
        text = f"{text}seconds"

    total = 0
    for number, unit in _TOKEN_RE.findall(text.lower()):
        weight = _unit_weight(unit)
        if weight is None:
            continue
        total += _to_number(number) * weight

    if total == 0:
        return None
    return total
