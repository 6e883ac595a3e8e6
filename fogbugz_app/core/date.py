"""Point-in-time and date-range literals used inside FogBugz queries.

Grammar::

    point  := DAY "-" MONTH "-" YEAR
    range  := point ".." point

Fields are plain decimal integers. No calendar validation is done, so
``31-2-2024`` is accepted; the service is the judge of what it means.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from .errors import ParseError

RANGE_SEPARATOR = ".."
FIELD_SEPARATOR = "-"

_UNSIGNED = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class PointInTime:
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}{FIELD_SEPARATOR}{self.month}{FIELD_SEPARATOR}{self.year}"


@dataclass(frozen=True, slots=True)
class DateRange:
    start: PointInTime
    end: PointInTime

    def __str__(self) -> str:
        return f"{self.start}{RANGE_SEPARATOR}{self.end}"


Date: TypeAlias = PointInTime | DateRange


def _parse_unsigned(text: str, field: str, literal: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseError(literal, f"{field} {text!r} is not an unsigned integer")
    return int(text)


def parse_point_in_time(text: str) -> PointInTime:
    """Parse ``"D-M-Y"`` into a :class:`PointInTime`.

    Raises
    ------
    ParseError
        If the literal does not split into exactly three unsigned integers.
    """
    parts = text.split(FIELD_SEPARATOR)
    if len(parts) != 3:
        raise ParseError(text, f"expected 3 fields separated by '{FIELD_SEPARATOR}', got {len(parts)}")
    day_s, month_s, year_s = parts
    return PointInTime(
        day=_parse_unsigned(day_s, "day", text),
        month=_parse_unsigned(month_s, "month", text),
        year=_parse_unsigned(year_s, "year", text),
    )


def parse_date_range(text: str) -> DateRange:
    """Parse ``"D-M-Y..D-M-Y"`` into a :class:`DateRange`.

    The endpoints are not compared; a range whose start is after its end is
    returned as given.
    """
    parts = text.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        raise ParseError(text, f"expected 2 dates separated by '{RANGE_SEPARATOR}', got {len(parts)}")
    start_s, end_s = parts
    return DateRange(start=parse_point_in_time(start_s), end=parse_point_in_time(end_s))


def parse_date(text: str) -> Date:
    """Parse either form, picking a range when ``..`` is present."""
    if RANGE_SEPARATOR in text:
        return parse_date_range(text)
    return parse_point_in_time(text)


def to_wire(date: Date) -> str:
    """Render a date the way outbound requests carry it: a plain string."""
    return str(date)


def as_date(value: Date | tuple[PointInTime, PointInTime] | str) -> Date:
    """Coerce the shapes accepted by the query setters into a :class:`Date`."""
    if isinstance(value, (PointInTime, DateRange)):
        return value
    if isinstance(value, tuple):
        start, end = value
        return DateRange(start=start, end=end)
    if isinstance(value, str):
        return parse_date(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a date")
