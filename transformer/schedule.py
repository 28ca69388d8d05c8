"""Duty time windows for each shift type."""

import re
import unicodedata
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Union

from extractor.models import ShiftType
from .errors import InvalidDateError, UnrecognizedServiceTypeError

DateInput = Union[str, date]

SHIFT_CHANGE = time(7, 30)
EVENING_CHANGE = time(19, 30)

FRENCH_MONTHS = {
    "janvier": 1, "janv": 1,
    "fevrier": 2, "fevr": 2, "fev": 2,
    "mars": 3,
    "avril": 4, "avr": 4,
    "mai": 5,
    "juin": 6,
    "juillet": 7, "juil": 7,
    "aout": 8,
    "septembre": 9, "sept": 9,
    "octobre": 10, "oct": 10,
    "novembre": 11, "nov": 11,
    "decembre": 12, "dec": 12,
}

# "samedi 15 mars 2025", "1er fevr. 2025"
_LONG_RE = re.compile(r"^(?:[a-z]+\.?,?\s+)?(\d{1,2})(?:er)?\s+([a-z]+)\.?\s+(\d{4})$")
# "15/03/2025", day first
_NUMERIC_RE = re.compile(r"^(\d{1,2})[/.-](\d{1,2})[/.-](\d{4})$")
# "2025-03-15" or "2025-03-15 00:00:00"
_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[ t].*)?$")


@dataclass(frozen=True)
class ScheduleWindow:
    """Start and end of a duty, in local time."""

    start: datetime
    end: datetime


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.casefold().split())


def _date_parts(text: str) -> tuple[int, int, int]:
    """Break a French-formatted date string into (day, month, year)."""
    folded = _fold(text)

    match = _LONG_RE.match(folded)
    if match:
        day, month_name, year = match.groups()
        month = FRENCH_MONTHS.get(month_name)
        if month is None:
            raise InvalidDateError(f"Invalid date format in string: {text}")
        return int(day), month, int(year)

    match = _NUMERIC_RE.match(folded)
    if match:
        day, month, year = match.groups()
        return int(day), int(month), int(year)

    match = _ISO_RE.match(folded)
    if match:
        year, month, day = match.groups()
        return int(day), int(month), int(year)

    raise InvalidDateError(f"Invalid date format in string: {text}")


def parse_date(value: DateInput) -> date:
    """Return the calendar date of a duty.

    Args:
        value: A ``date``/``datetime``, or a string in French day/month/year
            order ("15 mars 2025", "15/03/2025") or ISO form.
            Numeric dates are always read day first, as French sheets
            write them: "04/10/2025" is 4 October.

    Raises:
        InvalidDateError: If no valid day, month and year can be read.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Unrecognized date format: {value!r}")

    day, month, year = _date_parts(value)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date in string: {value} ({e})") from e


def to_shift_type(value: Union[ShiftType, str]) -> ShiftType:
    """Return ``value`` as a ShiftType.

    Raises:
        UnrecognizedServiceTypeError: If ``value`` is not a known shift type.
    """
    if isinstance(value, ShiftType):
        return value
    try:
        return ShiftType(value)
    except ValueError:
        raise UnrecognizedServiceTypeError(f"Unrecognized service type: {value}") from None


def resolve_window(value: DateInput, shift_type: Union[ShiftType, str]) -> ScheduleWindow:
    """Compute when a duty starts and ends.

    Day shifts run 07:30-19:30, night shifts 19:30 to 07:30 the next day,
    24-hour shifts 07:30 to 07:30 the next day.

    Raises:
        InvalidDateError: If the date cannot be parsed.
        UnrecognizedServiceTypeError: If the shift type is unknown.
    """
    day = parse_date(value)
    shift_type = to_shift_type(shift_type)
    next_day = day + timedelta(days=1)

    if shift_type is ShiftType.DAY_TWELVE:
        start = datetime.combine(day, SHIFT_CHANGE)
        end = datetime.combine(day, EVENING_CHANGE)
    elif shift_type is ShiftType.NIGHT_TWELVE:
        start = datetime.combine(day, EVENING_CHANGE)
        end = datetime.combine(next_day, SHIFT_CHANGE)
    else:
        start = datetime.combine(day, SHIFT_CHANGE)
        end = datetime.combine(next_day, SHIFT_CHANGE)

    return ScheduleWindow(start=start, end=end)
