"""Calendar event records built from duties."""

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from extractor.models import ShiftType
from .schedule import DateInput, resolve_window, to_shift_type

DateTuple = tuple[int, int, int, int, int]


@dataclass(frozen=True)
class CalendarEvent:
    """A duty ready for serialization."""

    title: str
    start: DateTuple  # (year, month, day, hour, minute)
    end: DateTuple
    description: str


def _as_tuple(moment: datetime) -> DateTuple:
    return (moment.year, moment.month, moment.day, moment.hour, moment.minute)


def build_event(date: DateInput, team: str, shift_type: Union[ShiftType, str]) -> CalendarEvent:
    """Create the calendar event for a duty of ``team`` on ``date``.

    Raises:
        InvalidDateError: If the date cannot be parsed.
        UnrecognizedServiceTypeError: If the shift type is unknown.
    """
    window = resolve_window(date, shift_type)
    label = to_shift_type(shift_type).value

    return CalendarEvent(
        title=f"Garde {label} - {team}",
        start=_as_tuple(window.start),
        end=_as_tuple(window.end),
        description=f"Garde de {label} pour l'équipe {team}",
    )
