"""Transformer module for converting duties to calendar formats."""

from .base import BaseTransformer
from .errors import (
    CalendarSerializationError,
    InvalidDateError,
    ScheduleError,
    UnrecognizedServiceTypeError,
)
from .events import CalendarEvent, build_event
from .ical_transformer import ICalTransformer
from .schedule import ScheduleWindow, parse_date, resolve_window

__all__ = [
    "BaseTransformer",
    "CalendarEvent",
    "CalendarSerializationError",
    "ICalTransformer",
    "InvalidDateError",
    "ScheduleError",
    "ScheduleWindow",
    "UnrecognizedServiceTypeError",
    "build_event",
    "parse_date",
    "resolve_window",
]
