"""Errors raised while turning duties into calendar events."""


class ScheduleError(ValueError):
    """Base class for schedule conversion errors."""


class InvalidDateError(ScheduleError):
    """A duty date cannot be broken down into day, month and year."""


class UnrecognizedServiceTypeError(ScheduleError):
    """A shift type outside the known categories was supplied."""


class CalendarSerializationError(ScheduleError):
    """The calendar could not be serialized."""
