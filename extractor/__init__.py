"""Extractor module for reading shift schedules from spreadsheets."""

from .classifier import ColorShiftClassifier, ShiftClassifier, classify
from .filters import filter_events, resolve_shift_type, to_event_data
from .models import CellStyle, EventData, ExtraCell, RawEvent, SheetCell, ShiftType
from .rows import build_names, data_rows, extract_events
from .session import ScheduleSession
from .workbook import WorkbookReader

__all__ = [
    "CellStyle",
    "ColorShiftClassifier",
    "EventData",
    "ExtraCell",
    "RawEvent",
    "ScheduleSession",
    "SheetCell",
    "ShiftClassifier",
    "ShiftType",
    "WorkbookReader",
    "build_names",
    "classify",
    "data_rows",
    "extract_events",
    "filter_events",
    "resolve_shift_type",
    "to_event_data",
]
