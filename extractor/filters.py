"""Selection of the events assigned to one person."""

from typing import Iterable, Optional

from .models import EventData, RawEvent, ShiftType

UNKNOWN_SHIFT_LABEL = "Unknown"


def normalize_name(value: Optional[str]) -> str:
    return (value or "").strip().casefold()


def filter_events(events: Iterable[RawEvent], selected_name: Optional[str]) -> list[RawEvent]:
    """Return the events having an assignment cell equal to ``selected_name``.

    Comparison ignores case and surrounding whitespace. An empty name selects
    nothing.
    """
    target = normalize_name(selected_name)
    if not target:
        return []

    return [
        event for event in events
        if any(normalize_name(cell.raw_value) == target for cell in event.extra_cells)
    ]


def resolve_shift_type(event: RawEvent, selected_name: Optional[str]) -> Optional[ShiftType]:
    """Return the shift type of the first cell matching ``selected_name``."""
    target = normalize_name(selected_name)
    if not target:
        return None

    for cell in event.extra_cells:
        if normalize_name(cell.raw_value) == target:
            return cell.shift_type
    return None


def to_event_data(events: Iterable[RawEvent], selected_name: Optional[str]) -> list[EventData]:
    """Turn the events of ``selected_name`` into transformer input."""
    result: list[EventData] = []
    for event in filter_events(events, selected_name):
        shift_type = resolve_shift_type(event, selected_name)
        result.append(EventData(
            date=event.date,
            team=event.team,
            shift_type=shift_type if shift_type is not None else UNKNOWN_SHIFT_LABEL
        ))
    return result
