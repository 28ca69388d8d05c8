"""Data models for shift schedule extraction."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class ShiftType(Enum):
    """Duty categories found in a fire-station shift schedule."""

    DAY_TWELVE = "12H Jour"
    NIGHT_TWELVE = "12H Nuit"
    TWENTY_FOUR = "24H"


@dataclass(frozen=True)
class CellStyle:
    """Fill attributes of a spreadsheet cell used for classification."""

    color: Optional[str] = None  # ARGB hex, e.g. "FF00B0F0"
    theme_index: Optional[int] = None


@dataclass(frozen=True)
class SheetCell:
    """A raw cell as exposed by a row source."""

    value: Any = None
    style: CellStyle = field(default_factory=CellStyle)


@dataclass(frozen=True)
class ExtraCell:
    """A cell beyond the date/team columns, with its classified shift type."""

    raw_value: Optional[str]
    style: CellStyle
    shift_type: ShiftType


@dataclass(frozen=True)
class RawEvent:
    """A schedule row with a date, a team and its assignment cells."""

    date: str
    team: str
    extra_cells: tuple[ExtraCell, ...] = ()


@dataclass(frozen=True)
class EventData:
    """A selected duty, ready to be turned into a calendar event."""

    date: str
    team: str
    shift_type: Union[ShiftType, str]

    @property
    def shift_label(self) -> str:
        if isinstance(self.shift_type, ShiftType):
            return self.shift_type.value
        return self.shift_type
