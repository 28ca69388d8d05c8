"""Row extraction and name indexing over spreadsheet rows."""

import logging
import re
import unicodedata
from datetime import date, datetime, time
from typing import Any, Optional, Sequence

from .classifier import ShiftClassifier, default_classifier
from .models import ExtraCell, RawEvent, SheetCell, ShiftType

logger = logging.getLogger(__name__)

Row = Sequence[SheetCell]

DATE_COLUMN = 0
TEAM_COLUMN = 1
HEADER_WIDTH = 3  # date, team and one reserved column
RESERVED_HEADER = "DESIDERATA"

_DIGIT_RE = re.compile(r"\d")


def display_value(value: Any) -> str:
    """Return the display string of a cell value ("" when absent)."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.strftime("%Y-%m-%d")
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _cell(row: Row, index: int) -> Optional[SheetCell]:
    if index < len(row):
        return row[index]
    return None


def _cell_text(row: Row, index: int) -> str:
    cell = _cell(row, index)
    return display_value(cell.value) if cell is not None else ""


def find_header_row(rows: Sequence[Row]) -> int:
    """Return the index of the header row.

    The first row is the header unless it is entirely empty, in which case
    the second row takes its place.
    """
    if len(rows) > 1 and not any(display_value(cell.value) for cell in rows[0]):
        return 1
    return 0


def data_rows(rows: Sequence[Row]) -> Sequence[Row]:
    """Return the rows below the header row."""
    if not rows:
        return rows
    return rows[find_header_row(rows) + 1:]


def extract_events(
    rows: Sequence[Row],
    classifier: Optional[ShiftClassifier] = None
) -> list[RawEvent]:
    """Build a raw event for every row having both a date and a team.

    Args:
        rows: Rows to read. Every row is a candidate, so callers holding a
            full sheet pass it through ``data_rows`` first.
        classifier: Strategy used to classify the assignment cells.

    Returns:
        Raw events in row order, extra cells kept in column order.
    """
    classifier = classifier or default_classifier
    events: list[RawEvent] = []

    for row_idx, row in enumerate(rows):
        event_date = _cell_text(row, DATE_COLUMN)
        team = _cell_text(row, TEAM_COLUMN)

        if not event_date or not team:
            logger.debug("Skipping row %d: missing date or team", row_idx + 1)
            continue

        extra_cells = tuple(
            ExtraCell(
                raw_value=None if cell.value is None else display_value(cell.value),
                style=cell.style,
                shift_type=classifier.classify(cell.style)
            )
            for cell in row[HEADER_WIDTH:]
        )
        events.append(RawEvent(date=event_date, team=team, extra_cells=extra_cells))

    logger.info("Extracted %d events from %d rows", len(events), len(rows))
    return events


def name_sort_key(name: str) -> tuple[str, str]:
    """Sort key ordering names alphabetically, ignoring case and accents."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def build_names(
    rows: Sequence[Row],
    classifier: Optional[ShiftClassifier] = None
) -> list[str]:
    """Collect the distinct person names found in the assignment columns.

    A column is scanned only if it has a header label other than the
    reserved ``DESIDERATA`` column. Within it, a cell counts as a name when
    it has no special shift colouring, contains no digit and is not blank.

    Returns:
        Distinct names sorted alphabetically.
    """
    classifier = classifier or default_classifier
    if not rows:
        return []

    header_idx = find_header_row(rows)
    header = rows[header_idx]
    width = max(len(row) for row in rows)
    names: set[str] = set()

    for col in range(HEADER_WIDTH, width):
        label = _cell_text(header, col)
        if not label or label == RESERVED_HEADER:
            logger.debug("Ignoring column %d (header %r)", col + 1, label)
            continue

        for row in rows[header_idx + 1:]:
            cell = _cell(row, col)
            if cell is None or cell.value is None:
                continue
            text = display_value(cell.value)
            if not text:
                continue
            if classifier.classify(cell.style) is not ShiftType.TWENTY_FOUR:
                continue
            if _DIGIT_RE.search(text):
                continue
            names.add(text)

    return sorted(names, key=name_sort_key)
