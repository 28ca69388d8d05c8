"""Selection state over a loaded schedule workbook."""

import logging
from typing import Optional

from .classifier import ShiftClassifier
from .filters import filter_events, to_event_data
from .models import EventData, RawEvent, SheetCell
from .rows import build_names, data_rows, extract_events
from .workbook import WorkbookReader

logger = logging.getLogger(__name__)


class ScheduleSession:
    """Holds the current sheet and person selection.

    Every accessor recomputes its result from the selected sheet's rows, so
    the session carries no derived state besides the selection itself.
    """

    def __init__(
        self,
        reader: WorkbookReader,
        classifier: Optional[ShiftClassifier] = None
    ) -> None:
        self._reader = reader
        self._classifier = classifier
        self._sheet: Optional[str] = None
        self._rows: list[list[SheetCell]] = []
        self._name: Optional[str] = None

    @property
    def sheet_names(self) -> list[str]:
        return self._reader.sheet_names

    @property
    def selected_sheet(self) -> Optional[str]:
        return self._sheet

    @property
    def selected_name(self) -> Optional[str]:
        return self._name

    def select_sheet(self, sheet_name: str) -> None:
        """Switch to ``sheet_name`` and clear the selected name."""
        self._rows = self._reader.rows(sheet_name)
        self._sheet = sheet_name
        self._name = None
        logger.debug("Selected sheet %r (%d rows)", sheet_name, len(self._rows))

    def select_name(self, name: Optional[str]) -> None:
        if self._sheet is None:
            raise ValueError("No sheet selected. Call select_sheet() first.")
        self._name = name

    def names(self) -> list[str]:
        return build_names(self._rows, self._classifier)

    def raw_events(self) -> list[RawEvent]:
        return extract_events(data_rows(self._rows), self._classifier)

    def selected_events(self) -> list[RawEvent]:
        return filter_events(self.raw_events(), self._name)

    def event_data(self) -> list[EventData]:
        """Return the duties of the selected person as transformer input."""
        return to_event_data(self.raw_events(), self._name)
