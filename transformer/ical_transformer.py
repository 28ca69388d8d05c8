"""iCalendar transformer for fire-station duties."""

import hashlib
import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional

from icalendar import Calendar, Event

from extractor.models import EventData
from .base import BaseTransformer
from .errors import CalendarSerializationError
from .events import CalendarEvent, build_event

logger = logging.getLogger(__name__)


class ICalTransformer(BaseTransformer):
    """Transformer that converts duties to iCalendar format."""
    
    MIME_TYPE = "text/calendar"
    DEFAULT_FILENAME = "garde_pompier.ics"
    PRODID = "-//Garde Pompier//garde-to-ical//FR"
    
    def __init__(
        self,
        calendar_name: str = "Gardes",
        tz: Optional[tzinfo] = None
    ) -> None:
        """Initialize the iCalendar transformer.
        
        Args:
            calendar_name: Name shown by calendar applications.
            tz: Timezone attached to event times. When None, times are
                written as floating local times.
        """
        self._calendar: Optional[Calendar] = None
        self._calendar_name = calendar_name
        self._tz = tz
    
    def _generate_uid(self, event: EventData) -> str:
        """Generate a stable identifier for a duty."""
        unique_string = f"{event.date}-{event.team}-{event.shift_label}"
        return hashlib.md5(unique_string.encode()).hexdigest() + "@garde-pompier"
    
    def _to_datetime(self, parts: tuple[int, int, int, int, int]) -> datetime:
        return datetime(*parts, tzinfo=self._tz)
    
    def _to_component(self, event: EventData, calendar_event: CalendarEvent) -> Event:
        ical_event = Event()
        ical_event.add("uid", self._generate_uid(event))
        ical_event.add("dtstart", self._to_datetime(calendar_event.start))
        ical_event.add("dtend", self._to_datetime(calendar_event.end))
        ical_event.add("dtstamp", datetime.now(timezone.utc))
        ical_event.add("summary", calendar_event.title)
        ical_event.add("description", calendar_event.description)
        return ical_event
    
    def transform(self, events: list[EventData]) -> Calendar:
        """Transform duties into iCalendar format.
        
        Args:
            events: Duties of the selected person.
            
        Returns:
            iCalendar Calendar object.
            
        Raises:
            InvalidDateError: If a duty date cannot be parsed.
            UnrecognizedServiceTypeError: If a duty has an unknown shift type.
        """
        calendar = Calendar()
        calendar.add("prodid", self.PRODID)
        calendar.add("version", "2.0")
        calendar.add("calscale", "GREGORIAN")
        calendar.add("method", "PUBLISH")
        calendar.add("x-wr-calname", self._calendar_name)
        
        for event in events:
            calendar_event = build_event(event.date, event.team, event.shift_type)
            calendar.add_component(self._to_component(event, calendar_event))
        
        logger.info("Built calendar with %d events", len(events))
        self._calendar = calendar
        return calendar
    
    def to_ical(self) -> bytes:
        """Serialize the calendar.
        
        Raises:
            RuntimeError: If transform() hasn't been called yet.
            CalendarSerializationError: If the calendar cannot be serialized.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")
        
        try:
            return self._calendar.to_ical()
        except (TypeError, ValueError) as e:
            raise CalendarSerializationError(f"Cannot serialize calendar: {e}") from e
    
    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.
        
        The calendar is fully serialized before the file is opened, so a
        failure leaves no partial file behind.
        
        Args:
            output_path: Path to the output file.
        """
        data = self.to_ical()
        with open(output_path, "wb") as f:
            f.write(data)
