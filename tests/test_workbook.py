"""Tests for workbook reading and the selection session."""

import pytest

from extractor.models import CellStyle, EventData, ShiftType
from extractor.session import ScheduleSession
from extractor.workbook import WorkbookReader


class TestWorkbookReader:
    def test_sheet_names(self, workbook_path):
        assert WorkbookReader.open(workbook_path).sheet_names == ["Avril", "Mai"]

    def test_open_from_bytes(self, workbook_path):
        reader = WorkbookReader.open(workbook_path.read_bytes())
        assert reader.sheet_names == ["Avril", "Mai"]

    def test_reads_fill_styles(self, workbook_path):
        rows = WorkbookReader.open(workbook_path).rows("Avril")
        assert rows[1][3].value == "Dupont"
        assert rows[1][3].style == CellStyle(color="FF00B0F0")
        assert rows[2][3].style == CellStyle(theme_index=9)
        assert rows[1][4].style == CellStyle()

    def test_unknown_sheet(self, workbook_path):
        with pytest.raises(KeyError):
            WorkbookReader.open(workbook_path).rows("Juin")


class TestScheduleSession:
    @pytest.fixture
    def session(self, workbook_path):
        session = ScheduleSession(WorkbookReader.open(workbook_path))
        session.select_sheet("Avril")
        return session

    def test_names(self, session):
        assert session.names() == ["Dupont", "Durand", "Martin"]

    def test_raw_events_use_display_dates(self, session):
        assert [e.date for e in session.raw_events()] == [
            "2025-04-10", "11 avril 2025", "12 avril 2025"
        ]

    def test_event_data_for_selected_name(self, session):
        session.select_name("dupont")
        assert session.event_data() == [
            EventData("2025-04-10", "Equipe A", ShiftType.DAY_TWELVE),
            EventData("11 avril 2025", "Equipe B", ShiftType.TWENTY_FOUR),
        ]
        assert len(session.selected_events()) == 2

    def test_no_name_selects_nothing(self, session):
        assert session.selected_name is None
        assert session.event_data() == []

    def test_changing_sheet_resets_name(self, session):
        session.select_name("Dupont")
        session.select_sheet("Mai")
        assert session.selected_sheet == "Mai"
        assert session.selected_name is None
        assert session.names() == ["Leroy"]

    def test_name_requires_sheet(self, workbook_path):
        session = ScheduleSession(WorkbookReader.open(workbook_path))
        with pytest.raises(ValueError):
            session.select_name("Dupont")
