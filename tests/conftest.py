"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest
from openpyxl import Workbook
from openpyxl.styles import Color, PatternFill

from helpers import DAY, NIGHT, cell, row


@pytest.fixture
def schedule_rows():
    """A small sheet: header, three duty rows and one blank row."""
    return [
        row("Date", "Equipe", "", "Chef", "Equipier", "DESIDERATA"),
        row("10 avril 2025", "Equipe A", None,
            cell("Dupont", DAY), cell("Martin"), cell("Repos")),
        row("11 avril 2025", "Equipe B", None,
            cell("Martin", NIGHT), cell("dupont ")),
        row(None, None, None, cell("Orphelin")),
        row("12 avril 2025", "Equipe C", None, cell("Durand"), cell("Stage 2")),
    ]


@pytest.fixture
def workbook_path(tmp_path):
    """An .xlsx schedule with coloured assignment cells."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Avril"
    ws.append(["Date", "Equipe", "", "Chef", "Equipier", "DESIDERATA"])
    ws.append([datetime(2025, 4, 10), "Equipe A", None, "Dupont", "Martin", "Repos"])
    ws.append(["11 avril 2025", "Equipe B", None, "Martin", "Dupont"])
    ws.append(["12 avril 2025", "Equipe C", None, "Durand", "Garde 24"])

    ws["D2"].fill = PatternFill(fill_type="solid", fgColor="FF00B0F0")
    ws["D3"].fill = PatternFill(fill_type="solid", fgColor=Color(theme=9))

    other = wb.create_sheet("Mai")
    other.append(["Date", "Equipe", "", "Chef"])
    other.append(["02 mai 2025", "Equipe A", None, "Leroy"])

    path = tmp_path / "planning.xlsx"
    wb.save(path)
    return path


@pytest.fixture
def duty_rows(schedule_rows):
    """The rows of ``schedule_rows`` below its header."""
    return schedule_rows[1:]
