"""Workbook access built on openpyxl."""

import logging
from io import BytesIO
from pathlib import Path
from typing import Union

from openpyxl import load_workbook
from openpyxl.cell.cell import Cell
from openpyxl.workbook.workbook import Workbook

from .models import CellStyle, SheetCell

logger = logging.getLogger(__name__)


def read_cell_style(cell: Cell) -> CellStyle:
    """Read the fill colour attributes of an openpyxl cell.

    Args:
        cell: Worksheet cell.

    Returns:
        Style with the ARGB colour for RGB fills, the theme index for theme
        fills, and no attribute at all for unfilled cells.
    """
    fill = cell.fill
    if fill is None or fill.fill_type is None:
        return CellStyle()

    color = fill.fgColor
    if color is None:
        return CellStyle()
    if color.type == "rgb" and isinstance(color.rgb, str):
        return CellStyle(color=color.rgb.upper())
    if color.type == "theme":
        return CellStyle(theme_index=color.theme)
    return CellStyle()


class WorkbookReader:
    """Reader exposing the sheets of a workbook as rows of cells.

    The workbook is loaded once with cached formula values so that cells
    carry what the spreadsheet displays.
    """

    def __init__(self, workbook: Workbook) -> None:
        self._workbook = workbook

    @classmethod
    def open(cls, source: Union[str, Path, bytes]) -> "WorkbookReader":
        """Load a workbook from a file path or from raw bytes.

        Args:
            source: Path to an .xlsx file, or its contents.

        Returns:
            Reader over the loaded workbook.
        """
        if isinstance(source, bytes):
            workbook = load_workbook(BytesIO(source), data_only=True)
        else:
            workbook = load_workbook(source, data_only=True)
        logger.info("Loaded workbook with sheets: %s", ", ".join(workbook.sheetnames))
        return cls(workbook)

    @property
    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def rows(self, sheet_name: str) -> list[list[SheetCell]]:
        """Return every row of ``sheet_name`` as a list of cells.

        Raises:
            KeyError: If the workbook has no such sheet.
        """
        if sheet_name not in self._workbook.sheetnames:
            raise KeyError(f"Sheet not found: {sheet_name}")

        worksheet = self._workbook[sheet_name]
        return [
            [SheetCell(value=cell.value, style=read_cell_style(cell)) for cell in row]
            for row in worksheet.iter_rows()
        ]
