"""Row builders shared by the tests."""

from extractor.classifier import ShiftClassifier
from extractor.models import CellStyle, SheetCell, ShiftType

DAY = CellStyle(color="FF00B0F0")
NIGHT = CellStyle(theme_index=9)
PLAIN = CellStyle()


def cell(value=None, style=PLAIN):
    return SheetCell(value=value, style=style)


def row(*values):
    """Build a row from plain values and ready-made cells."""
    return [v if isinstance(v, SheetCell) else cell(v) for v in values]


class NightOnly(ShiftClassifier):
    def classify(self, style):
        return ShiftType.NIGHT_TWELVE
