"""Shift type classification from cell fill attributes."""

from abc import ABC, abstractmethod

from .models import CellStyle, ShiftType


class ShiftClassifier(ABC):
    """Strategy mapping cell style attributes to a shift type.

    Implementations must be total: every style, including an empty one,
    maps to exactly one ``ShiftType``.
    """

    @abstractmethod
    def classify(self, style: CellStyle) -> ShiftType:
        """Return the shift type a cell with ``style`` stands for."""
        pass

    def __call__(self, style: CellStyle) -> ShiftType:
        return self.classify(style)


class ColorShiftClassifier(ShiftClassifier):
    """Classifier for the station's colour convention.

    Light blue fills mark 12-hour day shifts, fills using theme colour 9
    mark 12-hour night shifts and anything else counts as a 24-hour shift.
    """

    DAY_COLOR = "FF00B0F0"
    NIGHT_THEME_INDEX = 9

    def __init__(
        self,
        day_color: str = DAY_COLOR,
        night_theme: int = NIGHT_THEME_INDEX,
        fallback: ShiftType = ShiftType.TWENTY_FOUR
    ) -> None:
        self._day_color = day_color
        self._night_theme = night_theme
        self._fallback = fallback

    def classify(self, style: CellStyle) -> ShiftType:
        if style.color == self._day_color:
            return ShiftType.DAY_TWELVE
        if style.theme_index == self._night_theme:
            return ShiftType.NIGHT_TWELVE
        return self._fallback


default_classifier = ColorShiftClassifier()


def classify(style: CellStyle) -> ShiftType:
    """Classify ``style`` with the default colour convention."""
    return default_classifier.classify(style)
