"""Tests for shift classification."""

from extractor.classifier import ColorShiftClassifier, classify
from extractor.models import CellStyle, ShiftType
from helpers import NightOnly


class TestColorShiftClassifier:
    def test_day_color_is_day_shift(self):
        assert classify(CellStyle(color="FF00B0F0")) is ShiftType.DAY_TWELVE

    def test_day_color_wins_over_night_theme(self):
        assert classify(CellStyle(color="FF00B0F0", theme_index=9)) is ShiftType.DAY_TWELVE

    def test_night_theme_is_night_shift(self):
        assert classify(CellStyle(theme_index=9)) is ShiftType.NIGHT_TWELVE
        assert classify(CellStyle(color="FFFF0000", theme_index=9)) is ShiftType.NIGHT_TWELVE

    def test_anything_else_is_twenty_four(self):
        assert classify(CellStyle()) is ShiftType.TWENTY_FOUR
        assert classify(CellStyle(color="FFFFFF00")) is ShiftType.TWENTY_FOUR
        assert classify(CellStyle(theme_index=4)) is ShiftType.TWENTY_FOUR

    def test_custom_colors(self):
        classifier = ColorShiftClassifier(day_color="FFFFFF00", night_theme=5)
        assert classifier(CellStyle(color="FFFFFF00")) is ShiftType.DAY_TWELVE
        assert classifier(CellStyle(theme_index=5)) is ShiftType.NIGHT_TWELVE
        assert classifier(CellStyle(color="FF00B0F0")) is ShiftType.TWENTY_FOUR


def test_classifier_is_pluggable():
    assert NightOnly()(CellStyle(color="FF00B0F0")) is ShiftType.NIGHT_TWELVE
