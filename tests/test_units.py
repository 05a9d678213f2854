"""Tests for weight and length conversion."""

import pytest

from body_fat_index.exceptions import InvalidInput
from body_fat_index.units import to_inches, to_pounds


class TestToPounds:
    def test_pounds_unchanged(self):
        assert to_pounds(150, "lb") == 150

    def test_stone(self):
        assert to_pounds(10, "st") == 140

    def test_kilograms(self):
        assert to_pounds(100, "kg") == pytest.approx(220.462262)

    def test_unit_is_case_insensitive(self):
        assert to_pounds(10, "ST") == 140

    def test_unknown_unit(self):
        with pytest.raises(InvalidInput, match="Invalid unit for weight"):
            to_pounds(10, "oz")


class TestToInches:
    def test_inches_unchanged(self):
        assert to_inches(34, "in") == 34

    def test_feet(self):
        assert to_inches(3, "ft") == 36

    def test_meters(self):
        assert to_inches(1, "m") == pytest.approx(39.3700787)

    def test_unknown_unit(self):
        with pytest.raises(InvalidInput, match="Invalid unit for length"):
            to_inches(10, "cm")
