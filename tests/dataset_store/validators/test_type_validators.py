"""Tests for the column type validators."""

from datetime import datetime

import pytest

from dataset_store.validators.validators import DateValidator, NumberValidator, TextValidator


class TestNumberValidator:
    """Tests for NumberValidator."""

    @pytest.mark.parametrize(
        "value,expected",
        [("42", 42.0), ("-3.5", -3.5), ("  7 ", 7.0), (".25", 0.25), ("1e3", 1000.0), ("+2", 2.0)],
    )
    def test_valid_numbers(self, value, expected):
        assert NumberValidator().validate(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "12abc", "1,000", "1_000", "nan", "inf", "-Infinity", "0x10", "1e", "--1"])
    def test_invalid_numbers(self, value):
        validator = NumberValidator()
        with pytest.raises(ValueError):
            validator.validate(value)
        assert validator.is_valid(value) is False

    def test_rejects_overflowing_literals(self):
        """A literal too large for a float is not finite."""
        with pytest.raises(ValueError) as exc:
            NumberValidator().validate("1e999")
        assert "not finite" in str(exc.value)

    @pytest.mark.parametrize("value", [None, 5, 1.5, True])
    def test_rejects_non_strings(self, value):
        with pytest.raises(ValueError) as exc:
            NumberValidator().validate(value)
        assert "Cannot convert" in str(exc.value)


class TestDateValidator:
    """Tests for DateValidator."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-01-15", datetime(2024, 1, 15)),
            ("2024-01-15T08:30:00", datetime(2024, 1, 15, 8, 30)),
            ("January 15, 2024", datetime(2024, 1, 15)),
            (" 2024/01/15 ", datetime(2024, 1, 15)),
            ("Mon, 15 Jan 2024", datetime(2024, 1, 15)),
        ],
    )
    def test_valid_dates(self, value, expected):
        assert DateValidator().validate(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-13-45", "banana"])
    def test_invalid_dates(self, value):
        validator = DateValidator()
        with pytest.raises(ValueError):
            validator.validate(value)
        assert validator.is_valid(value) is False

    @pytest.mark.parametrize("value", ["Mon", "Tuesday", "May", "June", "10:30", "09:00:15", "1st", "3rd", "Jan 2024", "15 March"])
    def test_rejects_incomplete_dates(self, value):
        """Strings without an explicit year, month and day are not dates."""
        validator = DateValidator()
        with pytest.raises(ValueError) as exc:
            validator.validate(value)
        assert "Incomplete date" in str(exc.value)
        assert validator.is_valid(value) is False

    @pytest.mark.parametrize("value", [None, 3.5, datetime(2024, 1, 15)])
    def test_rejects_non_strings(self, value):
        with pytest.raises(ValueError) as exc:
            DateValidator().validate(value)
        assert "Cannot convert" in str(exc.value)


class TestTextValidator:
    """Tests for TextValidator."""

    def test_accepts_any_string(self):
        validator = TextValidator()
        assert validator.validate("hello") == "hello"
        assert validator.validate("") == ""

    @pytest.mark.parametrize("value", [None, 12])
    def test_rejects_non_strings(self, value):
        assert TextValidator().is_valid(value) is False
