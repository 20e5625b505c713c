"""Concrete validators for the inferable column types.

Validators receive raw CSV cell strings; anything else is rejected.
"""

import math
import re
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from dataset_store.types import ColumnType
from dataset_store.validators.base import TypeValidator

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent
DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

# Two defaults that differ in year, month and day. A date component taken from
# the default instead of the string shows up as a difference between the parses.
FIRST_DEFAULT = datetime(2000, 1, 1)
SECOND_DEFAULT = datetime(2001, 2, 2)


class TextValidator(TypeValidator):
    """Validator for text columns. Any cell string is text."""

    column_type = ColumnType.TEXT

    def validate(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"Cannot convert {type(value)} to text")
        return value


class NumberValidator(TypeValidator):
    """Validator for number columns.

    Accepts strings holding a finite decimal literal, surrounding whitespace
    allowed. Partial literals such as "12abc", special values ("nan", "inf")
    and underscore separators ("1_000") are rejected.
    """

    column_type = ColumnType.NUMBER

    def validate(self, value: Any) -> float:
        """Validate and convert to a finite float."""
        if not isinstance(value, str):
            raise ValueError(f"Cannot convert {type(value)} to number")

        text = value.strip()
        if not DECIMAL_PATTERN.match(text):
            raise ValueError(f"Invalid number: {value!r}")
        number = float(text)
        if not math.isfinite(number):
            raise ValueError(f"Number is not finite: {value!r}")
        return number


class DateValidator(TypeValidator):
    """Validator for date columns.

    Accepts date or date/time strings dateutil can parse without fuzzy
    matching, as long as the string itself names a year, a month and a day.
    Weekday names, month names, bare times and ordinals such as "3rd" are
    not dates.
    """

    column_type = ColumnType.DATE

    def validate(self, value: Any) -> datetime:
        """Validate and convert to datetime."""
        if not isinstance(value, str):
            raise ValueError(f"Cannot convert {type(value)} to date")

        text = value.strip()
        if not text:
            raise ValueError("Empty string is not a date")
        try:
            first = date_parser.parse(text, default=FIRST_DEFAULT)
            second = date_parser.parse(text, default=SECOND_DEFAULT)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid date: {value!r}") from e

        if (first.year, first.month, first.day) != (second.year, second.month, second.day):
            raise ValueError(f"Incomplete date: {value!r}")
        return first
