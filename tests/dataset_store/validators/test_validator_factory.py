"""Tests for validator factory."""

import pytest

from dataset_store.types import ColumnType
from dataset_store.validators.base import TypeValidator
from dataset_store.validators.factory import ValidatorFactory, get_validator
from dataset_store.validators.validators import DateValidator, NumberValidator, TextValidator


def test_get_validator_text():
    """Should return TextValidator for TEXT type."""
    validator = get_validator(ColumnType.TEXT)
    assert isinstance(validator, TextValidator)


def test_get_validator_number():
    """Should return NumberValidator for NUMBER type."""
    validator = get_validator(ColumnType.NUMBER)
    assert isinstance(validator, NumberValidator)


def test_get_validator_date():
    """Should return DateValidator for DATE type."""
    validator = get_validator(ColumnType.DATE)
    assert isinstance(validator, DateValidator)


def test_get_validator_unknown():
    """Should raise ValueError for unknown column type."""

    class UnknownType:
        value = "unknown"

    with pytest.raises(ValueError) as exc:
        get_validator(UnknownType())
    assert "No validator registered for column type" in str(exc.value)


def test_register_new_validator():
    """Should allow registering new validator types."""

    class BooleanType:
        value = "bool"

    class BooleanValidator(TypeValidator):
        column_type = BooleanType()

        def validate(self, value):
            if str(value).lower() in ("true", "false"):
                return str(value).lower() == "true"
            raise ValueError(f"Not a boolean: {value}")

    ValidatorFactory.register_validator(BooleanValidator)
    try:
        validator = get_validator(BooleanType())
        assert isinstance(validator, BooleanValidator)
        assert validator.validate("TRUE") is True
        assert validator.is_valid("maybe") is False
    finally:
        ValidatorFactory._validators.pop("bool", None)


def test_validator_instances():
    """Should return new instances for each call."""
    validator1 = get_validator(ColumnType.NUMBER)
    validator2 = get_validator(ColumnType.NUMBER)
    assert validator1 is not validator2
