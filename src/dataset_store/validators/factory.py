"""Factory for creating column type validators."""

from typing import Dict, Type

from dataset_store.types import ColumnType
from dataset_store.validators.base import TypeValidator
from dataset_store.validators.validators import DateValidator, NumberValidator, TextValidator


class ValidatorFactory:
    """Factory for creating column type validators."""

    _validators: Dict[str, Type[TypeValidator]] = {
        ColumnType.TEXT.value: TextValidator,
        ColumnType.NUMBER.value: NumberValidator,
        ColumnType.DATE.value: DateValidator,
    }

    @classmethod
    def register_validator(cls, validator_class: Type[TypeValidator]) -> None:
        """Register a new validator class.

        Args:
            validator_class: Validator class to register
        """
        cls._validators[validator_class.get_column_type().value] = validator_class

    @classmethod
    def get_validator(cls, column_type: ColumnType) -> TypeValidator:
        """Get a validator instance for a column type.

        Args:
            column_type: Column type to get validator for

        Returns:
            Validator instance

        Raises:
            ValueError: If no validator exists for the column type
        """
        validator_class = cls._validators.get(getattr(column_type, "value", None))
        if not validator_class:
            raise ValueError(f"No validator registered for column type: {column_type}")
        return validator_class()


# Convenience function
def get_validator(column_type: ColumnType) -> TypeValidator:
    """Get a validator instance for a column type."""
    return ValidatorFactory.get_validator(column_type)
