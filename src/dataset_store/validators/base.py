"""Base validator class for column value parsing."""

from abc import ABC, abstractmethod
from typing import Any

from dataset_store.types import ColumnType


class TypeValidator(ABC):
    """Base class for column type validators."""

    column_type: ColumnType

    @abstractmethod
    def validate(self, value: Any) -> Any:
        """Validate and convert a raw cell value to the column's type.

        Args:
            value: Raw cell value to validate and convert

        Returns:
            Converted value

        Raises:
            ValueError: If value cannot be converted to the column's type
        """
        pass

    def is_valid(self, value: Any) -> bool:
        """Check whether a raw cell value converts to the column's type."""
        try:
            self.validate(value)
        except ValueError:
            return False
        return True

    @classmethod
    def get_column_type(cls) -> ColumnType:
        """Get the column type this validator handles."""
        return cls.column_type
