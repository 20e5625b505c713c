"""Column value parsing for dataset store."""

from dataset_store.validators.base import TypeValidator
from dataset_store.validators.factory import ValidatorFactory, get_validator
from dataset_store.validators.validators import DateValidator, NumberValidator, TextValidator

__all__ = [
    "TypeValidator",
    "ValidatorFactory",
    "get_validator",
    "DateValidator",
    "NumberValidator",
    "TextValidator",
]
