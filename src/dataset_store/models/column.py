"""Column model definitions for the dataset store module."""

from pydantic import BaseModel, Field, field_validator

from dataset_store.models.base import MODEL_CONFIG
from dataset_store.types import ColumnType


class DatasetColumn(BaseModel):
    """Column definition inferred from a CSV header and its values."""

    name: str = Field(description="Trimmed CSV header name", min_length=1, json_schema_extra={"examples": ["revenue"]})
    type: ColumnType = Field(description="Inferred column type", json_schema_extra={"examples": [ColumnType.NUMBER]})
    nullable: bool = Field(default=False, description="Whether at least one row has a missing or empty value")

    model_config = MODEL_CONFIG

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Column name must not be blank")
        return value
