"""Base models and utilities for the dataset store module."""

from typing import Any
from uuid import UUID, uuid4

from pydantic_core import core_schema


class PydanticUUID(UUID):
    """UUID field for Pydantic models that defaults to UUID v4."""

    @classmethod
    def __get_pydantic_core_schema__(cls, _source_type: Any, _handler: Any) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.str_schema(),
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(UUID),
                    core_schema.chain_schema(
                        [
                            core_schema.str_schema(),
                            core_schema.no_info_plain_validator_function(cls.validate),
                        ]
                    ),
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: str(x), when_used="always"),
        )

    @classmethod
    def validate(cls, v):
        if isinstance(v, UUID):
            return v
        if isinstance(v, str):
            try:
                return UUID(v)
            except ValueError:
                raise ValueError("Invalid UUID format")
        if v is None:
            return uuid4()
        raise ValueError("Invalid UUID")


MODEL_CONFIG = {"populate_by_name": True, "from_attributes": True, "frozen": True}
