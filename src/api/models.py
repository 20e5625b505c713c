"""API request and response models."""

from typing import List

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., description="Human readable result")


class FieldViolation(BaseModel):
    """One field that failed dataset validation."""

    field: str = Field(..., description="Name or path of the violated field")
    message: str = Field(..., description="What is wrong with it")


class InvalidDatasetResponse(BaseModel):
    """Error detail returned when an upload fails dataset validation."""

    message: str = Field(default="Invalid dataset data")
    errors: List[FieldViolation] = Field(default_factory=list)
