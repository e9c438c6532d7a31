# dashboard/application/dtos/base_dto.py

"""
Base class for the application DTOs.

JSON payloads use camelCase keys (``createdBy``, ``accessToken``) while the
Python attributes stay snake_case. Inputs are accepted in either form.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CustomBaseModel(BaseModel):
    """
    Base model for all application DTOs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CustomBaseModel):
    """Response carrying only a human-readable message."""
    message: str = Field(..., description="Result of the operation.")


class DataResponse(CustomBaseModel, Generic[T]):
    """Standard success envelope: a message plus the resulting data."""
    message: str = Field(..., description="Result of the operation.")
    data: Optional[T] = Field(None, description="Resulting resource(s).")
