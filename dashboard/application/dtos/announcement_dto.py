# dashboard/application/dtos/announcement_dto.py

from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import Field, model_validator

from dashboard.application.dtos.base_dto import CustomBaseModel
from dashboard.application.dtos.user_dto import CreatorOutput


class AnnouncementCreate(CustomBaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    course: str = Field(..., min_length=1, max_length=255)


class AnnouncementUpdate(CustomBaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    course: Optional[str] = Field(None, min_length=1, max_length=255)

    @model_validator(mode="after")
    def check_not_empty(self):
        if self.title is None and self.content is None and self.course is None:
            raise ValueError("Please provide at least one field to update")
        return self


class AnnouncementOutput(CustomBaseModel):
    id: UUID
    title: str
    content: str
    course: str
    created_by: UUID
    creator: Optional[CreatorOutput] = None
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
