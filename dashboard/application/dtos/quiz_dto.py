# dashboard/application/dtos/quiz_dto.py

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import Field, model_validator

from dashboard.application.dtos.base_dto import CustomBaseModel
from dashboard.application.dtos.user_dto import CreatorOutput


class Question(CustomBaseModel):
    """
    A multiple-choice question. ``correct_answer`` is an index into ``options``.
    """
    question_text: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=1)
    correct_answer: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_answer_index(self):
        if self.correct_answer >= len(self.options):
            raise ValueError("correctAnswer must be the index of one of the options")
        return self


class QuizCreate(CustomBaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    course: str = Field(..., min_length=1, max_length=255)
    questions: List[Question] = Field(..., min_length=1, description="At least one question is required.")


class QuizUpdate(CustomBaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    course: Optional[str] = Field(None, min_length=1, max_length=255)
    questions: Optional[List[Question]] = Field(None, min_length=1)

    @model_validator(mode="after")
    def check_not_empty(self):
        if self.title is None and self.course is None and self.questions is None:
            raise ValueError("Please provide at least one field to update")
        return self


class QuizOutput(CustomBaseModel):
    id: UUID
    title: str
    course: str
    questions: List[Question]
    created_by: UUID
    creator: Optional[CreatorOutput] = None
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
