# dashboard/application/use_cases/quiz_use_cases.py

from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.adapters.outbound.persistence.models.quiz_model import Quiz
from dashboard.adapters.outbound.persistence.repositories.quiz_repository import quiz_repository
from dashboard.application.dtos.quiz_dto import QuizUpdate
from dashboard.application.use_cases.base_use_cases import OwnedResourceService


class AsyncQuizService(OwnedResourceService[Quiz]):
    """Use cases for quizzes."""

    resource_name = "quiz"

    def __init__(self, db_session: AsyncSession):
        super().__init__(db_session, quiz_repository)

    def _update_fields(self, data: QuizUpdate) -> Dict[str, Any]:
        fields = data.model_dump(exclude_none=True)
        if data.questions is not None:
            # the whole question list is replaced, never merged
            fields["questions"] = [q.model_dump() for q in data.questions]
        return fields
