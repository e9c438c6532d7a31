# dashboard/adapters/outbound/persistence/repositories/quiz_repository.py

from dashboard.adapters.outbound.persistence.models.quiz_model import Quiz
from dashboard.adapters.outbound.persistence.repositories.base_repository import AsyncOwnedResourceCRUD


class AsyncQuizRepository(AsyncOwnedResourceCRUD[Quiz]):
    """Repository for quizzes."""


quiz_repository = AsyncQuizRepository(Quiz)
