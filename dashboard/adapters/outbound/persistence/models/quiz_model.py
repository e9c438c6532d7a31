# dashboard/adapters/outbound/persistence/models/quiz_model.py

import uuid

from sqlalchemy import Column, String, JSON, Uuid

from dashboard.adapters.outbound.persistence.models.base_model import Base
from dashboard.adapters.outbound.persistence.models.owned_resource import OwnedResourceMixin


class Quiz(OwnedResourceMixin, Base):
    """
    Quiz for a course.

    ``questions`` is a JSON list of
    ``{"question_text": str, "options": [str], "correct_answer": int}``.
    """
    __tablename__ = "quizzes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    course = Column(String(255), nullable=False)
    questions = Column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Quiz(title={self.title}, deleted={self.is_deleted})>"
