# dashboard/application/use_cases/__init__.py

from dashboard.application.use_cases.auth_use_cases import AsyncAuthService
from dashboard.application.use_cases.announcement_use_cases import AsyncAnnouncementService
from dashboard.application.use_cases.quiz_use_cases import AsyncQuizService

__all__ = [
    "AsyncAuthService",
    "AsyncAnnouncementService",
    "AsyncQuizService",
]
