# dashboard/adapters/outbound/persistence/repositories/__init__.py

"""
Repository module.

Exports the repository classes and their shared instances.
"""

from dashboard.adapters.outbound.persistence.repositories.base_repository import AsyncOwnedResourceCRUD
from dashboard.adapters.outbound.persistence.repositories.user_repository import (
    AsyncUserRepository,
    user_repository,
)
from dashboard.adapters.outbound.persistence.repositories.token_repository import (
    AsyncTokenRepository,
    token_repository,
)
from dashboard.adapters.outbound.persistence.repositories.announcement_repository import (
    AsyncAnnouncementRepository,
    announcement_repository,
)
from dashboard.adapters.outbound.persistence.repositories.quiz_repository import (
    AsyncQuizRepository,
    quiz_repository,
)

__all__ = [
    # Classes
    "AsyncOwnedResourceCRUD",
    "AsyncUserRepository",
    "AsyncTokenRepository",
    "AsyncAnnouncementRepository",
    "AsyncQuizRepository",

    # Instances
    "user_repository",
    "token_repository",
    "announcement_repository",
    "quiz_repository",
]
