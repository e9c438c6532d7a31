# dashboard/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports every SQLAlchemy model so importing this package registers all
tables on Base.metadata.
"""

from dashboard.adapters.outbound.persistence.models.base_model import Base
from dashboard.adapters.outbound.persistence.models.user_model import User
from dashboard.adapters.outbound.persistence.models.token_blacklist import TokenBlacklist
from dashboard.adapters.outbound.persistence.models.announcement_model import Announcement
from dashboard.adapters.outbound.persistence.models.quiz_model import Quiz

__all__ = [
    "Base",
    "User",
    "TokenBlacklist",
    "Announcement",
    "Quiz",
]
