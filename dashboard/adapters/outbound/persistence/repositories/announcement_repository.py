# dashboard/adapters/outbound/persistence/repositories/announcement_repository.py

from dashboard.adapters.outbound.persistence.models.announcement_model import Announcement
from dashboard.adapters.outbound.persistence.repositories.base_repository import AsyncOwnedResourceCRUD


class AsyncAnnouncementRepository(AsyncOwnedResourceCRUD[Announcement]):
    """Repository for announcements."""


announcement_repository = AsyncAnnouncementRepository(Announcement)
