# dashboard/application/use_cases/announcement_use_cases.py

from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.adapters.outbound.persistence.models.announcement_model import Announcement
from dashboard.adapters.outbound.persistence.repositories.announcement_repository import announcement_repository
from dashboard.application.use_cases.base_use_cases import OwnedResourceService


class AsyncAnnouncementService(OwnedResourceService[Announcement]):
    """Use cases for course announcements."""

    resource_name = "announcement"

    def __init__(self, db_session: AsyncSession):
        super().__init__(db_session, announcement_repository)
