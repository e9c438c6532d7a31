# dashboard/adapters/outbound/persistence/models/announcement_model.py

import uuid

from sqlalchemy import Column, String, Text, Uuid

from dashboard.adapters.outbound.persistence.models.base_model import Base
from dashboard.adapters.outbound.persistence.models.owned_resource import OwnedResourceMixin


class Announcement(OwnedResourceMixin, Base):
    """Course announcement published by a user."""
    __tablename__ = "announcements"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    course = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Announcement(title={self.title}, deleted={self.is_deleted})>"
