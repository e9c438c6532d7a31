# dashboard/adapters/outbound/persistence/models/owned_resource.py

from sqlalchemy import Column, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import declared_attr, relationship

from dashboard.adapters.outbound.persistence.models.base_model import UTCDateTime, utc_now


class OwnedResourceMixin:
    """
    Columns shared by every resource that belongs to a user.

    ``created_by`` drives the ownership check; ``is_deleted``/``deleted_at``
    implement soft delete. A soft-deleted row stays in the table but is
    invisible to all lookups.
    """

    @declared_attr
    def created_by(cls):
        return Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    @declared_attr
    def creator(cls):
        return relationship("User", lazy="joined")

    is_deleted = Column(Boolean, nullable=False, default=False, index=True)
    deleted_at = Column(UTCDateTime, nullable=True, default=None)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
    updated_at = Column(UTCDateTime, nullable=False, default=utc_now, onupdate=utc_now)
