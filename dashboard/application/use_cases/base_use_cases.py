# dashboard/application/use_cases/base_use_cases.py

"""
Base class for the services that manage user-owned resources.

Every mutating operation follows the same order: look the resource up
(404 when absent or soft-deleted), check ownership (403), then mutate.
"""

from typing import Any, Dict, Generic, List, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from dashboard.adapters.outbound.persistence.repositories.base_repository import AsyncOwnedResourceCRUD
from dashboard.domain.exceptions import ResourceNotFoundException
from dashboard.domain.models.identity_domain_model import AuthenticatedIdentity
from dashboard.domain.services.authorization_service import OwnershipPolicy

# Configure logger
logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class OwnedResourceService(Generic[ModelType]):
    """
    Shared CRUD flow for announcements and quizzes.

    Subclasses set ``resource_name`` (used in messages) and pass their
    repository.
    """

    resource_name: str = "resource"

    def __init__(self, db_session: AsyncSession, repository: AsyncOwnedResourceCRUD):
        """
        Args:
            db_session: Active SQLAlchemy session
            repository: Repository for the managed model
        """
        self.db = db_session
        self.repository = repository

    def _not_found(self) -> ResourceNotFoundException:
        return ResourceNotFoundException(detail=f"{self.resource_name.capitalize()} not found")

    async def _get_or_404(self, entity_id: Any) -> ModelType:
        entity = await self.repository.get_active(self.db, entity_id)
        if entity is None:
            logger.info(f"{self.resource_name} {entity_id} not found or deleted")
            raise self._not_found()
        return entity

    async def _get_owned(self, entity_id: Any, caller: AuthenticatedIdentity, action: str) -> ModelType:
        entity = await self._get_or_404(entity_id)
        OwnershipPolicy.ensure_can_mutate(entity.created_by, caller.user_id, action, self.resource_name)
        return entity

    async def list_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return await self.repository.list_active(self.db, skip=skip, limit=limit)

    async def get(self, entity_id: Any) -> ModelType:
        return await self._get_or_404(entity_id)

    async def create(self, data: Any, caller: AuthenticatedIdentity) -> ModelType:
        return await self.repository.create_owned(self.db, obj_in=data, owner_id=caller.user_id)

    def _update_fields(self, data: Any) -> Dict[str, Any]:
        return data.model_dump(exclude_none=True)

    async def update(self, entity_id: Any, data: Any, caller: AuthenticatedIdentity) -> ModelType:
        entity = await self._get_owned(entity_id, caller, "update")
        return await self.repository.update(self.db, db_obj=entity, obj_in=self._update_fields(data))

    async def delete(self, entity_id: Any, caller: AuthenticatedIdentity) -> ModelType:
        entity = await self._get_owned(entity_id, caller, "delete")
        return await self.repository.soft_delete(self.db, db_obj=entity)
