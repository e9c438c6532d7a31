# dashboard/adapters/outbound/persistence/repositories/base_repository.py

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from fastapi.encoders import jsonable_encoder
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.future import select
import logging

from dashboard.adapters.outbound.persistence.models.base_model import Base
from dashboard.application.ports.outbound import IOwnedResourceRepository
from dashboard.domain.exceptions import DatabaseOperationException

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

# Configure logger
logger = logging.getLogger(__name__)


class AsyncOwnedResourceCRUD(IOwnedResourceRepository[ModelType], Generic[ModelType]):
    """
    Async base class for user-owned, soft-deletable resources.

    Every lookup filters out rows with ``is_deleted = True``; deletion only
    flips that flag and stamps ``deleted_at``. Ownership is not checked
    here, callers apply the authorization policy between lookup and
    mutation.

    Attributes:
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize the repository with an SQLAlchemy model.

        Args:
            model: SQLAlchemy model class associated with this repository
        """
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def _reload(self, db: AsyncSession, id: Any) -> ModelType:
        # populate_existing refreshes the joined creator along with the columns
        query = (
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.unique().scalar_one()

    async def get_active(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID unless it is soft-deleted.

        Args:
            db: Async database session
            id: ID of the entity

        Returns:
            Entity found or None if it doesn't exist or was deleted
        """
        try:
            query = (
                select(self.model)
                .where(self.model.id == id, self.model.is_deleted.is_(False))
                .execution_options(populate_existing=True)
            )
            result = await db.execute(query)
            return result.unique().scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def list_active(self, db: AsyncSession, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """
        Get non-deleted entities, newest first.

        Args:
            db: Async database session
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return

        Returns:
            List of found entities
        """
        try:
            query = (
                select(self.model)
                .where(self.model.is_deleted.is_(False))
                .order_by(self.model.created_at.desc())
                .offset(skip)
                .limit(limit)
            )
            result = await db.execute(query)
            return list(result.unique().scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def create_owned(self, db: AsyncSession, *, obj_in: Any, owner_id: Any) -> ModelType:
        """
        Create a new entity owned by ``owner_id``.

        Args:
            db: Async database session
            obj_in: Creation DTO or dictionary with entity data
            owner_id: ID of the authenticated identity creating the entity

        Returns:
            Newly created entity
        """
        try:
            obj_in_data = obj_in if isinstance(obj_in, dict) else jsonable_encoder(obj_in.model_dump())

            db_obj = self.model(**obj_in_data, created_by=owner_id)
            db.add(db_obj)
            await db.commit()

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return await self._reload(db, db_obj.id)

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error creating {self.model.__name__}",
                original_error=e
            )

    async def update(self, db: AsyncSession, *, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """
        Update an existing entity.

        Args:
            db: Async database session
            db_obj: Model instance to update
            obj_in: Dictionary with the fields to change

        Returns:
            Updated entity
        """
        try:
            for field, value in obj_in.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            db.add(db_obj)
            await db.commit()

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} updated")
            return await self._reload(db, db_obj.id)

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error updating {self.model.__name__}",
                original_error=e
            )

    async def soft_delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        Soft delete an entity.

        The row stays in the table with ``is_deleted = True`` and is
        excluded from every later lookup.

        Args:
            db: Async database session
            db_obj: Model instance to delete

        Returns:
            The deleted entity
        """
        try:
            db_obj.is_deleted = True
            db_obj.deleted_at = datetime.now(timezone.utc)

            db.add(db_obj)
            await db.commit()

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} soft deleted")
            return await self._reload(db, db_obj.id)

        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error deleting {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error deleting {self.model.__name__}",
                original_error=e
            )
