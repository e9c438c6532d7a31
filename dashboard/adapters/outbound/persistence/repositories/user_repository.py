# dashboard/adapters/outbound/persistence/repositories/user_repository.py

"""
Repository for user operations.

This module implements the repository that performs database operations
related to users, implementing the IUserRepository interface. Password
hashing happens before the repository is called; only hashes reach it.
"""

import logging
from typing import Optional, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError, IntegrityError

from dashboard.adapters.outbound.persistence.models.user_model import User
from dashboard.application.dtos.user_dto import UserCreate
from dashboard.application.ports.outbound import IUserRepository
from dashboard.domain.exceptions import (
    DatabaseOperationException,
    DuplicateEmailException,
)


class AsyncUserRepository(IUserRepository):
    """
    Async repository for the User entity.

    Provides lookups by id and email, creation with a hashed password and
    password replacement.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.User")

    async def get(self, db: AsyncSession, id: Any) -> Optional[User]:
        """
        Find a user by ID.

        Args:
            db: Async database session
            id: User's UUID

        Returns:
            User found or None if doesn't exist
        """
        try:
            query = select(User).where(User.id == id)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user with ID {id}: {e}")
            raise DatabaseOperationException(
                detail="Error fetching user",
                original_error=e
            )

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        """
        Find a user by email (exact match on the stored value).

        Args:
            db: Async database session
            email: User's email

        Returns:
            User found or None if doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(User).where(User.email == email)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user by email: {e}")
            raise DatabaseOperationException(
                detail="Error fetching user by email",
                original_error=e
            )

    async def create_with_password(self, db: AsyncSession, *, obj_in: UserCreate, password_hash: str) -> User:
        """
        Create a new user.

        Args:
            db: Async database session
            obj_in: Registration data
            password_hash: bcrypt hash of obj_in.password

        Returns:
            New User created

        Raises:
            DuplicateEmailException: If the unique email constraint rejects the row
            DatabaseOperationException: In case of database error
        """
        try:
            db_obj = User(
                username=obj_in.username,
                email=obj_in.email,
                password=password_hash,
                age=obj_in.age,
                gender=obj_in.gender,
            )
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
            self.logger.info(f"User created with ID: {db_obj.id}")
            return db_obj

        except IntegrityError:
            # an existing row or a concurrent registration holds this email
            await db.rollback()
            self.logger.warning("Attempt to create user with existing email")
            raise DuplicateEmailException()
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating user: {e}")
            raise DatabaseOperationException(
                detail="Error creating user",
                original_error=e
            )

    async def update_password(self, db: AsyncSession, *, db_obj: User, password_hash: str) -> User:
        """
        Replace a user's password hash.

        Args:
            db: Async database session
            db_obj: User to update
            password_hash: New bcrypt hash

        Returns:
            Updated User
        """
        try:
            db_obj.password = password_hash
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
            self.logger.info(f"Password changed for user {db_obj.id}")
            return db_obj
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error updating password: {e}")
            raise DatabaseOperationException(
                detail="Error updating user",
                original_error=e
            )


# Create instance
user_repository = AsyncUserRepository()
