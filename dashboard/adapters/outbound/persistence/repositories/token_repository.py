# dashboard/adapters/outbound/persistence/repositories/token_repository.py

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
import logging

from dashboard.adapters.outbound.persistence.models.token_blacklist import TokenBlacklist
from dashboard.application.ports.outbound import ITokenBlacklistRepository
from dashboard.domain.exceptions import DatabaseOperationException

logger = logging.getLogger(__name__)


class AsyncTokenRepository(ITokenBlacklistRepository):
    """Repository for managing token blacklist."""

    @staticmethod
    async def add_to_blacklist(db: AsyncSession, jti: str, expires_at: datetime) -> None:
        """
        Add a token to the blacklist.

        The insert is committed before returning, so any request that starts
        afterwards sees the token as revoked. Revoking an id that is already
        present is a no-op.

        Args:
            db: Async database session
            jti: JWT ID to blacklist
            expires_at: When the token naturally expires
        """
        try:
            # Core insert: duplicates fail on the primary key
            await db.execute(
                insert(TokenBlacklist).values(
                    jti=jti,
                    expires_at=expires_at,
                    revoked_at=datetime.now(timezone.utc),
                )
            )
            await db.commit()
        except IntegrityError:
            # the primary key already holds this jti
            await db.rollback()
            logger.info(f"Token {jti} was already blacklisted")
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseOperationException(
                detail="Error adding token to blacklist",
                original_error=e
            )

    @staticmethod
    async def is_blacklisted(db: AsyncSession, jti: str) -> bool:
        """
        Check if a token is in the blacklist.

        Args:
            db: Async database session
            jti: JWT ID to check

        Returns:
            True if token is blacklisted, False otherwise
        """
        try:
            query = select(TokenBlacklist.jti).where(TokenBlacklist.jti == jti)
            result = await db.execute(query)
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise DatabaseOperationException(
                detail="Error checking token blacklist",
                original_error=e
            )

    @staticmethod
    async def cleanup_expired(db: AsyncSession, now: Optional[datetime] = None) -> int:
        """
        Remove expired tokens from blacklist to keep the table size manageable.

        Only rows whose expiry lies strictly before ``now`` are removed; a
        token that can still pass signature verification stays revoked.

        Args:
            db: Async database session
            now: Reference time, defaults to the current UTC time

        Returns:
            Number of records deleted
        """
        if now is None:
            now = datetime.now(timezone.utc)
        try:
            result = await db.execute(
                delete(TokenBlacklist).where(TokenBlacklist.expires_at < now)
            )
            await db.commit()
            return result.rowcount or 0
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseOperationException(
                detail="Error cleaning up expired blacklisted tokens",
                original_error=e
            )


# Create instance
token_repository = AsyncTokenRepository()
