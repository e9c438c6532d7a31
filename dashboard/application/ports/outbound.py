# dashboard/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Generic, TypeVar

T = TypeVar('T')


class IOwnedResourceRepository(Generic[T], ABC):
    """Repository interface for user-owned, soft-deletable resources."""

    @abstractmethod
    async def get_active(self, db, id: Any) -> Optional[T]:
        """Get a resource by ID unless it is soft-deleted."""
        pass

    @abstractmethod
    async def list_active(self, db, skip: int = 0, limit: int = 100) -> List[T]:
        """List resources that are not soft-deleted, newest first."""
        pass

    @abstractmethod
    async def create_owned(self, db, *, obj_in: Any, owner_id: Any) -> T:
        """Create a resource owned by owner_id."""
        pass

    @abstractmethod
    async def update(self, db, *, db_obj: T, obj_in: Dict[str, Any]) -> T:
        """Update an existing resource."""
        pass

    @abstractmethod
    async def soft_delete(self, db, *, db_obj: T) -> T:
        """Mark a resource as deleted without removing the row."""
        pass


class IUserRepository(ABC):
    """User repository interface."""

    @abstractmethod
    async def get(self, db, id: Any) -> Optional[Any]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, db, email: str) -> Optional[Any]:
        """Get user by email."""
        pass

    @abstractmethod
    async def create_with_password(self, db, *, obj_in: Any, password_hash: str) -> Any:
        """Create user with an already hashed password."""
        pass

    @abstractmethod
    async def update_password(self, db, *, db_obj: Any, password_hash: str) -> Any:
        """Replace the stored password hash."""
        pass


class ITokenBlacklistRepository(ABC):
    """Revoked token store interface."""

    @abstractmethod
    async def add_to_blacklist(self, db, jti: str, expires_at: datetime) -> None:
        """Revoke a token id. Adding the same id twice is not an error."""
        pass

    @abstractmethod
    async def is_blacklisted(self, db, jti: str) -> bool:
        """Check whether a token id has been revoked."""
        pass

    @abstractmethod
    async def cleanup_expired(self, db, now: Optional[datetime] = None) -> int:
        """Remove revoked ids whose tokens have already expired."""
        pass
