# dashboard/domain/models/identity_domain_model.py

import enum
from uuid import UUID
from dataclasses import dataclass
from datetime import datetime


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class TokenClaims:
    """Claims carried by a verified access token."""
    subject_id: UUID
    token_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed access token and the claims bound into it."""
    token: str
    token_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """
    Identity attached to a request after successful authentication.

    Frozen: once resolved it stays the same for the rest of the request.
    """
    user_id: UUID
    token_id: str
    expires_at: datetime

    @property
    def id(self) -> UUID:
        return self.user_id
