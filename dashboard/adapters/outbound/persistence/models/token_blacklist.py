# dashboard/adapters/outbound/persistence/models/token_blacklist.py

"""
Token blacklist model.

Stores the ids of access tokens revoked before their natural expiry
(sign-out) so they cannot be reused.
"""

from sqlalchemy import Column, String

from dashboard.adapters.outbound.persistence.models.base_model import Base, UTCDateTime, utc_now


class TokenBlacklist(Base):
    """
    Revoked token.

    Attributes:
        jti: JWT ID - unique identifier of the token
        expires_at: Original expiry of the token
        revoked_at: When the token was revoked
    """
    __tablename__ = "token_blacklist"

    jti = Column(String(64), primary_key=True)
    expires_at = Column(UTCDateTime, nullable=False, index=True)
    revoked_at = Column(UTCDateTime, nullable=False, default=utc_now)
