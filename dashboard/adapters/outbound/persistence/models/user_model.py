# dashboard/adapters/outbound/persistence/models/user_model.py

"""
User model.

Holds the identity of everyone who can sign in, together with the bcrypt
hash of their password. The plain text password is never stored.
"""

import uuid

from sqlalchemy import Column, Integer, String, Enum, Uuid

from dashboard.adapters.outbound.persistence.models.base_model import Base, UTCDateTime, utc_now
from dashboard.domain.models.identity_domain_model import Gender


class User(Base):
    """
    System user.

    Attributes:
        id: Unique identifier (UUID)
        username: Display name
        email: Email used for sign-in, unique
        password: bcrypt hash of the password
        age: Age in years
        gender: "male" or "female"
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(
        Enum(Gender, native_enum=False, values_callable=lambda e: [m.value for m in e], length=10),
        nullable=False,
        default=Gender.MALE,
    )
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
    updated_at = Column(UTCDateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<User(email={self.email}, username={self.username})>"
