"""
tests/test_user_repository.py -- Account storage: hashing, duplicate emails.
"""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from conftest import make_settings
from dashboard.adapters.outbound.persistence.models.user_model import User
from dashboard.adapters.outbound.persistence.repositories.user_repository import user_repository
from dashboard.adapters.outbound.security.password_hasher import PasswordHasher
from dashboard.adapters.outbound.security.token_manager import TokenManager
from dashboard.application.dtos.user_dto import UserCreate
from dashboard.application.use_cases.auth_use_cases import AsyncAuthService
from dashboard.domain.exceptions import DuplicateEmailException

PLAIN = "plain-text-secret"


class CountingHasher(PasswordHasher):
    def __init__(self) -> None:
        super().__init__(rounds=4)
        self.hash_calls = 0

    def hash(self, password: str) -> str:
        self.hash_calls += 1
        return super().hash(password)


def _user(email: str = "store@x.com") -> UserCreate:
    return UserCreate(username="store", email=email, password=PLAIN, age=20)


async def _count_users(db_session) -> int:
    return (await db_session.execute(select(func.count()).select_from(User))).scalar_one()


class TestStoredCredentials:

    @pytest.mark.asyncio
    async def test_only_the_hash_is_stored(self, db_session) -> None:
        hasher = CountingHasher()
        service = AsyncAuthService(db_session, TokenManager(make_settings()), hasher)

        user = await service.register_user(_user())

        stored = (await db_session.execute(select(User.password).where(User.id == user.id))).scalar_one()
        assert stored != PLAIN
        assert PLAIN not in stored
        assert stored.startswith("$2b$")
        assert hasher.verify(PLAIN, stored) is True

    @pytest.mark.asyncio
    async def test_timestamps_are_utc_aware(self, db_session) -> None:
        service = AsyncAuthService(db_session, TokenManager(make_settings()), CountingHasher())
        user = await service.register_user(_user("tz@x.com"))
        assert user.created_at.tzinfo is not None
        assert user.created_at.utcoffset().total_seconds() == 0


class TestDuplicateEmail:

    @pytest.mark.asyncio
    async def test_duplicate_sign_up_skips_hashing(self, db_session) -> None:
        hasher = CountingHasher()
        service = AsyncAuthService(db_session, TokenManager(make_settings()), hasher)
        await service.register_user(_user())
        assert hasher.hash_calls == 1

        with pytest.raises(DuplicateEmailException):
            await service.register_user(_user())
        assert hasher.hash_calls == 1

    @pytest.mark.asyncio
    async def test_unique_constraint_rejects_concurrent_registration(self, db_session) -> None:
        # the service-level lookup is bypassed, as when two sign-ups race
        await user_repository.create_with_password(db_session, obj_in=_user(), password_hash="hash-one")

        with pytest.raises(DuplicateEmailException):
            await user_repository.create_with_password(db_session, obj_in=_user(), password_hash="hash-two")

        assert await _count_users(db_session) == 1
        stored = await user_repository.get_by_email(db_session, email="store@x.com")
        assert stored.password == "hash-one"
