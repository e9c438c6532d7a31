# dashboard/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements the authentication use cases: sign-up, sign-in,
sign-out (token revocation) and password change.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.adapters.outbound.persistence.repositories.user_repository import user_repository
from dashboard.adapters.outbound.persistence.repositories.token_repository import token_repository
from dashboard.adapters.outbound.security.password_hasher import PasswordHasher
from dashboard.adapters.outbound.security.token_manager import TokenManager
from dashboard.application.dtos.user_dto import UserCreate, SignIn, ChangePassword, UserOutput
from dashboard.domain.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    ResourceNotFoundException,
    TokenException,
    UnauthenticatedException,
)
from dashboard.domain.models.identity_domain_model import AuthenticatedIdentity, IssuedToken

logger = logging.getLogger(__name__)


class AsyncAuthService:
    """
    Service for user authentication.

    This class implements the business logic related to user
    authentication. Collaborators are injected so the configured work
    factor and signing key are used consistently.
    """

    def __init__(self, db_session: AsyncSession, token_manager: TokenManager, password_hasher: PasswordHasher):
        """
        Initialize the service.

        Args:
            db_session: Active SQLAlchemy session
            token_manager: Issuer/verifier for access tokens
            password_hasher: bcrypt hasher with the configured work factor
        """
        self.db = db_session
        self.token_manager = token_manager
        self.password_hasher = password_hasher

    async def register_user(self, user_input: UserCreate) -> UserOutput:
        """
        Register a new user in the system.

        Args:
            user_input: User data to register

        Returns:
            Registered user (public fields only)

        Raises:
            DuplicateEmailException: If the email is already in use
        """
        # checked before hashing so duplicates never pay the bcrypt cost
        if await user_repository.get_by_email(self.db, email=user_input.email):
            logger.info("Sign-up rejected: email already registered")
            raise DuplicateEmailException()

        password_hash = await self.password_hasher.hash_password(user_input.password)
        user = await user_repository.create_with_password(
            self.db, obj_in=user_input, password_hash=password_hash
        )
        return UserOutput.model_validate(user)

    async def login_user(self, credentials: SignIn) -> IssuedToken:
        """
        Authenticate a user and issue an access token.

        Args:
            credentials: Email and password

        Returns:
            The issued token

        Raises:
            ResourceNotFoundException: If no user has this email
            InvalidCredentialsException: If the password does not match
        """
        user = await user_repository.get_by_email(self.db, email=credentials.email)
        if not user:
            raise ResourceNotFoundException(detail="User not found")

        if not await self.password_hasher.verify_password(credentials.password, user.password):
            logger.info(f"Failed sign-in for user {user.id}")
            raise InvalidCredentialsException()

        issued = self.token_manager.issue(subject_id=user.id)
        logger.info(f"User {user.id} signed in (token {issued.token_id})")
        return issued

    async def logout_user(self, token: str) -> None:
        """
        Revoke an access token.

        The token only needs a valid signature and must not be expired;
        revoking an already revoked token succeeds again.

        Raises:
            UnauthenticatedException: If the token fails verification
        """
        try:
            claims = self.token_manager.verify(token)
        except TokenException as e:
            logger.info(f"Sign-out rejected: {e.internal_code}")
            raise UnauthenticatedException(detail="Invalid or expired token")

        await token_repository.add_to_blacklist(self.db, claims.token_id, claims.expires_at)
        logger.info(f"Token {claims.token_id} revoked for user {claims.subject_id}")

    async def change_password(self, identity: AuthenticatedIdentity, data: ChangePassword) -> None:
        """
        Change the password of the authenticated user.

        Raises:
            ResourceNotFoundException: If the user no longer exists
            InvalidCredentialsException: If the current password is wrong
        """
        user = await user_repository.get(self.db, identity.user_id)
        if not user:
            raise ResourceNotFoundException(detail="User not found")

        if not await self.password_hasher.verify_password(data.current_password, user.password):
            raise InvalidCredentialsException(detail="Current password is incorrect")

        password_hash = await self.password_hasher.hash_password(data.new_password)
        await user_repository.update_password(self.db, db_obj=user, password_hash=password_hash)
