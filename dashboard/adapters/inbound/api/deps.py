# dashboard/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via FastAPI
Depends() for configuration, database access and authentication. All
shared collaborators live on ``app.state`` and are built once by
``create_app``.
"""

import logging
from typing import AsyncGenerator, Optional
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.adapters.configuration.config import Settings
from dashboard.adapters.outbound.persistence.repositories.token_repository import token_repository
from dashboard.adapters.outbound.security.password_hasher import PasswordHasher
from dashboard.adapters.outbound.security.token_manager import TokenManager
from dashboard.domain.exceptions import (
    TokenException,
    UnauthenticatedException,
    ValidationFailedException,
)
from dashboard.domain.models.identity_domain_model import AuthenticatedIdentity

# Configure logger
logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


########################################################################
# Application Collaborators
########################################################################

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_manager(request: Request) -> TokenManager:
    return request.app.state.token_manager


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session, committed when the request
        succeeds and rolled back otherwise
    """
    async with request.app.state.database.session() as session:
        yield session


########################################################################
# Token Extraction
########################################################################

def read_token(request: Request, settings: Settings) -> Optional[str]:
    """
    Read the raw access token from the configured header.

    A leading ``Bearer`` scheme is accepted and stripped.
    """
    raw = request.headers.get(settings.TOKEN_HEADER)
    if raw is None:
        return None
    raw = raw.strip()
    if raw.lower().startswith(BEARER_PREFIX):
        raw = raw[len(BEARER_PREFIX):].strip()
    return raw or None


async def require_token_header(
        request: Request,
        settings: Settings = Depends(get_settings),
) -> str:
    """
    Declared contract for endpoints that take the token as input (sign-out).

    Raises:
        ValidationFailedException: If the header is missing or empty
    """
    token = read_token(request, settings)
    if token is None:
        raise ValidationFailedException(errors=[{
            "field": settings.TOKEN_HEADER,
            "message": "Access Token is required",
        }])
    return token


########################################################################
# User Token Authentication
########################################################################

async def get_current_identity(
        request: Request,
        settings: Settings = Depends(get_settings),
        token_manager: TokenManager = Depends(get_token_manager),
        db: AsyncSession = Depends(get_db),
) -> AuthenticatedIdentity:
    """
    Authenticate the request and attach the identity to it.

    Steps: token present -> signature and expiry verified -> token id not
    revoked. The subject id inside the token is trusted as-is; the user row
    is not re-read.

    Returns:
        The authenticated identity, also stored on ``request.state.identity``

    Raises:
        UnauthenticatedException: Missing, invalid, expired or revoked token
    """
    token = read_token(request, settings)
    if token is None:
        raise UnauthenticatedException(detail="Access token is required")

    try:
        claims = token_manager.verify(token)
    except TokenException as e:
        logger.info(f"Token rejected: {e.internal_code} | Path: {request.url.path}")
        raise UnauthenticatedException(detail="Invalid or expired token")

    if await token_repository.is_blacklisted(db, claims.token_id):
        logger.info(f"Revoked token {claims.token_id} used | Path: {request.url.path}")
        raise UnauthenticatedException(detail="Invalid or expired token")

    identity = AuthenticatedIdentity(
        user_id=claims.subject_id,
        token_id=claims.token_id,
        expires_at=claims.expires_at,
    )
    request.state.identity = identity
    return identity
