# dashboard/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.application.use_cases.auth_use_cases import AsyncAuthService
from dashboard.adapters.inbound.api.deps import (
    get_db,
    get_current_identity,
    get_password_hasher,
    get_token_manager,
    require_token_header,
)
from dashboard.adapters.outbound.security.password_hasher import PasswordHasher
from dashboard.adapters.outbound.security.token_manager import TokenManager
from dashboard.application.dtos.base_dto import DataResponse, MessageResponse
from dashboard.application.dtos.user_dto import UserCreate, UserOutput, SignIn, TokenOutput, ChangePassword
from dashboard.domain.models.identity_domain_model import AuthenticatedIdentity

logger = logging.getLogger(__name__)
router = APIRouter()


def get_auth_service(
        db: AsyncSession = Depends(get_db),
        token_manager: TokenManager = Depends(get_token_manager),
        password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncAuthService:
    return AsyncAuthService(db, token_manager, password_hasher)


@router.post(
    "/sign-up",
    response_model=DataResponse[UserOutput],
    status_code=status.HTTP_201_CREATED,
    summary="Sign Up - Creates a new user",
    responses={
        409: {
            "description": "Email already in use",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Email already exist. Please try another email.",
                        "code": "DUPLICATE_EMAIL",
                        "errors": []
                    }
                }
            }
        }
    }
)
async def sign_up(
        user_input: UserCreate,
        service: AsyncAuthService = Depends(get_auth_service),
):
    user = await service.register_user(user_input)
    return DataResponse(message="User created successfully", data=user)


@router.post(
    "/sign-in",
    response_model=TokenOutput,
    summary="Sign In - Generates access token",
    description="Authenticates a user (email/password) and returns a JWT access token.",
)
async def sign_in(
        credentials: SignIn,
        service: AsyncAuthService = Depends(get_auth_service),
):
    issued = await service.login_user(credentials)
    return TokenOutput(message="User logged in successfully", access_token=issued.token)


@router.post(
    "/sign-out",
    response_model=MessageResponse,
    summary="Sign Out - Revoke current access token",
    description="Invalidates the access token sent in the token header.",
)
async def sign_out(
        token: str = Depends(require_token_header),
        service: AsyncAuthService = Depends(get_auth_service),
):
    await service.logout_user(token)
    return MessageResponse(message="User logged out successfully")


@router.patch(
    "/change-password",
    response_model=MessageResponse,
    summary="Change Password - Re-hash the authenticated user's password",
)
async def change_password(
        data: ChangePassword,
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncAuthService = Depends(get_auth_service),
):
    await service.change_password(identity, data)
    return MessageResponse(message="Password changed successfully")
