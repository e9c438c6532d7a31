# dashboard/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines the Pydantic DTOs for validation and serialization of
user-related data: sign-up, sign-in, password change and the public
representation of a user.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import field_validator, EmailStr, Field

from dashboard.application.dtos.base_dto import CustomBaseModel
from dashboard.domain.models.identity_domain_model import Gender
from dashboard.shared.utils.input_validation import InputValidator


def _check_email(v: str) -> str:
    is_valid, error_msg = InputValidator.validate_email(v)
    if not is_valid:
        raise ValueError(error_msg)
    return v


def _check_password(v: str) -> str:
    is_valid, error_msg = InputValidator.validate_password(v)
    if not is_valid:
        raise ValueError(error_msg)
    return v


class UserCreate(CustomBaseModel):
    """
    Schema for signing up a new user.
    """
    username: str = Field(..., description="Display name of the user.")
    email: EmailStr = Field(..., description="User email. Must be valid and unique.")
    password: str = Field(..., description="Plain text password, hashed before storage.")
    age: int = Field(..., ge=0, description="Age of the user.")
    gender: Gender = Field(Gender.MALE, description="Gender of the user, male or female.")

    @field_validator("username")
    def validate_username(cls, v):
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v.strip()

    @field_validator("email")
    def validate_email_domain(cls, v):
        return _check_email(v)

    @field_validator("password")
    def validate_password(cls, v):
        return _check_password(v)


class SignIn(CustomBaseModel):
    """
    Schema for signing in with email and password.
    """
    email: EmailStr = Field(..., description="Registered email.")
    password: str = Field(..., min_length=1, description="Account password.")

    @field_validator("email")
    def validate_email_domain(cls, v):
        return _check_email(v)


class ChangePassword(CustomBaseModel):
    """
    Schema for the authenticated user to change their own password.
    """
    current_password: str = Field(..., min_length=1, description="Current password.")
    new_password: str = Field(..., description="New password.")

    @field_validator("new_password")
    def validate_new_password(cls, v):
        return _check_password(v)


class UserOutput(CustomBaseModel):
    """
    Public representation of a user. Never includes the password hash.
    """
    id: UUID = Field(..., description="Unique identifier of the user.")
    username: str
    email: str
    age: int
    gender: Gender
    created_at: datetime
    updated_at: Optional[datetime] = None


class CreatorOutput(CustomBaseModel):
    """Creator summary embedded in resources."""
    id: UUID
    username: str


class TokenOutput(CustomBaseModel):
    """
    Schema returned by sign-in.
    """
    message: str = Field(..., description="Result of the operation.")
    access_token: str = Field(..., description="Signed JWT access token.")
