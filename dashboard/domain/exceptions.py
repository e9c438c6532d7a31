# dashboard/domain/exceptions.py

"""
Custom exceptions for the application.

Every failure a use case or adapter wants to report to a client is raised
as a DomainException subclass. The exception middleware is the only place
that turns them into HTTP responses, based on ``internal_code``.
"""

from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        detail: Stable, user-facing message
        internal_code: Machine-readable error code used for HTTP mapping
        details: Optional structured information (e.g. field errors)
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(self, detail: str = "Application error", details: Optional[Any] = None):
        super().__init__(detail)
        self.detail = detail
        self.details = details if details is not None else []


class ValidationFailedException(DomainException):
    """Request input does not match the declared contract."""

    internal_code = "VALIDATION_FAILED"

    def __init__(self, detail: str = "Validation failed", errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(detail=detail, details=errors or [])


class ResourceNotFoundException(DomainException):
    """Resource not found (absent or soft-deleted)."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail=detail)


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(detail=detail)


class DuplicateEmailException(ResourceAlreadyExistsException):
    """An identity with this email is already registered."""

    internal_code = "DUPLICATE_EMAIL"

    def __init__(self, detail: str = "Email already exist. Please try another email."):
        super().__init__(detail=detail)


class PermissionDeniedException(DomainException):
    """Caller is authenticated but does not own the resource."""

    internal_code = "PERMISSION_DENIED"

    def __init__(self, detail: str = "Permission denied"):
        super().__init__(detail=detail)


class UnauthenticatedException(DomainException):
    """Missing, invalid, expired or revoked access token."""

    internal_code = "UNAUTHENTICATED"

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(detail=detail)


class InvalidCredentialsException(DomainException):
    """Password does not match the stored hash."""

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail=detail)


class TokenException(DomainException):
    """
    Base class for token verification failures.

    These never reach a client as-is: authentication translates them into
    UnauthenticatedException so the reason stays in the logs.
    """

    internal_code = "INVALID_TOKEN"


class InvalidTokenException(TokenException):
    """Bad signature, malformed token or missing claims."""

    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail=detail)


class ExpiredTokenException(TokenException):
    """Token reached its expiry instant."""

    internal_code = "EXPIRED_TOKEN"

    def __init__(self, detail: str = "Expired token"):
        super().__init__(detail=detail)


class DatabaseOperationException(DomainException):
    """Error while talking to the database."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        super().__init__(detail=detail)
        self.original_error = original_error
