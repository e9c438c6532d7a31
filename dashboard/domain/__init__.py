# dashboard/domain/__init__.py

"""
Domain components of the application.

Exports the domain exceptions for convenient importing.
"""

from dashboard.domain.exceptions import (
    DomainException,
    ValidationFailedException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DuplicateEmailException,
    PermissionDeniedException,
    UnauthenticatedException,
    InvalidCredentialsException,
    InvalidTokenException,
    ExpiredTokenException,
    DatabaseOperationException,
)
