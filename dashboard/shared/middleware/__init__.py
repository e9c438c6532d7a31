# dashboard/shared/middleware/__init__.py

from dashboard.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    validation_exception_handler,
    http_exception_handler,
)
from dashboard.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware
from dashboard.shared.middleware.security_headers_middleware import AsyncSecurityHeadersMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "AsyncSecurityHeadersMiddleware",
    "validation_exception_handler",
    "http_exception_handler",
]
