# dashboard/shared/middleware/exception_middleware.py

"""
Middleware for centralized exception handling.

This is the single place where failures become HTTP responses. Every
error response has the same envelope:

    {"detail": "<message>", "code": "<internal code>", "errors": [...]}

Known domain failures keep their message; anything unexpected is logged
with its traceback and returned as a generic internal error.
"""

import time
import logging
from typing import Any, Callable, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from dashboard.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

STATUS_BY_CODE = {
    "VALIDATION_FAILED": status.HTTP_400_BAD_REQUEST,
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "DUPLICATE_EMAIL": status.HTTP_409_CONFLICT,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "EXPIRED_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# codes whose detail must not reach the client
INTERNAL_CODES = {"DATABASE_OPERATION_ERROR"}


def error_response(status_code: int, detail: str, code: str, errors: Any = None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "code": code,
            "errors": errors if errors is not None else [],
        },
        headers=headers,
    )


def internal_error_response() -> JSONResponse:
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_MESSAGE,
        "INTERNAL_SERVER_ERROR",
    )


def domain_exception_response(request: Request, exc: DomainException) -> JSONResponse:
    """
    Map a domain exception to its HTTP response based on ``internal_code``.
    """
    if exc.internal_code in INTERNAL_CODES:
        original = getattr(exc, "original_error", None)
        logger.error(
            f"Internal error: {exc.detail} | Code: {exc.internal_code} | "
            f"Cause: {type(original).__name__ if original else 'N/A'}: {original} | "
            f"Path: {request.url.path}"
        )
        return internal_error_response()

    logger.warning(
        f"Domain exception: {exc.detail} | Code: {exc.internal_code} | "
        f"Path: {request.url.path}"
    )
    status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
    return error_response(status_code, exc.detail, exc.internal_code, exc.details)


def _format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    formatted = []
    for err in errors:
        # drop the location prefix ("body", "query", ...)
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field = ".".join(loc) if loc else str(err.get("loc", ("body",))[0])
        if err.get("type") == "missing":
            message = f"{field} is required"
        else:
            message = str(err.get("msg", "Invalid value"))
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
        formatted.append({"field": field, "message": message})
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Convert a request contract violation into a ValidationFailed response.

    The endpoint is never invoked when this handler runs.
    """
    errors = _format_validation_errors(exc.errors())
    logger.warning(
        f"Validation failed: {[e['field'] for e in errors]} | Path: {request.url.path}"
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", "VALIDATION_FAILED", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) in the common envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        detail, code = "Error 404: Page Not Found", "NOT_FOUND"
    else:
        detail, code = str(exc.detail), f"HTTP_{exc.status_code}"
    return error_response(exc.status_code, detail, code, headers=getattr(exc, "headers", None))


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures every exception escaping a handler and formats the response.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            return domain_exception_response(request, exc)

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | {str(exc)} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return internal_error_response()

        except Exception as exc:
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return internal_error_response()
