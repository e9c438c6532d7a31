# dashboard/shared/middleware/logging_middleware.py

"""
Request/response logging.

Each request gets a short id, echoed back in ``X-Request-ID`` so client
reports can be matched with log lines. Headers and bodies are never logged:
they carry access tokens and passwords.
"""

import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request and one per response.

    In production only method, path and status are logged; elsewhere the
    query string, client address, caller id and timing are added.
    """

    def __init__(self, app, environment: str = "development"):
        super().__init__(app)
        self.verbose = environment != "production"

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"

        if self.verbose:
            query = dict(request.query_params) or "N/A"
            client = request.client.host if request.client else "N/A"
            logger.info(f"[{request_id}] -> {route} | Query: {query} | Client: {client}")
        else:
            logger.info(f"[{request_id}] -> {route}")

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        message = f"[{request_id}] <- {response.status_code} {route}"
        if self.verbose:
            # set by the authentication dependency when the route required it
            identity = getattr(request.state, "identity", None)
            caller = identity.user_id if identity is not None else "anonymous"
            message += f" | User: {caller} | Time: {elapsed:.4f}s"
        logger.log(_level_for(response.status_code), message)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
