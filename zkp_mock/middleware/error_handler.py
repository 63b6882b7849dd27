"""
Centralized error handling middleware for FastAPI.

Provides consistent error responses and logging for service errors.
Request body validation keeps the shape of FastAPI's default 422 response.
"""

import json
import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class ZKPMockError(Exception):
    """Base exception for proof service errors."""

    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ProverUnavailableError(ZKPMockError):
    """Raised when the configured proof provider is not available."""

    def __init__(self, provider: str):
        super().__init__(
            message=f"Proof provider '{provider}' is not available",
            status_code=503,
            details={"provider": provider},
        )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches unhandled exceptions and returns consistent error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response

        except ZKPMockError as e:
            logger.error(
                f"ZKPMockError: {e.message}",
                extra={"status_code": e.status_code, "details": e.details},
            )
            return JSONResponse(
                status_code=e.status_code,
                content={
                    "error": e.message,
                    "details": e.details,
                },
            )

        except Exception as e:
            logger.exception(f"Unhandled exception: {str(e)}")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "message": str(e) if logger.isEnabledFor(logging.DEBUG) else None,
                },
            )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """
    Return FastAPI's default 422 body, ASCII-escaped.

    Validation errors echo the rejected input, which may hold lone
    surrogates that cannot be encoded as UTF-8.
    """
    logger.warning(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return Response(
        content=json.dumps({"detail": jsonable_encoder(exc.errors())}),
        status_code=422,
        media_type="application/json",
    )
