"""FastAPI middleware for request/response processing."""

from .error_handler import (
    ErrorHandlerMiddleware,
    ZKPMockError,
    ProverUnavailableError,
    request_validation_exception_handler,
)

__all__ = [
    "ErrorHandlerMiddleware",
    "ZKPMockError",
    "ProverUnavailableError",
    "request_validation_exception_handler",
]
