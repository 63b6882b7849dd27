"""
ZKP Mock API

Main FastAPI application entry point. Serve with `zkp-mock`,
`python -m zkp_mock` or `uvicorn zkp_mock.main:app`.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from zkp_mock.config import settings
from zkp_mock.logging_config import setup_logging
from zkp_mock.middleware import ErrorHandlerMiddleware, request_validation_exception_handler
from zkp_mock.routes import proofs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    setup_logging(settings.LOG_LEVEL)
    logger.info("ZKP mock ready")
    yield


app = FastAPI(
    title="ZKP Mock API",
    description="Mock zero-knowledge proof generation and verification service",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Error handling middleware
app.add_middleware(ErrorHandlerMiddleware)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Register routers
app.include_router(proofs.router, tags=["Proofs"])


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"Starting ZKP mock on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
