"""Pydantic model for proof verification response."""

from pydantic import BaseModel


class VerifyResponse(BaseModel):
    """Response body for POST /verify endpoint."""

    valid: bool = True
