"""Pydantic models for API request/response schemas."""

from .proof_request import UINT32_MAX, ProofRequest
from .proof_response import MOCK_ZK_PROOF, VERIFIED_STATUS, ProofResponse
from .verify_response import VerifyResponse

__all__ = [
    "UINT32_MAX",
    "ProofRequest",
    "MOCK_ZK_PROOF",
    "VERIFIED_STATUS",
    "ProofResponse",
    "VerifyResponse",
]
