"""
Proof endpoints for generation and verification.

Provides POST /generate for canned proof generation and
POST /verify for constant verification.
"""

import logging

from fastapi import APIRouter, Depends

from zkp_mock.models import ProofRequest, ProofResponse, VerifyResponse
from zkp_mock.services import ProofProvider, get_proof_provider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate",
    response_model=ProofResponse,
    summary="Generate Proof",
    description="""
Generate a (mock) zero-knowledge proof for a document hash.

The response echoes `proof_id` and `pdf_hash` and carries a fixed `zk_proof`
with status `VERIFIED`. The handler waits for the configured proving delay
(2 seconds by default) before responding; concurrent requests wait in parallel.
""",
    responses={
        200: {"description": "Proof generated"},
        422: {"description": "Malformed request body"},
    },
)
async def generate_proof(
    request: ProofRequest,
    provider: ProofProvider = Depends(get_proof_provider),
) -> ProofResponse:
    """
    Generate a proof for the requested document.

    Args:
        request: ProofRequest with proof_id and pdf_hash
        provider: Configured proof provider

    Returns:
        ProofResponse echoing the request with the mock proof
    """
    logger.info(f"Received proof request for ID: {request.proof_id}")
    return await provider.generate_proof(request)


@router.post(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify Proof",
    description="Verify a proof. The request body is ignored and the answer is always valid.",
    responses={200: {"description": "Verification result"}},
)
async def verify_proof(
    provider: ProofProvider = Depends(get_proof_provider),
) -> VerifyResponse:
    """Verify a proof; the body is never read."""
    return await provider.verify_proof()
