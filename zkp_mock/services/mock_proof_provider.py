"""
MockProofProvider - Simulates a ZKP prover with canned responses.

Lets downstream systems exercise the proof service contract without
paying for real proof generation.
"""

import asyncio
import logging

from zkp_mock.config import settings
from zkp_mock.models import ProofRequest, ProofResponse, VerifyResponse

from .proof_provider import ProofProvider

logger = logging.getLogger(__name__)


class MockProofProvider(ProofProvider):
    """
    Mock prover returning a fixed proof after a simulated delay.

    - Echoes proof_id and pdf_hash back to the caller
    - Suspends only the calling task for delay_seconds
    - Verification always succeeds
    - [MOCK-PROVER] prefixed logging for debugging

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(self, delay_seconds: float | None = None):
        """
        Initialize MockProofProvider.

        Args:
            delay_seconds: Simulated proving latency. Defaults to
                           settings.PROOF_DELAY_SECONDS.
        """
        if delay_seconds is None:
            delay_seconds = settings.PROOF_DELAY_SECONDS
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds
        logger.info(
            f"[MOCK-PROVER] MockProofProvider initialized "
            f"(delay={self.delay_seconds:.1f}s)"
        )

    @property
    def provider_name(self) -> str:
        """Return provider identifier for logs."""
        return "mock"

    async def generate_proof(self, request: ProofRequest) -> ProofResponse:
        """
        Return the canned proof for a request after the simulated delay.

        Args:
            request: Validated proof request

        Returns:
            ProofResponse: Request fields echoed with the mock proof and
                           VERIFIED status
        """
        logger.debug(
            f"[MOCK-PROVER] Proving {request.proof_id}, "
            f"waiting {self.delay_seconds:.1f}s"
        )
        await asyncio.sleep(self.delay_seconds)

        return ProofResponse(
            proof_id=request.proof_id,
            pdf_hash=request.pdf_hash,
        )

    async def verify_proof(self) -> VerifyResponse:
        """Every proof verifies."""
        return VerifyResponse(valid=True)
