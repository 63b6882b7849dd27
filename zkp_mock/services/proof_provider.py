"""
ProofProvider abstraction layer for proving backends.

Defines the interface for proof providers so the API can swap between
a canned mock and a real prover via configuration.
"""

from abc import ABC, abstractmethod

from zkp_mock.models import ProofRequest, ProofResponse, VerifyResponse


class ProofProvider(ABC):
    """
    Abstract base class for proof providers.

    Implementations:
    - MockProofProvider: Canned proofs after a simulated proving delay
    """

    @abstractmethod
    async def generate_proof(self, request: ProofRequest) -> ProofResponse:
        """
        Generate a proof for the given request.

        Args:
            request: Validated proof request

        Returns:
            ProofResponse: Proof echoing the request's proof_id and pdf_hash
        """
        pass

    @abstractmethod
    async def verify_proof(self) -> VerifyResponse:
        """
        Verify a proof.

        Returns:
            VerifyResponse: Verification outcome
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return provider identifier for logs.

        Returns:
            str: Provider name, e.g. "mock"
        """
        pass
