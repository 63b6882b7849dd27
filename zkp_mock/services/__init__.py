"""Service layer for proof generation backends."""

from .proof_provider import ProofProvider
from .mock_proof_provider import MockProofProvider
from .provider_factory import get_proof_provider, reset_provider

__all__ = [
    "ProofProvider",
    "MockProofProvider",
    "get_proof_provider",
    "reset_provider",
]
