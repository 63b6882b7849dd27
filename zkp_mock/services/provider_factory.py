"""
Provider factory for proving backend selection.

Returns appropriate ProofProvider based on USE_MOCK_PROVER configuration.
"""

import logging

from zkp_mock.config import settings
from zkp_mock.middleware import ProverUnavailableError

from .mock_proof_provider import MockProofProvider
from .proof_provider import ProofProvider

logger = logging.getLogger(__name__)

# Singleton provider instance
_provider_instance: ProofProvider | None = None


def get_proof_provider() -> ProofProvider:
    """
    Get the configured proof provider instance.

    Used as a FastAPI dependency by the proof routes.

    Returns:
        ProofProvider: MockProofProvider if USE_MOCK_PROVER=true

    Raises:
        ProverUnavailableError: If USE_MOCK_PROVER=false, since this
                                service only ships the mock prover
    """
    global _provider_instance

    if _provider_instance is not None:
        return _provider_instance

    if settings.USE_MOCK_PROVER:
        logger.info("Initializing MockProofProvider (USE_MOCK_PROVER=true)")
        _provider_instance = MockProofProvider()
    else:
        raise ProverUnavailableError("real")

    return _provider_instance


def reset_provider() -> None:
    """
    Reset the provider singleton (for testing purposes).

    Clears the cached provider instance, allowing a fresh
    provider to be created on next get_proof_provider() call.
    """
    global _provider_instance
    _provider_instance = None
    logger.info("Provider singleton reset")
