"""
Async client for the ZKP mock service.

Used by downstream services and integration tests to request proofs
the same way they would from a real prover.
"""

import logging

import httpx

from zkp_mock.models import ProofRequest, ProofResponse, VerifyResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000"


class ZKPMockClientError(Exception):
    """Raised when the service rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ZKPMockClient:
    """
    Thin httpx wrapper around the /generate and /verify endpoints.

    Args:
        base_url: Service root URL
        timeout: Per-request timeout in seconds; must exceed the proving delay
        transport: Optional httpx transport (e.g. httpx.ASGITransport in tests)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _post(self, path: str, payload: dict | None = None) -> dict:
        try:
            async with self._client() as client:
                response = await client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"ZKP mock connection failed: {e}")
            raise ZKPMockClientError(f"Request to {path} failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"ZKP mock returned {response.status_code} for {path}: {response.text}")
            raise ZKPMockClientError(
                f"Request to {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.json()

    async def generate(self, proof_id: int, pdf_hash: str) -> ProofResponse:
        """
        Request a proof for a document.

        Args:
            proof_id: Proof identifier (unsigned 32-bit integer)
            pdf_hash: Hash of the source PDF

        Returns:
            ProofResponse parsed from the service reply

        Raises:
            ZKPMockClientError: On transport failure or non-200 response
        """
        request = ProofRequest(proof_id=proof_id, pdf_hash=pdf_hash)
        logger.info(f"Calling ZKP mock for proof {proof_id}")
        data = await self._post("/generate", request.model_dump())
        return ProofResponse.model_validate(data)

    async def verify(self) -> VerifyResponse:
        """Ask the service to verify a proof."""
        data = await self._post("/verify")
        return VerifyResponse.model_validate(data)
