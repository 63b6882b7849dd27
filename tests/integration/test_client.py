"""
Integration tests for ZKPMockClient against the in-process app.
"""

import httpx
import pytest

from zkp_mock.client import ZKPMockClient, ZKPMockClientError
from zkp_mock.config import settings
from zkp_mock.main import app


@pytest.fixture
def zkp_client() -> ZKPMockClient:
    """Client routed straight into the ASGI app."""
    return ZKPMockClient(base_url="http://zkp-mock", transport=httpx.ASGITransport(app=app))


@pytest.mark.integration
class TestZKPMockClient:
    """Tests for ZKPMockClient."""

    @pytest.mark.asyncio
    async def test_generate_returns_proof(self, zkp_client, instant_provider):
        proof = await zkp_client.generate(42, "abc123")

        assert proof.proof_id == 42
        assert proof.pdf_hash == "abc123"
        assert proof.zk_proof == "mock_zk_proof_data_xyz123"
        assert proof.status == "VERIFIED"

    @pytest.mark.asyncio
    async def test_verify_returns_valid(self, zkp_client):
        result = await zkp_client.verify()
        assert result.valid is True

    @pytest.mark.asyncio
    async def test_error_status_raises(self, zkp_client, monkeypatch):
        monkeypatch.setattr(settings, "USE_MOCK_PROVER", False)

        with pytest.raises(ZKPMockClientError) as exc_info:
            await zkp_client.verify()

        assert exc_info.value.status_code == 503
        assert "not available" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_connection_failure_raises(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = ZKPMockClient(transport=httpx.MockTransport(refuse))

        with pytest.raises(ZKPMockClientError) as exc_info:
            await client.generate(1, "h")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_default_base_url(self):
        assert ZKPMockClient().base_url == "http://localhost:4000"

    def test_base_url_trailing_slash_stripped(self):
        assert ZKPMockClient(base_url="http://zkp:4000/").base_url == "http://zkp:4000"
