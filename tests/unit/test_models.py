"""Unit tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from zkp_mock.models import (
    MOCK_ZK_PROOF,
    UINT32_MAX,
    VERIFIED_STATUS,
    ProofRequest,
    ProofResponse,
    VerifyResponse,
)


class TestProofRequest:
    """Tests for ProofRequest validation."""

    def test_accepts_valid_request(self) -> None:
        request = ProofRequest.model_validate({"proof_id": 42, "pdf_hash": "abc123"})
        assert request.proof_id == 42
        assert request.pdf_hash == "abc123"

    @pytest.mark.parametrize("proof_id", [0, UINT32_MAX])
    def test_accepts_uint32_bounds(self, proof_id: int) -> None:
        request = ProofRequest.model_validate({"proof_id": proof_id, "pdf_hash": "h"})
        assert request.proof_id == proof_id

    @pytest.mark.parametrize("proof_id", [-1, UINT32_MAX + 1])
    def test_rejects_out_of_range_proof_id(self, proof_id: int) -> None:
        with pytest.raises(ValidationError):
            ProofRequest.model_validate({"proof_id": proof_id, "pdf_hash": "h"})

    @pytest.mark.parametrize("proof_id", ["not-a-number", "42", 4.2, True, None])
    def test_rejects_non_integer_proof_id(self, proof_id) -> None:
        """Only JSON integers are accepted, no coercion from strings or floats."""
        with pytest.raises(ValidationError):
            ProofRequest.model_validate({"proof_id": proof_id, "pdf_hash": "h"})

    def test_rejects_non_string_pdf_hash(self) -> None:
        with pytest.raises(ValidationError):
            ProofRequest.model_validate({"proof_id": 1, "pdf_hash": 123})

    def test_rejects_lone_surrogate_pdf_hash(self) -> None:
        """The JSON parser admits lone surrogates; they cannot be encoded back out."""
        with pytest.raises(ValidationError):
            ProofRequest.model_validate({"proof_id": 1, "pdf_hash": "\ud800"})

    @pytest.mark.parametrize("field", ["proof_id", "pdf_hash"])
    def test_rejects_missing_field(self, field: str) -> None:
        payload = {"proof_id": 1, "pdf_hash": "h"}
        del payload[field]
        with pytest.raises(ValidationError):
            ProofRequest.model_validate(payload)

    def test_accepts_empty_pdf_hash(self) -> None:
        request = ProofRequest.model_validate({"proof_id": 1, "pdf_hash": ""})
        assert request.pdf_hash == ""

    def test_ignores_unknown_fields(self) -> None:
        request = ProofRequest.model_validate(
            {"proof_id": 1, "pdf_hash": "h", "issuer": "someone"}
        )
        assert not hasattr(request, "issuer")


class TestProofResponse:
    """Tests for ProofResponse defaults and serialization."""

    def test_defaults_to_mock_proof_and_verified(self) -> None:
        response = ProofResponse(proof_id=7, pdf_hash="deadbeef")
        assert response.zk_proof == "mock_zk_proof_data_xyz123"
        assert response.status == "VERIFIED"
        assert MOCK_ZK_PROOF == response.zk_proof
        assert VERIFIED_STATUS == response.status

    def test_serializes_fields_in_wire_order(self) -> None:
        response = ProofResponse(proof_id=7, pdf_hash="deadbeef")
        assert list(response.model_dump()) == ["proof_id", "pdf_hash", "zk_proof", "status"]


def test_verify_response_defaults_to_valid() -> None:
    assert VerifyResponse().model_dump() == {"valid": True}
