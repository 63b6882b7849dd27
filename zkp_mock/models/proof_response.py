"""Pydantic model for proof generation response."""

from pydantic import BaseModel, Field

MOCK_ZK_PROOF = "mock_zk_proof_data_xyz123"
VERIFIED_STATUS = "VERIFIED"


class ProofResponse(BaseModel):
    """
    Response body for POST /generate endpoint.

    Attributes:
        proof_id: Echoed from the request
        pdf_hash: Echoed from the request
        zk_proof: Canned proof payload
        status: Always "VERIFIED"
    """

    proof_id: int = Field(..., description="Proof identifier from request")
    pdf_hash: str = Field(..., description="PDF hash from request")
    zk_proof: str = Field(
        default=MOCK_ZK_PROOF,
        description="Mock zero-knowledge proof payload",
    )
    status: str = Field(
        default=VERIFIED_STATUS,
        description="Proof status",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "proof_id": 42,
                    "pdf_hash": "abc123",
                    "zk_proof": MOCK_ZK_PROOF,
                    "status": VERIFIED_STATUS,
                }
            ]
        },
    }
