"""Pydantic model for proof generation request."""

from pydantic import BaseModel, Field, field_validator

UINT32_MAX = 2**32 - 1


class ProofRequest(BaseModel):
    """
    Request body for POST /generate endpoint.

    Attributes:
        proof_id: Caller's proof identifier, an unsigned 32-bit integer
        pdf_hash: Hash of the document the proof is requested for
    """

    proof_id: int = Field(
        ...,
        ge=0,
        le=UINT32_MAX,
        strict=True,
        description="Proof identifier (unsigned 32-bit integer)",
        examples=[42],
    )
    pdf_hash: str = Field(
        ...,
        strict=True,
        description="Hash of the source PDF document",
        examples=["abc123"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [{"proof_id": 42, "pdf_hash": "abc123"}]
        },
    }

    @field_validator("pdf_hash")
    @classmethod
    def validate_utf8(cls, value: str) -> str:
        """Reject lone surrogates, which the JSON parser admits but cannot be echoed back."""
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError("pdf_hash must be valid UTF-8 text") from e
        return value
