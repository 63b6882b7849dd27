"""
Application configuration using Pydantic Settings.

All environment variables are accessed through this config object.
Never use os.getenv() directly in business logic.
Variables carry the ZKP_MOCK_ prefix (e.g. ZKP_MOCK_PORT) so generic
names such as PORT exported by a host do not move the listener.

Defaults reproduce the fixed service contract (0.0.0.0:4000, 2 second
proving delay), so an empty environment is the reference configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="ZKP_MOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Server Configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP listener binds to",
    )
    PORT: int = Field(
        default=4000,
        description="Port the HTTP listener binds to",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # Prover Configuration
    USE_MOCK_PROVER: bool = Field(
        default=True,
        description="Serve canned proofs from MockProofProvider",
    )
    PROOF_DELAY_SECONDS: float = Field(
        default=2.0,
        ge=0,
        description="Simulated proof generation latency in seconds",
    )


# Global settings instance
settings = Settings()
