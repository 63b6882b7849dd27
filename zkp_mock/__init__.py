"""Mock zero-knowledge proof generation/verification service."""

__version__ = "1.0.0"
