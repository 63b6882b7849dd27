"""
Pytest configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from zkp_mock.main import app
from zkp_mock.services import MockProofProvider, get_proof_provider, reset_provider


@pytest.fixture(autouse=True)
def reset_state():
    """Reset provider singleton and dependency overrides around each test."""
    reset_provider()
    yield
    app.dependency_overrides.clear()
    reset_provider()


@pytest.fixture
def client():
    """FastAPI test client fixture"""
    return TestClient(app)


@pytest.fixture
def instant_provider():
    """Serve proofs without the proving delay."""
    provider = MockProofProvider(delay_seconds=0)
    app.dependency_overrides[get_proof_provider] = lambda: provider
    return provider


@pytest.fixture
def sample_proof_request():
    """Example request body from the service contract"""
    return {"proof_id": 42, "pdf_hash": "abc123"}
