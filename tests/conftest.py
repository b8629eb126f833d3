"""
Shared fixtures: fast bcrypt settings, a fresh app per test, and its client.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from core.state import CredentialStore
from main import create_app
from services.auth_service import CredentialService
from utils.security import TokenGate

TEST_SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        JWT_SECRET=TEST_SECRET,
        JWT_EXPIRES_IN="1h",
        BCRYPT_ROUNDS=4,
        DEMO_USERNAME="nasyira",
        DEMO_PASSWORD="12345678",
    )


@pytest.fixture
def token_gate(settings: Settings) -> TokenGate:
    return TokenGate.from_settings(settings)


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore()


@pytest.fixture
def service(store, token_gate, settings) -> CredentialService:
    return CredentialService(store, token_gate, settings)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
