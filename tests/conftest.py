"""Shared pytest fixtures for the token dashboard tests."""
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from token_dashboard.config import Settings
from token_dashboard.main import create_app
from token_dashboard.providers import MockTokenProvider
from token_dashboard.security import PasswordHasher, SessionCodec
from token_dashboard.services import AccountService
from token_dashboard.store import AccountStore

TEST_SECRET = "test-secret-key-with-at-least-32-bytes!!"


@pytest.fixture
def jwt_secret() -> str:
    return TEST_SECRET


@pytest.fixture
def settings() -> Settings:
    """Fast bcrypt and a long signing key."""
    return Settings(jwt_secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def catalog() -> MockTokenProvider:
    return MockTokenProvider()


@pytest.fixture
def store() -> AccountStore:
    return AccountStore()


@pytest.fixture
def sessions() -> SessionCodec:
    return SessionCodec(TEST_SECRET)


@pytest.fixture
def service(store: AccountStore, catalog: MockTokenProvider, sessions: SessionCodec) -> AccountService:
    return AccountService(store, catalog, PasswordHasher(rounds=4), sessions)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """TestClient with the lifespan running (catalog and account service on app.state)."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
