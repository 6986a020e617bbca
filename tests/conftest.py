"""
pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_service import SEED_USERS, UserService, UserStore


class FixedClock:
    """Clock returning a settable Unix time."""

    def __init__(self, now: float = 1700000000.25) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def settings() -> Settings:
    """Settings for a seeded app under the default id strategy."""
    return Settings(api_prefix="", seed_users=True, id_strategy="monotonic", log_file="")


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service(app) -> UserService:
    """The service behind ``app``; lets tests inspect the store directly."""
    return app.state.user_service


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store() -> UserStore:
    return UserStore(SEED_USERS)
