import pytest
from fastapi.testclient import TestClient

from yeojeong_api.config import Settings
from yeojeong_api.main import create_app


@pytest.fixture
def api_settings() -> Settings:
    return Settings(environment="test", git_commit="abc1234", port=3000)


@pytest.fixture
def app(api_settings):
    return create_app(api_settings)


@pytest.fixture
def client(app) -> TestClient:
    # Unhandled errors must come back as 500 responses instead of being re-raised
    return TestClient(app, raise_server_exceptions=False)
