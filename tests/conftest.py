import pytest
from fastapi.testclient import TestClient

from portfolio_api.core.config import Settings
from portfolio_api.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'portfolio.db'}")


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
