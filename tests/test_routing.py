import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from portfolio_api.core.config import Settings
from portfolio_api.main import create_app
from portfolio_api.services.portfolio_repository import PortfolioRepository


@pytest.mark.parametrize(
    "method, path",
    [
        ("DELETE", "/projects"),
        ("POST", "/projects"),
        ("PUT", "/projects/1"),
        ("GET", "/contact"),
        ("GET", "/messages"),
        ("GET", "/"),
        ("GET", "/docs"),
        ("GET", "/projects/"),
        ("DELETE", "/projects/"),
        ("GET", "/projects/1/"),
        ("GET", "/skills/"),
        ("POST", "/contact/"),
    ],
)
def test_unknown_routes(client, method, path):
    response = client.request(method, path, follow_redirects=False)

    assert response.status_code == 404
    assert response.json() == {"message": "Not found"}


def test_process_time_header(client):
    response = client.get("/skills")

    assert float(response.headers["X-Process-Time"]) >= 0


def test_storage_failure_is_opaque_500(app, monkeypatch):
    async def broken(self):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(PortfolioRepository, "list_skills", broken)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/skills")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "connection refused" not in response.text


def test_api_prefix(tmp_path):
    config = Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'prefixed.db'}",
        API_PREFIX="/api",
    )

    with TestClient(create_app(config)) as client:
        assert client.get("/api/projects").status_code == 200
        assert client.get("/api/projects/1").json()["id"] == 1
        assert client.get("/projects").status_code == 404


def test_seeding_can_be_disabled(tmp_path):
    config = Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}",
        SEED_ON_STARTUP=False,
    )

    with TestClient(create_app(config)) as client:
        assert client.get("/projects").json() == []
        assert client.get("/skills").json() == []


def test_storage_failure_is_answered_once_and_timed(app, monkeypatch, caplog):
    async def broken(self):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(PortfolioRepository, "list_projects", broken)

    # the default client re-raises anything that escapes the app
    with TestClient(app) as client:
        with caplog.at_level(logging.ERROR):
            response = client.get("/projects")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert float(response.headers["X-Process-Time"]) >= 0
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
