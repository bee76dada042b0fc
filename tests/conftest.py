# tests/conftest.py
from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from rentdesk.config import Settings
from rentdesk.main import create_app


@pytest.fixture
def session_user() -> dict:
    return {
        "id": "u1",
        "username": "admin",
        "fullname": "Administrator",
        "type": "Admin",
        "status": "Active",
        "profile": None,
    }


@pytest.fixture(autouse=True)
def _fast_hashing(monkeypatch):
    monkeypatch.setenv("AUTH_PBKDF2_ITERS", "1000")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        database_url="sqlite://",
        upload_dir=str(tmp_path / "uploads"),
        cors_allow_origins=["http://localhost:3000"],
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.database.dispose()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def authed(client, session_user) -> TestClient:
    client.cookies.set("auth-session", json.dumps(session_user))
    return client


@pytest.fixture
def db(app):
    s = app.state.database.session()
    try:
        yield s
    finally:
        s.close()
