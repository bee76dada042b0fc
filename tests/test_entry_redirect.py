# tests/test_entry_redirect.py
from __future__ import annotations

import pytest


def test_root_with_session_goes_to_admin(client):
    r = client.get("/", headers={"Cookie": 'auth-session={"id":"u1"}'}, follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/admin"


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Cookie": "auth-session=   "},
        {"Cookie": "auth-session={bad json"},
    ],
)
def test_root_without_usable_session_goes_to_login(client, headers):
    r = client.get("/", headers=headers, follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/login"


def test_root_falls_back_to_login_on_unexpected_error(client, monkeypatch):
    from rentdesk.routers import entry

    def boom(self):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(entry.SessionStore, "user", boom)
    r = client.get("/", headers={"Cookie": 'auth-session={"id":"u1"}'}, follow_redirects=False)
    assert r.headers["location"] == "/login"
