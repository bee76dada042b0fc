# tests/test_session_cookie.py
from __future__ import annotations

import json

import pytest

from rentdesk.errors import Unauthenticated
from rentdesk.session import parse_session_value, serialize_session


@pytest.mark.parametrize("raw", [None, "", "   ", "{bad json", "[1, 2]", '"just a string"'])
def test_unusable_cookie_values_are_unauthenticated(raw):
    with pytest.raises(Unauthenticated):
        parse_session_value(raw)


def test_session_record_round_trips():
    user = {"id": "u1", "username": "admin", "profile": None, "extra": {"nested": [1, 2]}}
    assert parse_session_value(serialize_session(user)) == user


def test_me_returns_the_cookie_record(authed, session_user):
    r = authed.get("/api/auth/me")
    assert r.status_code == 200
    assert r.json() == {"user": session_user}


def test_me_without_cookie_is_401(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.json() == {"error": "Not authenticated"}


@pytest.mark.parametrize("raw", ["   ", "{bad json"])
def test_me_with_broken_cookie_is_401(client, raw):
    r = client.get("/api/auth/me", headers={"Cookie": f"auth-session={raw}"})
    assert r.status_code == 401
    assert "error" in r.json()


def test_me_keeps_unknown_fields(client):
    record = {"id": "u9", "role": "whatever"}
    r = client.get("/api/auth/me", headers={"Cookie": "auth-session=" + json.dumps(record)})
    assert r.status_code == 200
    assert r.json()["user"] == record


def test_logout_is_idempotent(authed):
    r1 = authed.post("/api/auth/logout")
    assert r1.status_code == 200
    assert r1.json() == {"message": "Logout successful"}
    assert "max-age=0" in r1.headers["set-cookie"].lower()

    r2 = authed.post("/api/auth/logout")
    assert r2.status_code == 200
    assert r2.json() == {"message": "Logout successful"}


def test_logout_failure_is_500(authed, monkeypatch):
    from rentdesk.session import SessionStore

    def boom(self):
        raise RuntimeError("cookie jar gone")

    monkeypatch.setattr(SessionStore, "delete", boom)
    r = authed.post("/api/auth/logout")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to logout"}
