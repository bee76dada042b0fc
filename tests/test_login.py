# tests/test_login.py
from __future__ import annotations

from rentdesk.auth import hash_password, verify_password
from rentdesk.models import User


def _mk_user(db, *, username="manager", password="secret123", status="Active") -> User:
    u = User(
        fullname="Site Manager",
        username=username,
        password_hash=hash_password(password),
        type="Admin",
        status=status,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def test_password_hash_verifies():
    stored = hash_password("pw-123456")
    assert verify_password("pw-123456", stored)
    assert not verify_password("nope", stored)
    assert not verify_password("pw-123456", "garbage")


def test_login_sets_session_cookie(client, db):
    u = _mk_user(db)

    r = client.post("/api/auth/login", json={"username": "manager", "password": "secret123"})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login successful"
    assert body["user"]["id"] == u.id
    assert "password" not in body["user"] and "password_hash" not in body["user"]

    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["user"] == body["user"]


def test_login_username_is_case_insensitive(client, db):
    _mk_user(db)
    r = client.post("/api/auth/login", json={"username": "MANAGER", "password": "secret123"})
    assert r.status_code == 200


def test_login_requires_both_fields(client):
    r = client.post("/api/auth/login", json={"username": "manager"})
    assert r.status_code == 400
    assert r.json()["error"] == "Username and password are required"


def test_login_bad_password_is_401(client, db):
    _mk_user(db)
    r = client.post("/api/auth/login", json={"username": "manager", "password": "wrong-one"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid username or password"}
    assert "auth-session" not in client.cookies


def test_login_inactive_account_is_403(client, db):
    _mk_user(db, status="Inactive")
    r = client.post("/api/auth/login", json={"username": "manager", "password": "secret123"})
    assert r.status_code == 403
