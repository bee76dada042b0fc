# tests/test_seed_demo.py
from __future__ import annotations

from sqlalchemy import func, select

from rentdesk.auth import verify_password
from rentdesk.cli.seed_demo import seed_demo
from rentdesk.db import Database
from rentdesk.models import Room, User


def test_seed_demo_is_idempotent():
    database = Database("sqlite://")
    try:
        first = seed_demo(database, username="owner", password="owner-pass")
        again = seed_demo(database, username="owner", password="owner-pass")

        assert first.created_user is True
        assert again.created_user is False
        assert first.house_id == again.house_id

        db = database.session()
        try:
            user = db.scalar(select(User).where(User.username == "owner"))
            assert verify_password("owner-pass", user.password_hash)
            assert db.scalar(select(func.count()).select_from(Room)) == 2
        finally:
            db.close()
    finally:
        database.dispose()


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
