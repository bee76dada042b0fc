# tests/test_crud_routes.py
from __future__ import annotations


def _house(client, name: str = "Maple House") -> dict:
    r = client.post("/api/houses", json={"name": name, "address": "1 Maple St"})
    assert r.status_code == 201
    return r.json()


def test_crud_needs_session(client):
    assert client.get("/api/houses").status_code == 401
    assert client.post("/api/tenants", json={}).status_code == 401


def test_house_with_rooms(authed):
    house = _house(authed)
    assert house["rooms"] == []

    r = authed.post("/api/rooms", json={"name": "101", "monthlyRent": 350, "houseId": house["id"]})
    assert r.status_code == 201
    room = r.json()
    assert room["status"] == "available"
    assert room["house"]["id"] == house["id"]

    r = authed.get("/api/houses")
    assert r.headers["cache-control"].startswith("no-cache")
    [listed] = r.json()
    assert [x["id"] for x in listed["rooms"]] == [room["id"]]
    assert "createdAt" in listed and "updatedAt" in listed


def test_room_for_missing_house_is_404(authed):
    r = authed.post("/api/rooms", json={"name": "101", "monthlyRent": 350, "houseId": "missing"})
    assert r.status_code == 404
    assert r.json() == {"error": "House not found"}


def test_deleting_a_house_leaves_rooms(authed):
    house = _house(authed)
    room = authed.post("/api/rooms", json={"name": "101", "monthlyRent": 350, "houseId": house["id"]}).json()

    r = authed.delete(f"/api/houses/{house['id']}")
    assert r.json() == {"message": "House deleted successfully"}
    assert authed.get(f"/api/houses/{house['id']}").status_code == 404

    r = authed.get(f"/api/rooms/{room['id']}")
    assert r.status_code == 200
    assert r.json()["house"] is None


def test_tenant_update(authed):
    t = authed.post("/api/tenants", json={"name": "Ann", "phone": "555", "address": "x"}).json()
    r = authed.put(f"/api/tenants/{t['id']}", json={"name": "Ann B", "phone": "556", "address": "y"})
    assert r.status_code == 200
    assert r.json()["name"] == "Ann B"


def test_duplicate_monthly_service_is_409(authed):
    body = {"roomId": "r1", "month": "2026-04", "totalAmount": 42}
    assert authed.post("/api/monthly-services", json=body).status_code == 201

    r = authed.post("/api/monthly-services", json=body)
    assert r.status_code == 409
    assert "2026-04" in r.json()["error"]

    assert authed.post("/api/monthly-services", json=dict(body, month="2026-05")).status_code == 201


def test_users_never_expose_password(authed):
    body = {"fullname": "Bo", "username": "bo_admin", "password": "secret123", "type": "Admin", "status": "Active"}
    r = authed.post("/api/users", json=body)
    assert r.status_code == 201
    user = r.json()
    assert "password" not in user and "passwordHash" not in user

    assert authed.post("/api/users", json=body).json()["error"] == "Username already exists"

    # blank password keeps the old one
    r = authed.put(f"/api/users/{user['id']}", json=dict(body, fullname="Bo B", password=""))
    assert r.status_code == 200
    assert r.json()["fullname"] == "Bo B"

    authed.cookies.clear()
    login = authed.post("/api/auth/login", json={"username": "bo_admin", "password": "secret123"})
    assert login.status_code == 200


def test_unknown_ids_are_404(authed):
    for path in ("houses", "rooms", "tenants", "rents", "payments", "users", "monthly-services"):
        assert authed.get(f"/api/{path}/nope").status_code == 404


def test_timestamps_are_utc_iso(authed):
    house = _house(authed)
    for key in ("createdAt", "updatedAt"):
        assert house[key].endswith("Z")
        assert len(house[key]) == len("2026-01-01T00:00:00.000Z")
