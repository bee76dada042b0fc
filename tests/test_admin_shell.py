# tests/test_admin_shell.py
from __future__ import annotations

from rentdesk.shell import MENU, decorate, navigation


def test_only_matching_item_is_active():
    nav = navigation("/admin/tenants/abc")
    active = [n["title"] for n in nav if n["active"]]
    assert active == ["Tenants"]

    assert [n["title"] for n in navigation("/admin") if n["active"]] == ["Dashboard"]


def test_decorate_wraps_content():
    out = decorate({"id": "u1", "fullname": "Admin"}, path="/admin/payments", content={"rows": []})
    assert out["content"] == {"rows": []}
    assert out["header"]["user"]["fullname"] == "Admin"
    assert out["loading"]["message"] == "Loading..."
    assert len(out["nav"]) == len(MENU)


def test_shell_route(authed, session_user):
    r = authed.get("/api/admin/shell", params={"path": "/admin/rents"})
    assert r.status_code == 200
    body = r.json()
    assert body["header"]["user"]["id"] == session_user["id"]
    assert [n["href"] for n in body["nav"] if n["active"]] == ["/admin/rents"]


def test_shell_route_without_session(client):
    assert client.get("/api/admin/shell").status_code == 401


def test_request_id_is_echoed(client):
    r = client.get("/api/admin/loading", headers={"X-Request-ID": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"
    assert r.json() == {"message": "Loading...", "size": "md"}
