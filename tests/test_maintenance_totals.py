# tests/test_maintenance_totals.py
from __future__ import annotations

from dataclasses import dataclass

from rentdesk.domain.maintenance import total_price


@dataclass
class I:
    id: str
    price: float


def test_total_counts_each_issue_once():
    assert total_price([I("a", 10.0), I("b", 2.5), I("a", 10.0)]) == 12.5
    assert total_price([]) == 0.0


def _issue(client, name: str, price: float) -> str:
    r = client.post("/api/maintenance-issues", json={"name": name, "price": price})
    assert r.status_code == 201
    return r.json()["id"]


def test_request_total_follows_issue_list(authed):
    leak = _issue(authed, "Leak", 40)
    bulb = _issue(authed, "Bulb", 5)

    r = authed.post("/api/maintenance-requests", json={"roomId": "r1", "issueIds": [leak, bulb]})
    assert r.status_code == 201
    req = r.json()
    assert req["totalPrice"] == 45
    assert req["status"] == "Pending"
    assert {i["id"] for i in req["issues"]} == {leak, bulb}

    r = authed.put(f"/api/maintenance-requests/{req['id']}", json={"issueIds": [bulb]})
    assert r.json()["totalPrice"] == 5
    assert r.json()["roomId"] == "r1"

    r = authed.put(f"/api/maintenance-requests/{req['id']}", json={"status": "Completed"})
    assert r.json()["status"] == "Completed"
    assert r.json()["totalPrice"] == 5


def test_request_with_unknown_issue_is_404(authed):
    leak = _issue(authed, "Leak", 40)
    r = authed.post("/api/maintenance-requests", json={"issueIds": [leak, "nope"]})
    assert r.status_code == 404
    assert r.json() == {"error": "One or more maintenance issues not found"}


def test_request_needs_at_least_one_issue(authed):
    r = authed.post("/api/maintenance-requests", json={"issueIds": []})
    assert r.status_code == 400


def test_request_status_must_be_known(authed):
    leak = _issue(authed, "Leak", 40)
    req = authed.post("/api/maintenance-requests", json={"issueIds": [leak]}).json()

    r = authed.put(f"/api/maintenance-requests/{req['id']}", json={"status": "Done"})
    assert r.status_code == 400

    for status in ("In Progress", "Completed", "Cancelled"):
        r = authed.put(f"/api/maintenance-requests/{req['id']}", json={"status": status})
        assert r.status_code == 200
        assert r.json()["status"] == status
