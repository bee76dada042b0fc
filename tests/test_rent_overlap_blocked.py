# tests/test_rent_overlap_blocked.py
from __future__ import annotations

from datetime import datetime

import pytest

from rentdesk.errors import ValidationFailure
from rentdesk.models import Rent
from rentdesk.services.rent_rules import ensure_no_rent_overlap, overlaps


def _mk_rent(db, *, room_id="r1", start=datetime(2026, 1, 1), end=datetime(2026, 7, 1)) -> Rent:
    r = Rent(
        room_id=room_id,
        tenant_id="t1",
        guarantor_name="G",
        guarantor_phone="555",
        monthly_rent=300.0,
        months=6,
        total_rent=1800.0,
        start_date=start,
        end_date=end,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return r


def test_overlap_is_half_open():
    a0, a1 = datetime(2026, 1, 1), datetime(2026, 7, 1)
    assert overlaps(a0, a1, datetime(2026, 6, 1), datetime(2026, 8, 1))
    assert not overlaps(a0, a1, datetime(2026, 7, 1), datetime(2026, 9, 1))


def test_overlap_blocked(db):
    _mk_rent(db)
    with pytest.raises(ValidationFailure):
        ensure_no_rent_overlap(db, room_id="r1", start_date=datetime(2026, 3, 1), end_date=datetime(2026, 4, 1))


def test_other_room_and_self_are_ignored(db):
    rent = _mk_rent(db)
    ensure_no_rent_overlap(db, room_id="r2", start_date=datetime(2026, 3, 1), end_date=datetime(2026, 4, 1))
    ensure_no_rent_overlap(
        db,
        room_id="r1",
        start_date=datetime(2026, 2, 1),
        end_date=datetime(2026, 8, 1),
        ignore_rent_id=rent.id,
    )


def test_rent_route_rejects_overlap(authed):
    body = {
        "roomId": "r1",
        "tenantId": "t1",
        "guarantorName": "G",
        "guarantorPhone": "555",
        "monthlyRent": 300,
        "months": 6,
        "totalRent": 1800,
        "startDate": "2026-01-01T00:00:00Z",
        "endDate": "2026-07-01T00:00:00Z",
    }
    assert authed.post("/api/rents", json=body).status_code == 201

    clash = dict(body, startDate="2026-06-01T00:00:00Z", endDate="2026-12-01T00:00:00Z")
    r = authed.post("/api/rents", json=clash)
    assert r.status_code == 400
    assert "already rented" in r.json()["error"]

    follow_on = dict(body, startDate="2026-07-01T00:00:00Z", endDate="2026-12-01T00:00:00Z", months=5)
    assert authed.post("/api/rents", json=follow_on).status_code == 201


def test_rent_dates_come_back_in_utc(authed):
    body = {
        "roomId": "r2",
        "tenantId": "t1",
        "guarantorName": "G",
        "guarantorPhone": "555",
        "monthlyRent": 300,
        "months": 1,
        "totalRent": 300,
        "startDate": "2026-01-01T02:00:00+02:00",
        "endDate": "2026-02-01T00:00:00Z",
    }
    r = authed.post("/api/rents", json=body)
    assert r.status_code == 201
    assert r.json()["startDate"] == "2026-01-01T00:00:00.000Z"
    assert r.json()["endDate"] == "2026-02-01T00:00:00.000Z"
