# rentdesk/routers/maintenance.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..domain.maintenance import total_price
from ..errors import validate_payload
from ..models import MaintenanceIssue, MaintenanceRequest
from ..schemas import (
    MaintenanceIssueCreate,
    MaintenanceIssueOut,
    MaintenanceRequestCreate,
    MaintenanceRequestOut,
    MaintenanceRequestUpdate,
    MessageOut,
)
from ..services.lookups import issues_by_ids, must_get_issue, must_get_issues, must_get_request
from ..views import issue_out, request_out

issues_router = APIRouter(
    prefix="/maintenance-issues", tags=["maintenance"], dependencies=[Depends(require_session)]
)
requests_router = APIRouter(
    prefix="/maintenance-requests", tags=["maintenance"], dependencies=[Depends(require_session)]
)


# -------------------- Issues (price list) --------------------

@issues_router.get("", response_model=list[MaintenanceIssueOut])
def list_issues(db: Session = Depends(get_db)):
    q = select(MaintenanceIssue).order_by(desc(MaintenanceIssue.created_at))
    return [issue_out(i) for i in db.scalars(q).all()]


@issues_router.post("", response_model=MaintenanceIssueOut, status_code=201)
def create_issue(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(MaintenanceIssueCreate, payload)
    row = MaintenanceIssue(name=data.name, description=data.description or None, price=data.price)
    db.add(row)
    db.commit()
    db.refresh(row)
    return issue_out(row)


@issues_router.get("/{issue_id}", response_model=MaintenanceIssueOut)
def get_issue(issue_id: str, db: Session = Depends(get_db)):
    return issue_out(must_get_issue(db, issue_id))


@issues_router.put("/{issue_id}", response_model=MaintenanceIssueOut)
def update_issue(issue_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(MaintenanceIssueCreate, payload)
    row = must_get_issue(db, issue_id)

    row.name = data.name
    row.description = data.description or None
    row.price = data.price

    db.add(row)
    db.commit()
    db.refresh(row)
    return issue_out(row)


@issues_router.delete("/{issue_id}", response_model=MessageOut)
def delete_issue(issue_id: str, db: Session = Depends(get_db)):
    row = must_get_issue(db, issue_id)
    db.delete(row)
    db.commit()
    return {"message": "Maintenance issue deleted successfully"}


# -------------------- Requests --------------------

@requests_router.get("", response_model=list[MaintenanceRequestOut])
def list_requests(db: Session = Depends(get_db)):
    rows = db.scalars(select(MaintenanceRequest).order_by(desc(MaintenanceRequest.created_at))).all()
    issues = {i.id: i for i in db.scalars(select(MaintenanceIssue)).all()}
    return [request_out(r, [issues[i] for i in (r.issue_ids or []) if i in issues]) for r in rows]


@requests_router.post("", response_model=MaintenanceRequestOut, status_code=201)
def create_request(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(MaintenanceRequestCreate, payload)
    issues = must_get_issues(db, data.issue_ids)

    row = MaintenanceRequest(
        tenant_id=data.tenant_id or None,
        room_id=data.room_id or None,
        issue_ids=list(data.issue_ids),
        total_price=total_price(issues),
        status="Pending",
        notes=data.notes or None,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return request_out(row, issues)


@requests_router.get("/{request_id}", response_model=MaintenanceRequestOut)
def get_request(request_id: str, db: Session = Depends(get_db)):
    row = must_get_request(db, request_id)
    return request_out(row, issues_by_ids(db, row.issue_ids or []))


@requests_router.put("/{request_id}", response_model=MaintenanceRequestOut)
def update_request(request_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    """Partial update; only the fields present in the body change."""
    data = validate_payload(MaintenanceRequestUpdate, payload)
    row = must_get_request(db, request_id)
    sent = data.model_fields_set

    if "tenant_id" in sent:
        row.tenant_id = data.tenant_id or None
    if "room_id" in sent:
        row.room_id = data.room_id or None
    if data.status:
        row.status = data.status
    if "notes" in sent:
        row.notes = data.notes or None

    if data.issue_ids is not None:
        issues = must_get_issues(db, data.issue_ids)
        row.issue_ids = list(data.issue_ids)
        row.total_price = total_price(issues)

    db.add(row)
    db.commit()
    db.refresh(row)
    return request_out(row, issues_by_ids(db, row.issue_ids or []))


@requests_router.delete("/{request_id}", response_model=MessageOut)
def delete_request(request_id: str, db: Session = Depends(get_db)):
    row = must_get_request(db, request_id)
    db.delete(row)
    db.commit()
    return {"message": "Maintenance request deleted successfully"}
