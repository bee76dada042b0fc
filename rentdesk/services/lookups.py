# rentdesk/services/lookups.py
from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import Base
from ..errors import NotFound
from ..models import (
    House,
    MaintenanceIssue,
    MaintenanceRequest,
    MonthlyService,
    Payment,
    Rent,
    Room,
    Tenant,
    User,
)

M = TypeVar("M", bound=Base)


def maybe_get(db: Session, model: type[M], row_id: Optional[str]) -> Optional[M]:
    if not row_id:
        return None
    return db.scalar(select(model).where(model.id == str(row_id)))


def must_get(db: Session, model: type[M], row_id: str, *, label: str) -> M:
    row = maybe_get(db, model, row_id)
    if row is None:
        raise NotFound(f"{label} not found")
    return row


def must_get_house(db: Session, house_id: str) -> House:
    return must_get(db, House, house_id, label="House")


def must_get_room(db: Session, room_id: str) -> Room:
    return must_get(db, Room, room_id, label="Room")


def must_get_tenant(db: Session, tenant_id: str) -> Tenant:
    return must_get(db, Tenant, tenant_id, label="Tenant")


def must_get_issue(db: Session, issue_id: str) -> MaintenanceIssue:
    return must_get(db, MaintenanceIssue, issue_id, label="Maintenance issue")


def must_get_request(db: Session, request_id: str) -> MaintenanceRequest:
    return must_get(db, MaintenanceRequest, request_id, label="Maintenance request")


def must_get_rent(db: Session, rent_id: str) -> Rent:
    return must_get(db, Rent, rent_id, label="Rent")


def must_get_service(db: Session, service_id: str) -> MonthlyService:
    return must_get(db, MonthlyService, service_id, label="Monthly service")


def must_get_payment(db: Session, payment_id: str) -> Payment:
    return must_get(db, Payment, payment_id, label="Payment")


def must_get_user(db: Session, user_id: str) -> User:
    return must_get(db, User, user_id, label="User")


def issues_by_ids(db: Session, issue_ids: Sequence[str]) -> list[MaintenanceIssue]:
    ids = [str(i) for i in issue_ids]
    if not ids:
        return []
    return list(db.scalars(select(MaintenanceIssue).where(MaintenanceIssue.id.in_(ids))).all())


def must_get_issues(db: Session, issue_ids: Sequence[str]) -> list[MaintenanceIssue]:
    rows = issues_by_ids(db, issue_ids)
    if len({r.id for r in rows}) != len(set(issue_ids)):
        raise NotFound("One or more maintenance issues not found")
    return rows
