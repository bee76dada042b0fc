# rentdesk/routers/monthly_services.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..errors import Conflict, validate_payload
from ..models import House, MonthlyService, Room
from ..schemas import MessageOut, MonthlyServiceCreate, MonthlyServiceOut
from ..services.lookups import maybe_get, must_get_service
from ..views import monthly_service_out

router = APIRouter(
    prefix="/monthly-services", tags=["monthly-services"], dependencies=[Depends(require_session)]
)

FIELDS = (
    "water_previous",
    "water_current",
    "water_price_per_unit",
    "water_total",
    "electricity_previous",
    "electricity_current",
    "electricity_price_per_unit",
    "electricity_total",
    "trash_fee",
    "maintenance_fee",
    "total_amount",
)


def _ensure_unique(db: Session, room_id: str, month: str, ignore_id: Optional[str] = None) -> None:
    q = select(MonthlyService).where(MonthlyService.room_id == room_id, MonthlyService.month == month)
    if ignore_id is not None:
        q = q.where(MonthlyService.id != ignore_id)
    if db.scalar(q) is not None:
        raise Conflict(
            f"A service already exists for this room in {month}. Please edit the existing service instead."
        )


def _apply(row: MonthlyService, data: MonthlyServiceCreate) -> None:
    row.room_id = data.room_id
    row.month = data.month
    for f in FIELDS:
        setattr(row, f, getattr(data, f))
    row.notes = data.notes or None


def _with_relations(db: Session, row: MonthlyService) -> MonthlyServiceOut:
    room = maybe_get(db, Room, row.room_id)
    house = maybe_get(db, House, room.house_id) if room is not None else None
    return monthly_service_out(row, room, house)


@router.get("", response_model=list[MonthlyServiceOut])
def list_services(db: Session = Depends(get_db)):
    rows = db.scalars(select(MonthlyService).order_by(desc(MonthlyService.month))).all()
    rooms = {r.id: r for r in db.scalars(select(Room)).all()}
    houses = {h.id: h for h in db.scalars(select(House)).all()}

    out = []
    for s in rows:
        room = rooms.get(s.room_id)
        out.append(monthly_service_out(s, room, houses.get(room.house_id) if room else None))
    return out


@router.post("", response_model=MonthlyServiceOut, status_code=201)
def create_service(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(MonthlyServiceCreate, payload)
    _ensure_unique(db, data.room_id, data.month)

    row = MonthlyService()
    _apply(row, data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return _with_relations(db, row)


@router.get("/{service_id}", response_model=MonthlyServiceOut)
def get_service(service_id: str, db: Session = Depends(get_db)):
    return _with_relations(db, must_get_service(db, service_id))


@router.put("/{service_id}", response_model=MonthlyServiceOut)
def update_service(service_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(MonthlyServiceCreate, payload)
    row = must_get_service(db, service_id)
    _ensure_unique(db, data.room_id, data.month, ignore_id=row.id)

    _apply(row, data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return _with_relations(db, row)


@router.delete("/{service_id}", response_model=MessageOut)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    row = must_get_service(db, service_id)
    db.delete(row)
    db.commit()
    return {"message": "Monthly service deleted successfully"}
