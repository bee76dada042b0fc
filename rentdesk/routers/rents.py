# rentdesk/routers/rents.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..errors import validate_payload
from ..models import Rent
from ..schemas import MessageOut, RentCreate, RentOut
from ..services.lookups import must_get_rent
from ..services.rent_rules import ensure_no_rent_overlap
from ..views import rent_out

router = APIRouter(prefix="/rents", tags=["rents"], dependencies=[Depends(require_session)])


def _apply(row: Rent, data: RentCreate) -> None:
    row.room_id = data.room_id
    row.tenant_id = data.tenant_id
    row.guarantor_name = data.guarantor_name
    row.guarantor_phone = data.guarantor_phone
    row.monthly_rent = data.monthly_rent
    row.months = data.months
    row.total_rent = data.total_rent
    row.start_date = data.start_date
    row.end_date = data.end_date
    row.contract = data.contract or None


@router.get("", response_model=list[RentOut])
def list_rents(response: Response, db: Session = Depends(get_db)):
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    q = select(Rent).order_by(desc(Rent.created_at))
    return [rent_out(r) for r in db.scalars(q).all()]


@router.post("", response_model=RentOut, status_code=201)
def create_rent(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(RentCreate, payload)
    ensure_no_rent_overlap(db, room_id=data.room_id, start_date=data.start_date, end_date=data.end_date)

    row = Rent()
    _apply(row, data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return rent_out(row)


@router.get("/{rent_id}", response_model=RentOut)
def get_rent(rent_id: str, db: Session = Depends(get_db)):
    return rent_out(must_get_rent(db, rent_id))


@router.put("/{rent_id}", response_model=RentOut)
def update_rent(rent_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(RentCreate, payload)
    row = must_get_rent(db, rent_id)

    ensure_no_rent_overlap(
        db,
        room_id=data.room_id,
        start_date=data.start_date,
        end_date=data.end_date,
        ignore_rent_id=row.id,
    )

    _apply(row, data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return rent_out(row)


@router.delete("/{rent_id}", response_model=MessageOut)
def delete_rent(rent_id: str, db: Session = Depends(get_db)):
    row = must_get_rent(db, rent_id)
    db.delete(row)
    db.commit()
    return {"message": "Rent deleted successfully"}
