# rentdesk/routers/houses.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..errors import validate_payload
from ..models import House, Room
from ..schemas import HouseCreate, HouseOut, MessageOut
from ..services.lookups import must_get_house
from ..views import house_out

router = APIRouter(prefix="/houses", tags=["houses"], dependencies=[Depends(require_session)])

NO_STORE = {"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache", "Expires": "0"}


def _rooms_of(db: Session, house_id: str) -> list[Room]:
    return list(db.scalars(select(Room).where(Room.house_id == house_id)).all())


@router.get("", response_model=list[HouseOut])
def list_houses(response: Response, db: Session = Depends(get_db)):
    response.headers.update(NO_STORE)
    houses = db.scalars(select(House).order_by(desc(House.created_at))).all()

    rooms_by_house: dict[str, list[Room]] = {}
    for r in db.scalars(select(Room)).all():
        rooms_by_house.setdefault(r.house_id, []).append(r)

    return [house_out(h, rooms_by_house.get(h.id, [])) for h in houses]


@router.post("", response_model=HouseOut, status_code=201)
def create_house(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(HouseCreate, payload)
    row = House(name=data.name, address=data.address, description=data.description or None)
    db.add(row)
    db.commit()
    db.refresh(row)
    return house_out(row, [])


@router.get("/{house_id}", response_model=HouseOut)
def get_house(house_id: str, db: Session = Depends(get_db)):
    row = must_get_house(db, house_id)
    return house_out(row, _rooms_of(db, row.id))


@router.put("/{house_id}", response_model=HouseOut)
def update_house(house_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(HouseCreate, payload)
    row = must_get_house(db, house_id)

    row.name = data.name
    row.address = data.address
    row.description = data.description or None

    db.add(row)
    db.commit()
    db.refresh(row)
    return house_out(row, _rooms_of(db, row.id))


@router.delete("/{house_id}", response_model=MessageOut)
def delete_house(house_id: str, db: Session = Depends(get_db)):
    # rooms keep their houseId; nothing cascades
    row = must_get_house(db, house_id)
    db.delete(row)
    db.commit()
    return {"message": "House deleted successfully"}
