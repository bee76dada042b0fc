# rentdesk/routers/rooms.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..errors import validate_payload
from ..models import House, Room
from ..schemas import MessageOut, RoomCreate, RoomOut
from ..services.lookups import maybe_get, must_get_house, must_get_room
from ..views import room_out

router = APIRouter(prefix="/rooms", tags=["rooms"], dependencies=[Depends(require_session)])


@router.get("", response_model=list[RoomOut])
def list_rooms(db: Session = Depends(get_db)):
    rooms = db.scalars(select(Room).order_by(desc(Room.created_at))).all()
    houses = {h.id: h for h in db.scalars(select(House)).all()}
    return [room_out(r, houses.get(r.house_id)) for r in rooms]


@router.post("", response_model=RoomOut, status_code=201)
def create_room(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(RoomCreate, payload)
    house = must_get_house(db, data.house_id)

    row = Room(
        name=data.name,
        monthly_rent=data.monthly_rent,
        house_id=house.id,
        status=data.status or "available",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return room_out(row, house)


@router.get("/{room_id}", response_model=RoomOut)
def get_room(room_id: str, db: Session = Depends(get_db)):
    row = must_get_room(db, room_id)
    return room_out(row, maybe_get(db, House, row.house_id))


@router.put("/{room_id}", response_model=RoomOut)
def update_room(room_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(RoomCreate, payload)
    row = must_get_room(db, room_id)
    house = must_get_house(db, data.house_id)

    row.name = data.name
    row.monthly_rent = data.monthly_rent
    row.house_id = house.id
    row.status = data.status or "available"

    db.add(row)
    db.commit()
    db.refresh(row)
    return room_out(row, house)


@router.delete("/{room_id}", response_model=MessageOut)
def delete_room(room_id: str, db: Session = Depends(get_db)):
    row = must_get_room(db, room_id)
    db.delete(row)
    db.commit()
    return {"message": "Room deleted successfully"}
