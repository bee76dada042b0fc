# rentdesk/cli/seed_demo.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..auth import hash_password
from ..db import Database
from ..models import House, Room, User


@dataclass(frozen=True)
class SeedResult:
    username: str
    created_user: bool
    house_id: Optional[str]


def _get_or_create_user(db: Session, *, username: str, password: str, fullname: str) -> tuple[User, bool]:
    row = db.scalar(select(User).where(User.username == username))
    if row:
        return row, False
    row = User(
        username=username,
        fullname=fullname,
        password_hash=hash_password(password),
        type="Admin",
        status="Active",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row, True


def _get_or_create_house(db: Session) -> House:
    row = db.scalar(select(House).where(House.name == "Demo House"))
    if row:
        return row
    row = House(name="Demo House", address="55 Logic Ave", description="seeded by rentdesk.cli")
    db.add(row)
    db.commit()
    db.refresh(row)

    db.add_all(
        [
            Room(name="Room 101", monthly_rent=350.0, house_id=row.id),
            Room(name="Room 102", monthly_rent=375.0, house_id=row.id),
        ]
    )
    db.commit()
    return row


def seed_demo(
    database: Database,
    *,
    username: str = "admin",
    password: str = "admin123",
    fullname: str = "Administrator",
    create_sample_house: bool = True,
) -> SeedResult:
    database.create_all()
    db = database.session()
    try:
        user, created = _get_or_create_user(db, username=username, password=password, fullname=fullname)

        house_id: Optional[str] = None
        if create_sample_house:
            house_id = _get_or_create_house(db).id

        return SeedResult(username=user.username, created_user=created, house_id=house_id)
    finally:
        db.close()
