# rentdesk/routers/users.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import hash_password, require_session
from ..db import get_db
from ..errors import ValidationFailure, validate_payload
from ..models import User
from ..schemas import MessageOut, UserCreate, UserOut, UserUpdate
from ..services.lookups import must_get_user
from ..views import user_out

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_session)])


def _ensure_username_free(db: Session, username: str, ignore_id: Optional[str] = None) -> None:
    q = select(User).where(User.username == username)
    if ignore_id is not None:
        q = q.where(User.id != ignore_id)
    if db.scalar(q) is not None:
        raise ValidationFailure("Username already exists")


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    q = select(User).order_by(desc(User.created_at))
    return [user_out(u) for u in db.scalars(q).all()]


@router.post("", response_model=UserOut, status_code=201)
def create_user(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(UserCreate, payload)
    username = data.username.strip()
    _ensure_username_free(db, username)

    row = User(
        fullname=data.fullname,
        username=username,
        password_hash=hash_password(data.password),
        type=data.type,
        status=data.status,
        profile=data.profile or None,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return user_out(row)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, db: Session = Depends(get_db)):
    return user_out(must_get_user(db, user_id))


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    """Blank or missing password keeps the current one."""
    if isinstance(payload, dict) and not payload.get("password"):
        payload = {k: v for k, v in payload.items() if k != "password"}
    data = validate_payload(UserUpdate, payload)
    row = must_get_user(db, user_id)

    username = data.username.strip()
    _ensure_username_free(db, username, ignore_id=row.id)

    row.fullname = data.fullname
    row.username = username
    row.type = data.type
    row.status = data.status
    row.profile = data.profile or None
    if data.password:
        row.password_hash = hash_password(data.password)

    db.add(row)
    db.commit()
    db.refresh(row)
    return user_out(row)


@router.delete("/{user_id}", response_model=MessageOut)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    row = must_get_user(db, user_id)
    db.delete(row)
    db.commit()
    return {"message": "User deleted successfully"}
