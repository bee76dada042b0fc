# rentdesk/routers/auth.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..auth import get_settings, verify_password
from ..config import Settings
from ..db import get_db
from ..errors import Forbidden, Unauthenticated, UpstreamFailure, ValidationFailure
from ..models import User
from ..session import SessionStore, serialize_session
from ..views import session_record

log = logging.getLogger("rentdesk.auth")

router = APIRouter(prefix="/auth", tags=["auth"])

INVALID_CREDENTIALS = "Invalid username or password"


def _find_user(db: Session, username: str) -> User | None:
    # exact match first, then case-insensitive
    user = db.scalar(select(User).where(User.username == username))
    if user is not None:
        return user
    return db.scalar(select(User).where(func.lower(User.username) == username.lower()))


@router.post("/login")
def login(
    payload: dict[str, Any],
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    payload: { username, password }
    - checks the account is Active
    - writes the session record into the auth cookie
    """
    username = str(payload.get("username") or "").strip()
    password = str(payload.get("password") or "").strip()

    if not username or not password:
        raise ValidationFailure("Username and password are required")

    user = _find_user(db, username)
    if user is None:
        log.warning("login failed: unknown user", extra={"username": username})
        raise Unauthenticated(INVALID_CREDENTIALS)

    if user.status != "Active":
        raise Forbidden("Your account is not active. Please contact administrator.")

    if not user.password_hash or not verify_password(password, user.password_hash):
        log.warning("login failed: bad password", extra={"username": user.username})
        raise Unauthenticated(INVALID_CREDENTIALS)

    record = session_record(user)
    SessionStore(request, response, settings).set(serialize_session(record))

    log.info("login ok", extra={"user_id": user.id, "username": user.username})
    return {"message": "Login successful", "user": record}


@router.post("/logout")
def logout(request: Request, response: Response, settings: Settings = Depends(get_settings)):
    try:
        SessionStore(request, response, settings).delete()
    except Exception as e:
        raise UpstreamFailure("Failed to logout") from e
    return {"message": "Logout successful"}


@router.get("/me")
def me(request: Request, settings: Settings = Depends(get_settings)):
    # parse failures and a missing cookie both come out as 401
    user = SessionStore(request, None, settings).user()
    return {"user": user}
