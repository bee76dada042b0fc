# rentdesk/routers/admin.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from ..auth import require_session
from ..shell import LOADING, decorate

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/shell", response_model=dict)
def shell(path: str = Query(default="/admin"), user: dict[str, Any] = Depends(require_session)):
    return decorate(user, path=path)


@router.get("/loading", response_model=dict)
def loading():
    return dict(LOADING)
