# rentdesk/routers/entry.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from ..errors import Unauthenticated
from ..session import SessionStore

log = logging.getLogger("rentdesk.entry")

router = APIRouter(tags=["entry"])

ADMIN_PATH = "/admin"
LOGIN_PATH = "/login"


def entry_target(request: Request) -> str:
    """Where the site root sends this visitor. Anything unexpected means login."""
    try:
        SessionStore(request, None, request.app.state.settings).user()
    except Unauthenticated:
        return LOGIN_PATH
    except Exception:
        log.exception("entry check failed, sending to login")
        return LOGIN_PATH
    return ADMIN_PATH


@router.get("/", include_in_schema=False)
def root(request: Request):
    return RedirectResponse(url=entry_target(request), status_code=307)
