# rentdesk/session.py
from __future__ import annotations

import json
from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import Response

from .config import Settings
from .errors import Unauthenticated


def parse_session_value(raw: Optional[str]) -> dict[str, Any]:
    """
    Parse the cookie value into the session user record.

    Absent, blank, malformed JSON and non-object JSON all raise Unauthenticated;
    callers can't tell them apart. A valid object comes back as-is.
    """
    if raw is None:
        raise Unauthenticated()

    value = raw.strip()
    if not value:
        raise Unauthenticated()

    try:
        data = json.loads(value)
    except (TypeError, ValueError):
        raise Unauthenticated()

    if not isinstance(data, dict):
        raise Unauthenticated()
    return data


def serialize_session(user: dict[str, Any]) -> str:
    return json.dumps(user, separators=(",", ":"))


class SessionStore:
    """
    Reads the session cookie off the request and writes/deletes it on the response.

    The value is not signed or encrypted; whatever the client sends is trusted.
    """

    def __init__(self, request: Request, response: Optional[Response], settings: Settings) -> None:
        self.request = request
        self.response = response
        self.settings = settings

    @property
    def name(self) -> str:
        return self.settings.session_cookie_name

    def get(self) -> Optional[str]:
        return self.request.cookies.get(self.name)

    def set(self, value: str) -> None:
        if self.response is None:
            raise RuntimeError("SessionStore.set needs a response")
        self.response.set_cookie(
            self.name,
            value,
            httponly=True,
            secure=bool(self.settings.session_cookie_secure),
            samesite=str(self.settings.session_cookie_samesite),
            max_age=int(self.settings.session_max_age_seconds),
            path="/",
        )

    def delete(self) -> None:
        if self.response is None:
            raise RuntimeError("SessionStore.delete needs a response")
        self.response.delete_cookie(
            self.name,
            path="/",
            secure=bool(self.settings.session_cookie_secure),
            httponly=True,
            samesite=str(self.settings.session_cookie_samesite),
        )

    def user(self) -> dict[str, Any]:
        return parse_session_value(self.get())
