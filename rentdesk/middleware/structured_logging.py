# rentdesk/middleware/structured_logging.py
from __future__ import annotations

import json
import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..errors import Unauthenticated
from ..session import parse_session_value

log = logging.getLogger("rentdesk.request")


def _json_log(payload: dict) -> None:
    try:
        log.info(json.dumps(payload, default=str))
    except (TypeError, ValueError):
        log.info(str(payload))


def _session_user_id(request: Request) -> Optional[str]:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        return None
    try:
        user = parse_session_value(request.cookies.get(settings.session_cookie_name))
    except Unauthenticated:
        return None
    uid = user.get("id")
    return str(uid) if uid is not None else None


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    Emits one structured log line per request with:
      request_id, user_id, method, path, status_code, latency_ms

    user_id comes from the session cookie when it parses; it is only a label
    here, nothing is authorized on it.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        t0 = time.time()
        user_id = _session_user_id(request)

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            latency_ms = int((time.time() - t0) * 1000)

            _json_log(
                {
                    "event": "http_request",
                    "request_id": getattr(request.state, "request_id", None),
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.url.query) if request.url.query else "",
                    "status_code": status_code,
                    "latency_ms": latency_ms,
                    "user_id": user_id,
                }
            )
