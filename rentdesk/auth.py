# rentdesk/auth.py
from __future__ import annotations

import base64
import hashlib
import hmac
import os
import secrets
from typing import Any

from fastapi import Depends, Request

from .config import Settings
from .session import SessionStore


# -------------------------
# Password hashing
# -------------------------
def hash_password(password: str) -> str:
    salt = secrets.token_bytes(16)
    iters = int(os.getenv("AUTH_PBKDF2_ITERS", "210000"))
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iters)
    return f"pbkdf2_sha256${iters}${base64.b64encode(salt).decode()}${base64.b64encode(dk).decode()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algo, iters_s, salt_b64, dk_b64 = stored.strip().split("$", 3)
    except ValueError:
        return False
    if algo != "pbkdf2_sha256":
        return False
    try:
        iters = int(iters_s)
        salt = base64.b64decode(salt_b64.encode())
        dk = base64.b64decode(dk_b64.encode())
    except ValueError:
        return False
    test = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iters)
    return hmac.compare_digest(test, dk)


# -------------------------
# Dependencies
# -------------------------
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_session(request: Request, settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Current session user; raises Unauthenticated (401) when the cookie doesn't parse."""
    return SessionStore(request, None, settings).user()
