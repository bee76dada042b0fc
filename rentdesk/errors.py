# rentdesk/errors.py
from __future__ import annotations

import logging
from typing import Any, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

log = logging.getLogger("rentdesk.errors")

M = TypeVar("M", bound=BaseModel)


class RentdeskError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message}


class Unauthenticated(RentdeskError):
    """Missing, blank or unparseable session. Parse errors land here too."""

    status_code = 401
    message = "Not authenticated"


class Forbidden(RentdeskError):
    status_code = 403
    message = "Forbidden"


class NotFound(RentdeskError):
    status_code = 404
    message = "Not found"


class Conflict(RentdeskError):
    status_code = 409
    message = "Conflict"


class UpstreamFailure(RentdeskError):
    status_code = 500
    message = "Upstream failure"


class ValidationFailure(RentdeskError):
    status_code = 400
    message = "Validation error"

    def __init__(self, message: str | None = None, details: list[Any] | None = None) -> None:
        super().__init__(message)
        self.details = list(details or [])

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if self.details:
            body["details"] = self.details
        return body


def _clean_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # pydantic puts the raw exception in ctx for some validators; it isn't JSON
    out = []
    for e in errors:
        item = {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        out.append(item)
    return out


def validate_payload(model: type[M], data: Any) -> M:
    """Validate a request body against a schema, raising ValidationFailure."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure("Validation error", details=_clean_errors(e.errors())) from e


async def _rentdesk_error_handler(request: Request, exc: RentdeskError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("request failed: %s", exc.message, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": _clean_errors(list(exc.errors()))},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RentdeskError, _rentdesk_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
