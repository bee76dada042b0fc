# rentdesk/main.py
from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings, settings as default_settings
from .db import Database
from .errors import install_error_handlers
from .logging_config import configure_logging
from .services.uploads import LocalUploadStore

from .middleware.request_id import RequestIdMiddleware
from .middleware.structured_logging import StructuredLoggingMiddleware

from .routers.health import router as health_router
from .routers.entry import router as entry_router
from .routers.admin import router as admin_router
from .routers.auth import router as auth_router

from .routers.houses import router as houses_router
from .routers.rooms import router as rooms_router
from .routers.tenants import router as tenants_router
from .routers.rents import router as rents_router
from .routers.monthly_services import router as monthly_services_router
from .routers.payments import router as payments_router
from .routers.maintenance import issues_router, requests_router
from .routers.users import router as users_router
from .routers.uploads import router as uploads_router

API_PREFIX = "/api"


def _cors_origins(s: Settings) -> list[str]:
    val = s.cors_allow_origins
    if isinstance(val, str):
        v = val.strip()
        return ["*"] if v == "*" else [x.strip() for x in v.split(",") if x.strip()]
    if isinstance(val, list) and val:
        return val
    return ["*"]


def create_app(settings: Optional[Settings] = None, *, database: Optional[Database] = None) -> FastAPI:
    """
    Build the app and its per-process registry (settings, database, upload store)
    on app.state. Nothing below reaches for module-level singletons.
    """
    s = settings or default_settings

    app = FastAPI(title="Rentdesk Admin API", version="0.1.0")

    db = database or Database(s.database_url)
    if s.create_tables:
        db.create_all()

    os.makedirs(s.upload_dir, exist_ok=True)

    app.state.settings = s
    app.state.database = db
    app.state.upload_store = LocalUploadStore(s.upload_dir, s.upload_base_url)

    install_error_handlers(app)

    # last added runs first: request id must be set before the log line is built
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(s),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Entry + shell
    app.include_router(entry_router)
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(admin_router, prefix=API_PREFIX)

    # Properties + people
    app.include_router(houses_router, prefix=API_PREFIX)
    app.include_router(rooms_router, prefix=API_PREFIX)
    app.include_router(tenants_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)

    # Billing
    app.include_router(rents_router, prefix=API_PREFIX)
    app.include_router(monthly_services_router, prefix=API_PREFIX)
    app.include_router(payments_router, prefix=API_PREFIX)

    # Maintenance
    app.include_router(issues_router, prefix=API_PREFIX)
    app.include_router(requests_router, prefix=API_PREFIX)

    # Files
    app.include_router(uploads_router, prefix=API_PREFIX)
    app.mount(s.upload_base_url, StaticFiles(directory=s.upload_dir, check_dir=False), name="uploads")

    return app


def build_app() -> FastAPI:
    """uvicorn entrypoint: `uvicorn rentdesk.main:build_app --factory`"""
    configure_logging()
    return create_app()
