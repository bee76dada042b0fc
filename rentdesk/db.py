# rentdesk/db.py
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from sqlalchemy.pool import StaticPool
from starlette.requests import Request


class Base(DeclarativeBase):
    pass


class Database:
    """
    Engine + session factory for one application instance.

    Built once by create_app() and kept on app.state; handlers reach it through
    the get_db dependency instead of importing a module-level engine.
    """

    def __init__(self, url: str) -> None:
        kwargs: dict = {"pool_pre_ping": True, "future": True}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
                # one shared connection, otherwise every session sees an empty db
                kwargs["poolclass"] = StaticPool

        self.url = url
        self.engine = create_engine(url, **kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            future=True,
        )

    def create_all(self) -> None:
        from . import models  # noqa: F401  (registers tables on Base.metadata)

        Base.metadata.create_all(self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    """
    Yields a session bound to the app's Database.

    Rolls back on exceptions so a failed statement doesn't leave the
    connection in an aborted transaction for the next request.
    """
    db = request.app.state.database.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
