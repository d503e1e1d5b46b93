from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine

from project_tracker.core.config import settings


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    eng = create_engine(url, pool_pre_ping=True, echo=echo, future=True, **kwargs)
    if eng.dialect.name == "sqlite":
        # cascades on material/step/project_category rely on this
        @event.listens_for(eng, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()
    return eng


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)


def get_connection(eng: Engine | None = None) -> Connection:
    """Open a new connection; the caller owns it and must close it."""
    return (eng or engine).connect()
