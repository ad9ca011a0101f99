from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from vault_gateway.core.settings import Settings, get_settings


class Base(DeclarativeBase):
    pass


def _enable_wal(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


@lru_cache(maxsize=None)
def get_engine(db_path: str) -> Engine:
    # check_same_thread=False is required for SQLite when FastAPI runs sync routes in a threadpool
    engine = create_engine(
        f"sqlite:///{db_path}", connect_args={"check_same_thread": False}
    )
    event.listen(engine, "connect", _enable_wal)

    import vault_gateway.db_models  # noqa: F401  (register tables)

    Base.metadata.create_all(engine)
    return engine


def get_db(settings: Settings = Depends(get_settings)):
    SessionLocal = sessionmaker(autoflush=False, bind=get_engine(settings.db_path))
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
