from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from contact_api.config import Settings, get_settings


Base = declarative_base()


def _connect_args(settings: Settings) -> dict:
    if settings.is_sqlite:
        return {"check_same_thread": False, "timeout": settings.db_timeout_seconds}
    return {
        "connect_timeout": settings.db_timeout_seconds,
        "options": f"-c statement_timeout={settings.db_timeout_seconds * 1000}",
    }


def build_engine(settings: Settings) -> Engine:
    options: dict = {
        "pool_pre_ping": True,
        "future": True,
        "connect_args": _connect_args(settings),
    }
    if not settings.is_sqlite:
        options["pool_timeout"] = settings.db_timeout_seconds
    return create_engine(settings.database_url, **options)


settings = get_settings()
engine = build_engine(settings)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, class_=Session)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    from contact_api.database import models  # noqa: F401 - imported for metadata side effects

    Base.metadata.create_all(bind=bind or engine)
