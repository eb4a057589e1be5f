from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE, override=False)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5500",
    "http://127.0.0.1:5500",
    "https://szyfik.github.io",
]


def _as_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(
    value: str | None,
    *,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    if value is None or not value.strip():
        parsed = default
    else:
        try:
            parsed = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"Expected integer value, got: {value!r}") from exc

    if min_value is not None and parsed < min_value:
        raise ValueError(f"Integer value {parsed} is less than allowed minimum {min_value}.")
    if max_value is not None and parsed > max_value:
        raise ValueError(f"Integer value {parsed} exceeds allowed maximum {max_value}.")
    return parsed


def _as_list(value: str | None, *, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def _normalize_database_url(raw_url: str) -> str:
    url = raw_url.strip()
    if url.startswith("sqlite"):
        return url

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)
    elif url.startswith("postgresql://") and "+psycopg2" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg2://", 1)

    if not url.startswith("postgresql+psycopg2://"):
        raise ValueError("DATABASE_URL must be a PostgreSQL or SQLite URL.")

    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    is_local = (
        host in {"localhost", "127.0.0.1"}
        or host.startswith("10.")
        or host.startswith("192.168.")
        or host.startswith("172.")
    )
    if not is_local:
        query = dict(parse_qsl(parsed.query, keep_blank_values=True))
        query.setdefault("sslmode", "require")
        parsed = parsed._replace(query=urlencode(query))
        url = urlunparse(parsed)
    return url


@dataclass(frozen=True)
class Settings:
    app_name: str
    environment: str
    debug: bool
    host: str
    port: int
    log_level: str

    database_url: str
    db_timeout_seconds: int
    recent_contacts_limit: int

    cors_origins: list[str]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    raw_database_url = (os.getenv("DATABASE_URL") or "").strip()
    if not raw_database_url:
        raise RuntimeError("DATABASE_URL is required in .env")

    environment = (os.getenv("APP_ENV") or "development").strip().lower()
    return Settings(
        app_name=(os.getenv("APP_NAME") or "Contact Intake API").strip(),
        environment=environment,
        debug=_as_bool(os.getenv("DEBUG")),
        host=(os.getenv("HOST") or "0.0.0.0").strip(),
        port=_as_int(os.getenv("PORT"), default=3000, min_value=1, max_value=65535),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        database_url=_normalize_database_url(raw_database_url),
        db_timeout_seconds=_as_int(os.getenv("DB_TIMEOUT_SECONDS"), default=10, min_value=1, max_value=300),
        recent_contacts_limit=_as_int(os.getenv("RECENT_CONTACTS_LIMIT"), default=50, min_value=1, max_value=50),
        cors_origins=_as_list(os.getenv("CORS_ORIGINS"), default=list(DEFAULT_CORS_ORIGINS)),
    )
