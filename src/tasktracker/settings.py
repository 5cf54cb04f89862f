from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - DATABASE_URL: SQLAlchemy database URL. Default 'sqlite:///./data/tasks.db'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - API_HOST: interface the API server binds to (default: 127.0.0.1)
    - API_PORT: port the API server listens on (default: 4000)
    - TASKS_API_URL: base URL the client talks to (default: http://localhost:4000)
    - LOG_LEVEL: console log level name (default: INFO)
    - SQL_ECHO: 'true' to echo SQL statements through the sqlalchemy logger
    """

    database_url: str
    cors_allow_origins: List[str]
    api_host: str
    api_port: int
    api_url: str
    log_level: str
    sql_echo: bool


_DEFAULT_PORT = 4000
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_port(value: str) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return _DEFAULT_PORT
    if not (0 < port < 65536):
        return _DEFAULT_PORT
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        database_url=_get_env("DATABASE_URL", "sqlite:///./data/tasks.db").strip(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        api_host=_get_env("API_HOST", "127.0.0.1").strip(),
        api_port=_parse_port(_get_env("API_PORT", str(_DEFAULT_PORT))),
        api_url=_get_env("TASKS_API_URL", "http://localhost:4000").strip().rstrip("/"),
        log_level=log_level,
        sql_echo=_parse_bool(_get_env("SQL_ECHO", "false"), False),
    )
