from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

ID_POLICIES = {"rewind", "monotonic"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - HOST: bind address used by `run()` (default '0.0.0.0')
    - PORT: listening port used by `run()` (default 3001)
    - ID_POLICY: 'rewind' (default) or 'monotonic' identifier assignment
    - EMPTY_LIST_NOT_FOUND: 'true' (default) to answer GET /todos with 404 when empty
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: root log level name (default 'INFO')
    """

    host: str
    port: int
    id_policy: str
    empty_list_not_found: bool
    cors_allow_origins: List[str]
    log_level: str


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


def _parse_port(value: str, default: int) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
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
    policy = _get_env("ID_POLICY", "rewind").strip().lower()
    if policy not in ID_POLICIES:
        # Fallback to the reference behaviour if unsupported
        policy = "rewind"

    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_port(_get_env("PORT", "3001"), 3001),
        id_policy=policy,
        empty_list_not_found=_parse_bool(_get_env("EMPTY_LIST_NOT_FOUND", "true"), True),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=log_level,
    )
