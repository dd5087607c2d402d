from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_API_URL = "https://jsonplaceholder.typicode.com/todos"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    fetch_limit: int = 20
    storage_key: str = "todos"
    status_clear_seconds: float = 3.0
    http_timeout_s: float | None = None
    host: str = "0.0.0.0"
    port: int = 8080
    storage_secret: str = "todo-cache-secret"
    debug: bool = False
    log_dir: str = "./data/logs"


def _get(env: Mapping[str, str], name: str) -> str | None:
    value = (env.get(name) or "").strip()
    return value or None


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = _get(env, name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {name} value: {raw}") from exc
    if value < 0:
        raise ValueError(f"Invalid {name} value: {raw}")
    return value


def _float(env: Mapping[str, str], name: str, default: float | None) -> float | None:
    raw = _get(env, name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {name} value: {raw}") from exc
    if value < 0:
        raise ValueError(f"Invalid {name} value: {raw}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    if env is None:
        env = os.environ
    defaults = Settings()
    return Settings(
        api_url=_get(env, "TODO_API_URL") or defaults.api_url,
        fetch_limit=_int(env, "TODO_FETCH_LIMIT", defaults.fetch_limit),
        storage_key=_get(env, "TODO_STORAGE_KEY") or defaults.storage_key,
        status_clear_seconds=_float(env, "TODO_STATUS_CLEAR_SECONDS", defaults.status_clear_seconds),
        http_timeout_s=_float(env, "TODO_HTTP_TIMEOUT", defaults.http_timeout_s),
        host=_get(env, "TODO_HOST") or defaults.host,
        port=_int(env, "TODO_PORT", defaults.port),
        storage_secret=_get(env, "TODO_STORAGE_SECRET") or defaults.storage_secret,
        debug=env.get("TODO_DEBUG") == "1",
        log_dir=_get(env, "TODO_LOG_DIR") or defaults.log_dir,
    )
