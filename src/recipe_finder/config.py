"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))

DEFAULT_API_BASE_URL = "https://api.spoonacular.com"


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    recipe_api_key: Optional[str] = Field(
        default=None,
        description="Secret key for the upstream recipe API. Never sent to the browser.",
    )
    recipe_api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the upstream recipe API.",
    )
    upstream_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait on a single upstream call before treating it as failed.",
    )
    debounce_ms: int = Field(
        default=500,
        ge=0,
        description="Quiet period applied to search input before a query is committed.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_requests: bool = Field(
        default=True,
        description="Emit request access logs when true.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip().strip('"').strip("'")
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    api_key = _env("RECIPE_FINDER_API_KEY") or _env("RECIPE_API_KEY")
    if api_key:
        payload["recipe_api_key"] = api_key
    if (base_url := _env("RECIPE_FINDER_API_BASE_URL")):
        payload["recipe_api_base_url"] = base_url
    if (timeout := _env("RECIPE_FINDER_UPSTREAM_TIMEOUT")):
        try:
            payload["upstream_timeout"] = float(timeout)
        except ValueError:
            pass
    if (debounce_ms := _env("RECIPE_FINDER_DEBOUNCE_MS")):
        try:
            payload["debounce_ms"] = int(debounce_ms)
        except ValueError:
            pass
    if (log_level := _env("RECIPE_FINDER_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("RECIPE_FINDER_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("RECIPE_FINDER_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
