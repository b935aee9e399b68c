"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    recipes_path: Path = Field(
        default=Path("./data/recipes.json"),
        description="JSON recipe catalog location.",
    )
    min_keyword_length: int = Field(
        default=3,
        ge=0,
        description="Keywords shorter than this do not filter the catalog.",
    )
    query_cache_size: int = Field(
        default=128,
        ge=0,
        description="Maximum number of memoized query results (0 disables caching).",
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
                payload[key.strip()] = raw_value.strip()
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
    if (recipes_path := _env("PETITSPLATS_RECIPES_PATH")):
        payload["recipes_path"] = Path(recipes_path)
    if (min_keyword_length := _env("PETITSPLATS_MIN_KEYWORD_LENGTH")):
        try:
            payload["min_keyword_length"] = int(min_keyword_length)
        except ValueError:
            pass
    if (cache_size := _env("PETITSPLATS_QUERY_CACHE_SIZE")):
        try:
            payload["query_cache_size"] = int(cache_size)
        except ValueError:
            pass
    if (log_level := _env("PETITSPLATS_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("PETITSPLATS_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("PETITSPLATS_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
