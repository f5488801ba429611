"""Configuration management for schemascan.

Loads environment variables using pydantic-settings for type-safe configuration.
Only the ambient concerns (logging, CLI input handling) are configurable; the
classifier and extractors have fixed behavior.
"""

import os
from functools import lru_cache
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_LOADED = False
_ENV_LOCK = Lock()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _resolve_env_file() -> str | None:
    """Locate the .env file regardless of the current working directory.

    Preference order:
        1. SCHEMASCAN_ENV_FILE environment variable (explicit override)
        2. Current working directory (common for local runs)
        3. Ancestors of this file (covers running from a checkout)
    """
    override = os.getenv("SCHEMASCAN_ENV_FILE")
    if override:
        override_path = Path(override).expanduser()
        if override_path.is_file():
            return str(override_path)

    cwd_candidate = Path.cwd() / ".env"
    if cwd_candidate.is_file():
        return str(cwd_candidate)

    for parent in Path(__file__).resolve().parents:
        candidate = parent / ".env"
        if candidate.is_file():
            return str(candidate)

    return None


_DEFAULT_ENV_FILE = _resolve_env_file()


def ensure_env_loaded() -> None:
    """Load environment variables from disk exactly once."""
    global _ENV_LOADED

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        env_path = _DEFAULT_ENV_FILE or _resolve_env_file()
        if env_path:
            load_dotenv(env_path, override=False)

        _ENV_LOADED = True


ensure_env_loaded()


class SchemaScanConfig(BaseSettings):
    """Main configuration class for schemascan.

    Every field can be set through a ``SCHEMASCAN_``-prefixed environment
    variable, e.g. ``SCHEMASCAN_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMASCAN_",
        env_file=_DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Observability ==========
    log_level: str = "INFO"
    log_json: bool = True

    # ========== CLI Input ==========
    input_encoding: str = "utf-8"
    max_input_bytes: int = Field(default=10 * 1024 * 1024, ge=1)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_config() -> SchemaScanConfig:
    """Return cached Settings instance (process-local).

    Returns:
        SchemaScanConfig: The configuration instance loaded from environment variables.
    """
    return SchemaScanConfig()


# Export convenience accessors
__all__ = ["LOG_LEVELS", "SchemaScanConfig", "ensure_env_loaded", "get_config"]
