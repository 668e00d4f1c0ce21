"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the board runs with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Validation limits and contract strings are NOT settings (see core/domain_types)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - DISCUSSION_ prefix: avoids clashing with host environment variables
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="DISCUSSION_", case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    # Console
    default_viewer: str = "guest"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        v = str(v).strip().lower()
        if v not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {_LOG_FORMATS}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
