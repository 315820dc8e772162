"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings come from FIREWORKS_* environment variables or a .env file
    - get_settings() is cached (lru_cache): single instance per process
    - Domain constants (threshold, defaults, discount) are NOT settings;
      they live in fireworks.core.domain_types

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - Defaults provided for everything: works out-of-the-box with no environment
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="FIREWORKS_", case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept `debug`, ` Info ` etc. as well as upper case names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
