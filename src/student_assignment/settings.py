"""
student_assignment.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `STUDENT_ASSIGNMENT_`).
    Defaults are safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="STUDENT_ASSIGNMENT_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "student-assignment"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = Field(default="sqlite+aiosqlite:///./student_assignment.db", repr=False)

    # Pagination
    default_page_size: int = Field(default=10, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The database URL is hidden from repr because real deployments embed credentials in it.
