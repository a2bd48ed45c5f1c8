"""
state_reducers.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the opt-in logging setup.
- Offer a cached settings instance.

Reducer behaviour never depends on these settings; only log output does.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STATE_REDUCERS_", case_sensitive=False)

    # "dev" renders human-readable console lines, anything else JSON.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "state-reducers"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests that override env vars must call `get_settings.cache_clear()` first.
