"""
Settings for the trade finder API and CLI.

Values come from ``TRADE_FINDER_*`` environment variables or a ``.env``
file. Engine limits default to the trade finder's built-in constants.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRADE_FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_title: str = "Sleeper Trade Finder API"
    api_version: str = "0.1.0"
    api_description: str = "Dynasty trade discovery for Sleeper leagues"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # Sleeper
    sleeper_base_url: str = "https://api.sleeper.app/v1"
    sleeper_timeout: float = Field(default=30.0, gt=0)
    players_cache_ttl: int = Field(default=3600, ge=0, description="Seconds")
    default_season: int = 2026

    # Trade finder
    max_opportunities: int = Field(default=50, ge=1)
    per_opponent_quota: int = Field(default=3, ge=0)
    pick_years: int = Field(default=3, ge=1, description="Future rookie drafts to value")
    pick_rounds: int = Field(default=4, ge=1)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
