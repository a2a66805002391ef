"""
Configuration settings for the employee roster console.

Uses Pydantic Settings to load environment variables (or a local `.env`) for
the backing roster file, listing defaults, category validation and logging.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Roster
    data_file: Path = Field(Path("Applicants_Form.txt"), alias="ROSTER_DATA_FILE")
    top_n: int = Field(20, alias="ROSTER_TOP_N", ge=0)
    strict_categories: bool = Field(False, alias="ROSTER_STRICT_CATEGORIES")
    random_seed: Optional[int] = Field(None, alias="ROSTER_RANDOM_SEED")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
