# path: transit-itinerary-api/itinerary_api/core/config.py

from __future__ import annotations

from datetime import date
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ITINERARY_", env_file=".env", extra="ignore")

    data_dir: Path = DEFAULT_DATA_DIR
    # Day index 0 of the puzzle calendar
    game_epoch: date = date(2024, 1, 1)
    timezone: str = "America/New_York"
    log_level: str = "INFO"


settings = Settings()
