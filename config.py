# config.py
"""
Konfigurasi aplikasi dengan pydantic-settings.

Nilai diambil dari environment (prefix WARIS_) atau file .env di root repo.
"""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).resolve().parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WARIS_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    APP_TITLE: str = "Hindu Inheritance Calculator"
    APP_DESCRIPTION: str = (
        "API untuk pembagian harta waris sederhana (tidak mengikat secara hukum)."
    )

    # Default: SQLite in-memory, data hilang saat proses berhenti
    DATABASE_URL: str = Field(default="sqlite://", description="URL database sesi")
    SQL_ECHO: bool = False

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",  # Alamat frontend Next.js
    ]

    LOG_LEVEL: str = "INFO"
    CURRENCY_SYMBOL: str = "₹"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
