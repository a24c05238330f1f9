"""
SHIFTCRACK - Configuration Management
Centralized configuration using pydantic-settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None  # e.g. shiftcrack.log to keep a rotating debug log

    # Frequency analysis
    TOP_CANDIDATES: int = 5  # rows shown by `analyze`; 0 shows all 26
    ANALYSIS_WORKERS: int = 1  # >1 scores the 26 shifts on a thread pool
    PREVIEW_CHARS: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
