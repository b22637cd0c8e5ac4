"""Application settings using Pydantic Settings."""

from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def find_and_load_env_file() -> Optional[str]:
    """Find and load a .env file in the current directory or its parents."""
    current = Path.cwd().resolve()
    # Current directory and up to 3 levels up
    for _ in range(4):
        env_path = current / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
            return str(env_path)
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


class Settings(BaseSettings):
    """Application configuration settings."""

    # Logging Configuration
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Validation Configuration
    anomaly_seed: Optional[int] = None  # fixes the anomaly flavor text sequence

    # Scenario Configuration
    scenarios_file: Optional[Path] = None  # overrides the packaged catalog
    default_problem_set: str = "university"

    model_config = SettingsConfigDict(
        env_prefix="SCHEMABUILDER_",
        env_file=None,  # loaded manually with dotenv
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    def __init__(self, **kwargs):
        """Initialize settings and create the log directory if needed."""
        find_and_load_env_file()
        super().__init__(**kwargs)
        if self.log_file:
            self.log_file = Path(self.log_file)
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
