"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Training Schedule Engine"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Training Schedule Engine contributors"]
    PROJECT_URL: str = "https://github.com/training-schedule/engine"

    DEBUG: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Full URL override (takes precedence over the individual parts)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Scheduling — weekday integers, 0=Sunday ... 6=Saturday
    DEFAULT_TRAINING_DAYS: List[int] = [1, 2, 4, 5]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("DEFAULT_TRAINING_DAYS")
    @classmethod
    def _check_weekdays(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("DEFAULT_TRAINING_DAYS must not be empty")
        for day in value:
            if day < 0 or day > 6:
                raise ValueError(f"Invalid weekday {day}: expected 0 (Sunday) to 6 (Saturday)")
        return value

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
