"""Application configuration settings."""

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Grade Track"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"

    # Key-value storage
    DATABASE_URL: str = "sqlite:///./gradetrack.db"
    STORAGE_KEY: str = "grade-track:exams"

    # Exams
    SEED_ON_EMPTY: bool = True
    EXAM_ID_PREFIX: str = "exam"
    EXPORT_FILENAME: str = "exams"
    SUGGESTION_LIMIT: int = 5

    @field_validator("STORAGE_KEY", "EXAM_ID_PREFIX", "EXPORT_FILENAME", mode="before")
    @classmethod
    def validate_not_blank(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be blank")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
