"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "wordbook API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Word storage
    STORAGE_BACKEND: Literal["file", "memory"] = "file"
    DATA_DIR: Path = DEFAULT_DATA_DIR
    WORDS_FILE: str = "words.json"
    STORAGE_KEY: str = "vocabularyWords"

    # Quiz
    QUIZ_RANDOM_SIZE: int = 10

    # Export
    EXPORT_FILENAME: str = "vocabulary_words.txt"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def words_path(self) -> Path:
        """Full path of the word list file."""
        return self.DATA_DIR / self.WORDS_FILE

    @field_validator("QUIZ_RANDOM_SIZE", mode="after")
    @classmethod
    def validate_quiz_random_size(cls, value: int) -> int:
        """A random quiz needs at least one word."""
        if value < 1:
            msg = "QUIZ_RANDOM_SIZE must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("STORAGE_KEY", "WORDS_FILE", mode="after")
    @classmethod
    def strip_non_empty(cls, value: str) -> str:
        """Strip whitespace and reject empty names."""
        value = value.strip()
        if not value:
            msg = "must not be empty"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
