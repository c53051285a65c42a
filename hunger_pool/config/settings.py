"""
Hunger Pool - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and configures logging for the command loop.
"""

import logging
import sys
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Dice
    rng_seed: int | None = Field(default=None, ge=0)

    model_config = {
        "env_prefix": "HUNGER_POOL_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr so stdout only carries roll output."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
