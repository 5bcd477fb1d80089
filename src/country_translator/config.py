"""Runtime settings and the package logger."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("country_translator")


class Settings(BaseSettings):
    """Settings loaded from COUNTRY_TRANSLATOR_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="COUNTRY_TRANSLATOR_",
        env_file=".env",
        extra="ignore",
    )

    # Resource names resolve against the packaged data directory first
    translations_resource: str = "sample.json"
    language_codes_resource: str = "language-codes.txt"
    default_translator: str = "json"
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the package logger, once."""
    level = level or get_settings().log_level
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
