"""Configuration and logging setup for duview."""

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from USAGE_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="USAGE_")

    # Include files in listings. Only "false" turns this off.
    show_files: bool = True

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("show_files", mode="before")
    @classmethod
    def _parse_show_files(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() != "false"


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()


def configure_logging(settings: Settings, interactive: bool = False) -> None:
    """
    Set up the duview logger.

    Args:
        settings: Where and how much to log
        interactive: The TUI owns the terminal, so nothing goes to stderr
    """
    logger = logging.getLogger("duview")
    logger.setLevel(settings.log_level.upper())

    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler: logging.Handler
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file)
        handler.setFormatter(logging.Formatter(settings.log_format))
    elif not interactive:
        from rich.console import Console
        from rich.logging import RichHandler

        handler = RichHandler(console=Console(stderr=True), show_path=False)
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.propagate = False
