"""Settings and logging setup for framerev.

Settings are read from environment variables prefixed with ``FRAMEREV_``
(or a local ``.env`` file). They only configure logging; record
validation and predicates never read them.
"""

import logging
import sys
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


class Settings(BaseSettings):
    """framerev settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FRAMEREV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (cached; use get_settings.cache_clear() to reload)."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the ``framerev`` logger.

    Only the package logger is touched; the root logger is left to the
    host application.
    """
    level_name = (level or get_settings().log_level).upper()
    logger = logging.getLogger("framerev")
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Remove handlers from earlier calls to prevent duplicates
    for handler in list(logger.handlers):
        if getattr(handler, "_framerev_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._framerev_handler = True
    logger.addHandler(handler)
    return logger
