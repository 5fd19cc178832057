"""Logging setup for neo-assets.

Level, format and third-party noise are read from the environment with the
same settings machinery as the service, then applied through
``logging.config.dictConfig``.
"""

import logging
import logging.config
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# LOG_VERBOSITY modes, used when LOG_LEVEL is not set
VERBOSITY_LEVELS = {
    "QUIET": "ERROR",
    "NORMAL": "WARNING",
    "VERBOSE": "INFO",
    "DEBUG": "DEBUG",
}

LOG_FORMATS = {
    "simple": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d] %(message)s",
    "json": '{"ts":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","msg":"%(message)s"}',
}

# Storage and imaging libraries log every request at INFO/DEBUG
QUIET_LIBRARIES = ("botocore", "boto3", "s3transfer", "urllib3", "PIL")


class LoggingSettings(BaseSettings):
    """Logging environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    log_level: Optional[str] = Field(default=None, alias="LOG_LEVEL")
    log_verbosity: str = Field(default="NORMAL", alias="LOG_VERBOSITY")
    log_format: str = Field(default="simple", alias="LOG_FORMAT")
    enable_sql_logging: bool = Field(default=False, alias="ENABLE_SQL_LOGGING")

    @property
    def effective_level(self) -> str:
        """LOG_LEVEL if valid, else the level of LOG_VERBOSITY, else WARNING."""
        if self.log_level and self.log_level.upper() in LEVELS:
            return self.log_level.upper()
        return VERBOSITY_LEVELS.get(self.log_verbosity.upper(), "WARNING")

    @property
    def format_string(self) -> str:
        return LOG_FORMATS.get(self.log_format.lower(), LOG_FORMATS["simple"])


def build_logging_config(settings: Optional[LoggingSettings] = None) -> Dict[str, Any]:
    """Build the dictConfig mapping."""
    settings = settings or LoggingSettings()
    level = settings.effective_level

    quiet = {name: "ERROR" for name in QUIET_LIBRARIES}
    if not settings.enable_sql_logging:
        quiet["asyncpg"] = "WARNING"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "assets": {"format": settings.format_string, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "assets",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level, "handlers": ["stdout"]},
        "loggers": {
            name: {"level": library_level, "handlers": ["stdout"], "propagate": False}
            for name, library_level in quiet.items()
        },
    }


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Apply logging configuration. Called on package import."""
    config = build_logging_config(settings)
    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug(f"Logging configured at {config['root']['level']}")
