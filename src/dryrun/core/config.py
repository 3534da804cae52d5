"""Dryrun settings and logging setup."""

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

ENV_LOG_LEVEL = "DRYRUN_LOG_LEVEL"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, computed once at startup."""

    log_level: int = logging.WARNING
    # Unrecognized DRYRUN_LOG_LEVEL value, reported once logging is up
    rejected_level: str = ""


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment. An unknown level falls back to WARNING."""
    if environ is None:
        environ = os.environ

    raw = environ.get(ENV_LOG_LEVEL, "").strip().lower()
    if not raw:
        return Settings()
    if raw not in LOG_LEVELS:
        return Settings(rejected_level=raw)
    return Settings(log_level=LOG_LEVELS[raw])


# === Logging ===


def configure_logging(settings: Settings) -> None:
    """Configure structlog to write key/value lines to stderr. Call once at startup."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
