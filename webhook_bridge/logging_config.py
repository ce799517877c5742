import logging
import logging.config

from .constants import DEBUG_MODE

_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}


def build_logging_config(level: str) -> dict:
    resolved = "DEBUG" if DEBUG_MODE else _LEVELS.get((level or "").lower(), "INFO")
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": resolved,
            "handlers": ["console"],
        },
    }


def setup_logging(level: str) -> None:
    logging.config.dictConfig(build_logging_config(level))
