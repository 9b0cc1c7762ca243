"""Structured logging configuration for coursebot."""

import logging
import logging.config
from typing import Any


def setup_logging(level: str = "INFO", json_file: str | None = None) -> None:
    """
    Configure structured logging for coursebot.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_file: Optional path of a rotating JSON log file
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "coursebot": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if json_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": json_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "level": level,
        }
        config["loggers"]["coursebot"]["handlers"].append("file")

    logging.config.dictConfig(config)


class ConversationAdapter(logging.LoggerAdapter):
    """Prefixes messages with ``[key=value ...]`` and passes the context as ``extra``.

    The prefix makes the context visible on the console; the JSON handler
    also gets each key as its own field.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        tags = " ".join(f"{k}={v}" for k, v in (self.extra or {}).items())
        return (f"[{tags}] {msg}" if tags else msg), kwargs


class ContextLogger:
    """Module logger that hands out per-conversation adapters."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> ConversationAdapter:
        return ConversationAdapter(self.logger, context)
