"""Configuration module for coursebot."""

from coursebot.config.loader import ConfigLoader
from coursebot.config.models import (
    ConfirmationConfig,
    CourseBotConfig,
    CourseConfig,
    LoggingConfig,
    MessagesConfig,
    RecognizerConfig,
)

__all__ = [
    "ConfigLoader",
    "CourseBotConfig",
    "CourseConfig",
    "ConfirmationConfig",
    "LoggingConfig",
    "MessagesConfig",
    "RecognizerConfig",
]
