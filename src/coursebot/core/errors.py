"""Core interaction errors."""


class CourseBotError(Exception):
    """Base class for all coursebot errors."""

    pass


class ConfigurationError(CourseBotError):
    """Raised when a required collaborator or config file is missing or invalid."""


class DialogStackError(CourseBotError):
    """Raised when dialog stack operations fail."""

    pass


class RecognitionError(CourseBotError):
    """Raised when the intent recognizer cannot produce a result."""

    pass
