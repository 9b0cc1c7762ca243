"""Core constants and enums."""

from enum import Enum


class DialogTurnStatus(str, Enum):
    """What the dialog stack did with one input event."""

    EMPTY = "empty"
    WAITING = "waiting"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class InputHint(str, Enum):
    """Tells the host whether a reply is expected after a message."""

    ACCEPTING_INPUT = "acceptingInput"
    EXPECTING_INPUT = "expectingInput"
    IGNORING_INPUT = "ignoringInput"


class DialogReason(str, Enum):
    """Why a dialog step is being run."""

    BEGIN = "begin"
    CONTINUE = "continue"
    NEXT = "next"
    END = "end"


# Reserved interruption keywords, matched against the whole utterance.
CANCEL_KEYWORD = "cancel"
HELP_KEYWORD = "help"
