"""Core type definitions: frames, conversation state and turn results."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from coursebot.core.constants import DialogTurnStatus

if TYPE_CHECKING:
    from coursebot.dialogs.waterfall import WaterfallStepContext


@dataclass
class DialogInstance:
    """One activation record on the dialog stack."""

    dialog_id: str
    step_index: int = 0
    options: dict[str, Any] = field(default_factory=dict)
    state: dict[str, Any] = field(default_factory=dict)


@dataclass
class ConversationState:
    """Per-conversation state owned by the host between turns."""

    dialog_stack: list[DialogInstance] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def depth(self) -> int:
        return len(self.dialog_stack)


@dataclass(frozen=True)
class DialogTurnResult:
    """Outcome of one pass through the dialog stack."""

    status: DialogTurnStatus
    result: Any = None

    @classmethod
    def empty(cls) -> "DialogTurnResult":
        return cls(DialogTurnStatus.EMPTY)

    @classmethod
    def waiting(cls) -> "DialogTurnResult":
        return cls(DialogTurnStatus.WAITING)

    @classmethod
    def complete(cls, result: Any = None) -> "DialogTurnResult":
        return cls(DialogTurnStatus.COMPLETE, result)

    @classmethod
    def cancelled(cls) -> "DialogTurnResult":
        return cls(DialogTurnStatus.CANCELLED)


@dataclass
class PromptOptions:
    """What a prompt shows initially and on invalid input."""

    prompt: str
    speak: str | None = None
    retry_prompt: str | None = None


WaterfallStep = Callable[["WaterfallStepContext"], Awaitable[DialogTurnResult]]
"""A single waterfall step: receives the step context, returns a turn result."""
