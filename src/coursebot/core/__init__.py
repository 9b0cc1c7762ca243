"""Core domain types and infrastructure."""

from coursebot.core.constants import DialogReason, DialogTurnStatus, InputHint
from coursebot.core.message_sink import BufferedMessageSink, MessageSink, OutboundMessage
from coursebot.core.types import (
    ConversationState,
    DialogInstance,
    DialogTurnResult,
    PromptOptions,
    WaterfallStep,
)

__all__ = [
    "ConversationState",
    "DialogInstance",
    "DialogTurnResult",
    "DialogTurnStatus",
    "DialogReason",
    "InputHint",
    "PromptOptions",
    "WaterfallStep",
    "MessageSink",
    "BufferedMessageSink",
    "OutboundMessage",
]
