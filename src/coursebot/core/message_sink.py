"""MessageSink interface for outbound message delivery.

This module defines the abstract interface and implementations for
delivering bot messages to the user during dialog execution.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from coursebot.core.constants import InputHint


@dataclass(frozen=True)
class OutboundMessage:
    """A message sent by the bot."""

    text: str
    speak: str | None = None
    hint: InputHint = InputHint.ACCEPTING_INPUT


class MessageSink(ABC):
    """Interface for sending messages to the user (DIP)."""

    @abstractmethod
    async def send(
        self,
        text: str,
        speak: str | None = None,
        hint: InputHint = InputHint.ACCEPTING_INPUT,
    ) -> None:
        """Send a message to the user immediately."""
        ...


class BufferedMessageSink(MessageSink):
    """Buffers messages for testing or batch delivery."""

    def __init__(self) -> None:
        self.outbound: list[OutboundMessage] = []

    async def send(
        self,
        text: str,
        speak: str | None = None,
        hint: InputHint = InputHint.ACCEPTING_INPUT,
    ) -> None:
        """Append message to buffer."""
        self.outbound.append(OutboundMessage(text=text, speak=speak, hint=hint))

    @property
    def messages(self) -> list[str]:
        """Text of every buffered message, in order."""
        return [m.text for m in self.outbound]

    def clear(self) -> None:
        """Clear the message buffer."""
        self.outbound.clear()
