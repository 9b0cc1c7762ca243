"""Per-turn context handed to the dialog stack."""

import logging
from dataclasses import dataclass, field

from coursebot.core.constants import InputHint
from coursebot.core.message_sink import MessageSink

logger = logging.getLogger(__name__)


@dataclass
class TurnContext:
    """One inbound message and the channel to answer it on."""

    conversation_id: str
    text: str
    sink: MessageSink
    sent_count: int = field(default=0, init=False)

    async def send_activity(
        self,
        text: str,
        speak: str | None = None,
        hint: InputHint = InputHint.ACCEPTING_INPUT,
    ) -> None:
        """Send one outbound message. Failures propagate to the host."""
        logger.debug(f"[{self.conversation_id}] send ({hint.value}): {text!r}")
        await self.sink.send(text, speak if speak is not None else text, hint)
        self.sent_count += 1
