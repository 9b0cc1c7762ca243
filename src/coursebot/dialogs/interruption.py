"""Interruption handling for the reserved ``cancel`` and ``help`` keywords.

Runs before the stack sees the input on every turn. The stack is flat, so the
check covers child dialogs and prompts at any nesting depth.
"""

import logging

from coursebot.config.models import MessagesConfig
from coursebot.core.constants import CANCEL_KEYWORD, HELP_KEYWORD, InputHint
from coursebot.core.types import DialogTurnResult
from coursebot.dialogs.context import DialogContext

logger = logging.getLogger(__name__)


async def interrupt(dc: DialogContext, messages: MessagesConfig) -> DialogTurnResult | None:
    """Handle a reserved keyword.

    Returns a result when the input was consumed (cancel), None when the
    stack should still see it (help, or no keyword).
    """
    text = (dc.context.text or "").strip().lower()

    if text == CANCEL_KEYWORD:
        logger.info(f"Cancel requested at depth {len(dc.stack)}")
        await dc.context.send_activity(messages.cancel, messages.cancel, InputHint.IGNORING_INPUT)
        return await dc.cancel_all_dialogs()

    if text == HELP_KEYWORD:
        logger.info("Help requested")
        await dc.context.send_activity(messages.help, messages.help, InputHint.IGNORING_INPUT)

    return None


async def continue_with_interruptions(
    dc: DialogContext, messages: MessagesConfig
) -> DialogTurnResult:
    """Check for interruptions, then continue the active dialog."""
    interrupted = await interrupt(dc, messages)
    if interrupted is not None:
        return interrupted
    return await dc.continue_dialog()
