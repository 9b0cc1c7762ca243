"""Conversation state management for multi-user dialogues"""

import logging

from coursebot.core.turn import TurnContext
from coursebot.core.types import ConversationState

logger = logging.getLogger(__name__)


class ConversationManager:
    """Keeps one ConversationState per conversation id, in memory.

    Durable stores can replace this by providing the same ``get``/``save``
    coroutines.
    """

    def __init__(self) -> None:
        self._states: dict[str, ConversationState] = {}

    async def get_or_create_state(self, conversation_id: str) -> ConversationState:
        """
        Get existing state or create new one.

        Args:
            conversation_id: Unique identifier for the conversation

        Returns:
            ConversationState instance (existing or new)
        """
        state = self._states.get(conversation_id)
        if state is None:
            logger.debug(f"Creating new state for conversation {conversation_id}")
            state = ConversationState()
            self._states[conversation_id] = state
        return state

    async def get(self, turn_context: TurnContext) -> ConversationState:
        """State accessor used by the turn driver."""
        return await self.get_or_create_state(turn_context.conversation_id)

    async def save_state(self, conversation_id: str, state: ConversationState) -> None:
        """
        Save conversation state.

        Args:
            conversation_id: Unique identifier for the conversation
            state: ConversationState to save
        """
        self._states[conversation_id] = state
        logger.debug(f"Saved state for conversation {conversation_id} (depth={state.depth})")

    async def reset(self, conversation_id: str) -> None:
        """Forget a conversation."""
        self._states.pop(conversation_id, None)
