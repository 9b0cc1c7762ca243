"""Tests for ConversationManager."""

import pytest

from coursebot.core.message_sink import BufferedMessageSink
from coursebot.core.turn import TurnContext
from coursebot.core.types import ConversationState, DialogInstance
from coursebot.runtime.conversation_manager import ConversationManager


@pytest.mark.asyncio
async def test_get_or_create_returns_same_state():
    manager = ConversationManager()

    first = await manager.get_or_create_state("c1")
    second = await manager.get_or_create_state("c1")

    assert first is second
    assert first.depth == 0


@pytest.mark.asyncio
async def test_conversations_are_independent():
    manager = ConversationManager()
    state = await manager.get_or_create_state("c1")
    state.dialog_stack.append(DialogInstance("main_dialog"))

    other = await manager.get_or_create_state("c2")

    assert other.depth == 0


@pytest.mark.asyncio
async def test_get_uses_turn_conversation_id():
    manager = ConversationManager()
    saved = ConversationState(context={"seen": True})
    await manager.save_state("c1", saved)
    turn = TurnContext(conversation_id="c1", text="", sink=BufferedMessageSink())

    assert await manager.get(turn) is saved


@pytest.mark.asyncio
async def test_reset_forgets_conversation():
    manager = ConversationManager()
    state = await manager.get_or_create_state("c1")
    state.dialog_stack.append(DialogInstance("main_dialog"))

    await manager.reset("c1")

    assert (await manager.get_or_create_state("c1")).depth == 0
