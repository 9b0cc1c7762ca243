"""Shared fixtures for coursebot tests.

Uses FakeRecognizer for deterministic, fast tests without LLM API calls.
"""

from typing import Any

import pytest

from coursebot.core.message_sink import BufferedMessageSink
from coursebot.core.turn import TurnContext
from coursebot.core.types import ConversationState, DialogTurnResult
from coursebot.dialogs.context import DialogContext, DialogSet
from coursebot.du.models import IntentResult


class FakeRecognizer:
    """Deterministic stand-in for ModuleQueryRecognizer.

    Looks the utterance up in ``results`` (lower-cased), returning the
    'None' intent for anything else. Records every query.
    """

    def __init__(self, results: dict[str, IntentResult] | None = None, configured: bool = True):
        self.results = {k.lower(): v for k, v in (results or {}).items()}
        self.is_configured = configured
        self.queries: list[str] = []

    def configured(self) -> bool:
        return self.is_configured

    async def query(self, text: str) -> IntentResult:
        self.queries.append(text)
        return self.results.get(text.lower(), IntentResult.none())


class DialogDriver:
    """Runs turns against a DialogSet with one conversation's state."""

    def __init__(self, dialogs: DialogSet, conversation_id: str = "test-conversation"):
        self.dialogs = dialogs
        self.conversation_id = conversation_id
        self.state = ConversationState()
        self.sink = BufferedMessageSink()

    def context(self, text: str = "") -> DialogContext:
        turn = TurnContext(conversation_id=self.conversation_id, text=text, sink=self.sink)
        return self.dialogs.create_context(turn, self.state)

    async def begin(self, dialog_id: str, options: dict[str, Any] | None = None) -> DialogTurnResult:
        return await self.context().begin_dialog(dialog_id, options)

    async def say(self, text: str) -> DialogTurnResult:
        return await self.context(text).continue_dialog()

    @property
    def stack_ids(self) -> list[str]:
        return [frame.dialog_id for frame in self.state.dialog_stack]


@pytest.fixture
def sink() -> BufferedMessageSink:
    return BufferedMessageSink()


@pytest.fixture
def make_recognizer():
    """Factory for FakeRecognizer instances."""

    def _make(results: dict[str, IntentResult] | None = None, configured: bool = True):
        return FakeRecognizer(results, configured=configured)

    return _make


@pytest.fixture
def make_driver():
    """Factory for DialogDriver instances."""

    def _make(dialogs: DialogSet) -> DialogDriver:
        return DialogDriver(dialogs)

    return _make


@pytest.fixture
def course_results() -> dict[str, IntentResult]:
    """Recognizer answers for the utterances used across tests."""
    return {
        "how long is the course": IntentResult(top_intent="ask duration", score=0.95),
        "hello": IntentResult(top_intent="greetings", score=0.9),
        "how many units are in geometry": IntentResult(
            top_intent="ask units", entities={"module_type": "Geometry"}, score=0.9
        ),
        "how many units are there": IntentResult(top_intent="ask units", score=0.8),
        "book me a flight": IntentResult(top_intent="bookFlight", score=0.4),
    }
