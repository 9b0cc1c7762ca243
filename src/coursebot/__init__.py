"""coursebot - a course assistant chatbot.

A waterfall dialog asks what the student wants to know, recognizes the
intent with a language model, answers canned questions about the course and
confirms which module a question is about.

Quick start:
    from coursebot import BufferedMessageSink, create_bot

    bot = create_bot()
    sink = BufferedMessageSink()
    await bot.on_message("conversation-1", "hi", sink)
"""

__version__ = "0.1.0"

from coursebot.config import ConfigLoader, CourseBotConfig
from coursebot.core.errors import (
    ConfigurationError,
    CourseBotError,
    DialogStackError,
    RecognitionError,
)
from coursebot.core.message_sink import BufferedMessageSink, MessageSink
from coursebot.du import IntentResult, ModuleQueryRecognizer
from coursebot.runtime import ConversationManager, CourseBot, create_bot

__all__ = [
    "__version__",
    "ConfigLoader",
    "CourseBotConfig",
    "CourseBot",
    "create_bot",
    "ConversationManager",
    "MessageSink",
    "BufferedMessageSink",
    "IntentResult",
    "ModuleQueryRecognizer",
    "CourseBotError",
    "ConfigurationError",
    "DialogStackError",
    "RecognitionError",
]
