"""Runtime: conversation state and the bot that drives turns."""

from coursebot.runtime.bot import CourseBot, create_bot
from coursebot.runtime.conversation_manager import ConversationManager

__all__ = ["ConversationManager", "CourseBot", "create_bot"]
