"""Observability module for coursebot."""

from coursebot.observability.logging import ContextLogger, ConversationAdapter, setup_logging

__all__ = ["ContextLogger", "ConversationAdapter", "setup_logging"]
