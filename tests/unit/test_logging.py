"""Tests for structured logging."""

import logging

from coursebot.observability.logging import ContextLogger, ConversationAdapter, setup_logging


def test_logging_setup():
    """Test logging configuration."""
    # Arrange & Act
    setup_logging(level="DEBUG")

    # Assert
    logger = logging.getLogger("coursebot")
    assert logger.level == logging.DEBUG


def test_logging_setup_info_level():
    """Test logging setup with INFO level."""
    # Arrange & Act
    setup_logging(level="INFO")

    # Assert
    logger = logging.getLogger("coursebot")
    assert logger.level == logging.INFO


def test_logging_setup_with_json_file(tmp_path):
    """Test that a JSON file handler is attached when requested."""
    # Arrange
    log_file = tmp_path / "coursebot.log"

    # Act
    setup_logging(level="INFO", json_file=str(log_file))
    logging.getLogger("coursebot.test").info("hello", extra={"conversation_id": "c1"})
    for handler in logging.getLogger("coursebot").handlers:
        handler.flush()

    # Assert
    content = log_file.read_text(encoding="utf-8")
    assert '"message": "hello"' in content
    assert '"conversation_id": "c1"' in content

    setup_logging(level="INFO")


def test_context_logger():
    """Test ContextLogger with context."""
    # Arrange
    setup_logging(level="INFO")
    context_logger = ContextLogger("coursebot.test")

    # Act
    adapter = context_logger.with_context(conversation_id="c1", dialog="main_dialog")

    # Assert
    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra == {"conversation_id": "c1", "dialog": "main_dialog"}


def test_context_is_prefixed_and_kept_as_extra():
    """
    GIVEN an adapter bound to a conversation id
    WHEN a message is processed with extra fields of its own
    THEN the console text carries the context and extra keeps both
    """
    # Arrange
    adapter = ContextLogger("coursebot.test").with_context(conversation_id="c1")

    # Act
    msg, kwargs = adapter.process("Turn finished", {"extra": {"status": "waiting"}})

    # Assert
    assert isinstance(adapter, ConversationAdapter)
    assert msg == "[conversation_id=c1] Turn finished"
    assert kwargs["extra"] == {"conversation_id": "c1", "status": "waiting"}


def test_context_reaches_json_file(tmp_path):
    """Test that adapter context lands as JSON fields."""
    # Arrange
    log_file = tmp_path / "coursebot.log"
    setup_logging(level="INFO", json_file=str(log_file))
    adapter = ContextLogger("coursebot.test").with_context(conversation_id="c9")

    # Act
    adapter.info("hello")
    for handler in logging.getLogger("coursebot").handlers:
        handler.flush()

    # Assert
    content = log_file.read_text(encoding="utf-8")
    assert '"conversation_id": "c9"' in content
    assert "[conversation_id=c9] hello" in content

    setup_logging(level="INFO")
