"""Configuration models for coursebot.

Defined using Pydantic for validation and YAML serialization support.
Every field has a default so the bot runs without a config file.
"""

import os

from pydantic import BaseModel, Field


class RecognizerConfig(BaseModel):
    """Intent recognizer (NLU) configuration."""

    provider: str = Field(default="openai", description="Model provider (openai, anthropic, etc.)")
    model: str | None = Field(default=None, description="Model identifier, e.g. gpt-4o-mini")
    api_key_env: str = Field(
        default="OPENAI_API_KEY", description="Environment variable holding the provider API key"
    )
    temperature: float = Field(default=0.0, description="Temperature for generation")
    use_reasoning: bool = Field(default=False, description="Use ChainOfThought for reasoning")
    intents: list[str] = Field(
        default_factory=lambda: ["ask duration", "ask units", "greetings"],
        description="Intent labels the recognizer may return",
    )

    @property
    def is_configured(self) -> bool:
        """True when a model is named and its API key is present."""
        return bool(self.model) and bool(os.environ.get(self.api_key_env))

    @property
    def model_id(self) -> str:
        """Model id in dspy's provider/model form."""
        return f"{self.provider}/{self.model}"


class CourseConfig(BaseModel):
    """Facts about the course the bot answers for."""

    name: str = Field(default="Mathematics", description="Course name")
    grade: str = Field(default="Grade 9", description="Grade level")
    duration_hours: int = Field(default=110, ge=1, description="Suggested total study hours")


class MessagesConfig(BaseModel):
    """User-facing message templates."""

    welcome: str = Field(
        default=(
            "Hi! I'm the course assistant bot for {grade}. What can I help you with?\n"
            'You can say things like, "estimated duration to complete course contents", '
            '"How many units are in the course", '
            "\"What's the learning objective of this course?\""
        )
    )
    restart: str = Field(default="What else can I do for you?")
    recognizer_not_configured: str = Field(
        default=(
            "NOTE: the intent recognizer is not configured. To enable all capabilities, "
            "set a recognizer model and its API key."
        )
    )
    module_prompt: str = Field(default="For what module are you inquiring about?")
    confirm_template: str = Field(
        default="Please confirm your query is for the {module} module. Is this correct?"
    )
    acknowledgment: str = Field(default="I believe I have answered your question.")
    duration_template: str = Field(
        default=(
            "To achieve all of the learning outcomes in the {grade} {course} course, "
            "I suggest a total of {hours} hours."
        )
    )
    greeting: str = Field(default="Hi there!")
    not_understood_template: str = Field(
        default="Sorry, I didn't get that. Please try asking in a different way (intent was {intent})"
    )
    help: str = Field(
        default=(
            "I can tell you how long the course takes and help with questions about its "
            'modules. Say "cancel" at any time to start over.'
        )
    )
    cancel: str = Field(default="Cancelling...")


class ConfirmationConfig(BaseModel):
    """Yes/no token sets for the confirmation prompt."""

    yes_tokens: list[str] = Field(
        default_factory=lambda: ["yes", "y", "yeah", "yep", "sure", "ok", "okay", "correct", "true"]
    )
    no_tokens: list[str] = Field(
        default_factory=lambda: ["no", "n", "nope", "nah", "incorrect", "wrong", "false"]
    )
    retry_template: str = Field(
        default="{prompt} (yes or no)", description="Message template for retry"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    json_file: str | None = Field(default=None, description="Optional rotating JSON log file")


class CourseBotConfig(BaseModel):
    """Root configuration."""

    recognizer: RecognizerConfig = Field(default_factory=RecognizerConfig)
    course: CourseConfig = Field(default_factory=CourseConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    confirmation: ConfirmationConfig = Field(default_factory=ConfirmationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
