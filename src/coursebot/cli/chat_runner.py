"""Interactive chat runner for the coursebot CLI."""

import uuid
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from coursebot.config.loader import ConfigLoader
from coursebot.config.models import CourseBotConfig
from coursebot.core.constants import InputHint
from coursebot.core.errors import ConfigurationError, RecognitionError
from coursebot.core.message_sink import MessageSink
from coursebot.observability.logging import setup_logging
from coursebot.runtime.bot import CourseBot, create_bot


class ConsoleMessageSink(MessageSink):
    """Sink that prints to rich console."""

    def __init__(self, console: Console):
        self.console = console

    async def send(
        self,
        text: str,
        speak: str | None = None,
        hint: InputHint = InputHint.ACCEPTING_INPUT,
    ) -> None:
        if hint == InputHint.IGNORING_INPUT:
            self.console.print(f"[bold blue]Bot > [/][dim]{escape(text)}[/]\n")
        else:
            self.console.print(f"[bold blue]Bot > [/]{escape(text)}\n")


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    config_path: Path | None = None
    conversation_id: str | None = None
    log_level: str | None = None
    debug: bool = False


class ChatRunner:
    """Interactive chat session runner.

    Encapsulates the setup, execution, and cleanup of an
    interactive chat session with the course bot.
    """

    def __init__(self, config: ChatConfig):
        """Initialize chat runner.

        Args:
            config: Chat configuration
        """
        self.config = config
        self.console = Console()
        self.bot: CourseBot | None = None
        self.sink = ConsoleMessageSink(self.console)
        self.conversation_id = config.conversation_id or f"cli_{uuid.uuid4().hex[:6]}"
        self._running = False

    def setup(self) -> None:
        """Load environment and config, then build the bot.

        Raises:
            ConfigurationError: If config is invalid
        """
        load_dotenv()

        bot_config = CourseBotConfig()
        if self.config.config_path is not None:
            try:
                bot_config = ConfigLoader.load(self.config.config_path)
            except ConfigurationError as e:
                self.console.print(f"[red]Invalid config: {e}[/]")
                raise

        level = self.config.log_level or ("DEBUG" if self.config.debug else bot_config.logging.level)
        setup_logging(level=level, json_file=bot_config.logging.json_file)

        self.bot = create_bot(bot_config)

    async def start(self) -> None:
        """Start the interactive session."""
        if self.bot is None:
            self.setup()

        self.console.print(f"Conversation: [green]{self.conversation_id}[/]")
        self.console.print("Type 'exit' or 'quit' to end session.\n")

        # An empty first turn makes the bot greet, like a member joining.
        await self._turn("")

        self._running = True
        while self._running:
            try:
                user_input = Prompt.ask("[bold green]You[/]")
            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if self._is_exit_command(user_input):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if not user_input.strip():
                continue

            await self._turn(user_input)

    async def _turn(self, text: str) -> None:
        if self.bot is None:
            raise ConfigurationError("ChatRunner.setup() must run before a turn")
        try:
            await self.bot.on_message(self.conversation_id, text, self.sink)
        except RecognitionError as e:
            if self.config.debug:
                self.console.print_exception()
            else:
                self.console.print(f"[red]The bot encountered an error: {e}[/]")

    def _is_exit_command(self, user_input: str) -> bool:
        """Check if input is an exit command."""
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")


async def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    runner = ChatRunner(config)
    runner.setup()
    await runner.start()
