"""Chat command for interactive sessions."""

import asyncio
from pathlib import Path

import typer

from coursebot.core.errors import CourseBotError

app = typer.Typer(help="Start interactive chat with the course bot")


@app.callback(invoke_without_command=True)
def run_chat(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to coursebot.yaml or config directory"
    ),
    conversation_id: str | None = typer.Option(
        None, "--conversation", "-u", help="Conversation ID"
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override the log level"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
) -> None:
    """Start interactive chat session."""
    from coursebot.cli.chat_runner import ChatConfig, run_chat_session

    chat_config = ChatConfig(
        config_path=config,
        conversation_id=conversation_id,
        log_level=log_level,
        debug=debug,
    )

    try:
        asyncio.run(run_chat_session(chat_config))
    except KeyboardInterrupt:
        pass
    except CourseBotError as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)
