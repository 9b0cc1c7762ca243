"""Main CLI entry point for coursebot"""

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from coursebot import __version__
from coursebot.cli.commands import chat as chat_module
from coursebot.config.loader import ConfigLoader
from coursebot.config.models import CourseBotConfig
from coursebot.core.errors import ConfigurationError

app = typer.Typer(
    name="coursebot",
    help="Course assistant bot",
    add_completion=False,
)

app.add_typer(chat_module.app, name="chat", help="Chat with the course bot in the terminal")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"coursebot {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Course assistant bot"""


@app.command("check")
def check(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to coursebot.yaml or config directory"
    ),
) -> None:
    """Validate the config and report whether the intent recognizer is configured."""
    console = Console()
    load_dotenv()

    try:
        bot_config = ConfigLoader.load(config) if config is not None else CourseBotConfig()
    except ConfigurationError as e:
        console.print(f"[red]Invalid config: {e}[/]")
        raise typer.Exit(1)

    recognizer = bot_config.recognizer
    console.print(f"Course: {bot_config.course.grade} {bot_config.course.name}")
    if recognizer.is_configured:
        console.print(f"Recognizer: [green]{recognizer.model_id}[/]")
    else:
        console.print(
            f"Recognizer: [yellow]not configured[/] "
            f"(set recognizer.model and ${recognizer.api_key_env})"
        )


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
