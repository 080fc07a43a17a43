"""Pomodoro timer CLI."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from pomodoro_timer import __version__

from .config import load_config, write_config_template
from .constants import INTERRUPTED_EXIT_CODE
from .core import process_arguments, run_timer
from .errors import ConfigError
from .logging import configure_logging
from .output import OutputContext

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pomodoro-timer {__version__}")
        raise typer.Exit()


def _write_config_callback(value: Path | None) -> None:
    """Write a config template and exit."""
    if value is not None:
        path = write_config_template(value)
        typer.echo(f"Created config template: {path}")
        raise typer.Exit()


app = typer.Typer(
    name="pomodoro-timer",
    help="Pomodoro interval timer",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True},
    epilog="Timer commands: /S index, /T m m m, /H (or /?) for the full list.",
)
def main(
    tokens: list[str] | None = typer.Argument(
        None,
        help="Timer commands, e.g. /T 50 10 30 /S 2",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML file with default durations",
    ),
    write_config: Path | None = typer.Option(
        None,
        "--write-config",
        callback=_write_config_callback,
        is_eager=True,
        help="Write a config template to PATH and exit",
    ),
) -> None:
    """Cycle through work and rest intervals with a per-minute countdown."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    ctx = OutputContext(console=Console(no_color=no_color))

    try:
        config = load_config(config_path)
    except ConfigError as e:
        ctx.print(f"Error: {e}", style="red")
        raise typer.Exit(1) from None

    config = process_arguments(tokens or [], config, ctx)
    logger.debug(f"Effective config: {config.model_dump()}")

    try:
        run_timer(config, ctx)
    except KeyboardInterrupt:
        ctx.print("\nTimer stopped.", style="yellow")
        raise typer.Exit(INTERRUPTED_EXIT_CODE) from None


if __name__ == "__main__":
    app()
