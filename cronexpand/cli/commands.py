"""CLI commands for cronexpand."""

from __future__ import annotations

import json
import sys
from contextlib import suppress
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from cronexpand import __version__
from cronexpand.config.loader import get_config_path, load_config, save_config
from cronexpand.config.schema import Config
from cronexpand.cron import CronExpressionError, Schedule, parse_schedule

app = typer.Typer(
    name="cronexpand",
    help="cronexpand - expand cron expressions into the times they match",
    no_args_is_help=True,
)

console = Console()
_log_handler_id: int | None = None


def _setup_logging(verbose: bool) -> None:
    """Send package logs to stderr: warnings always, debug output when verbose."""
    global _log_handler_id
    if _log_handler_id is None:
        # loguru's default handler prints everything down to DEBUG
        with suppress(ValueError):
            logger.remove(0)
    else:
        logger.remove(_log_handler_id)
    _log_handler_id = logger.add(
        lambda message: sys.stderr.write(message),
        level="DEBUG" if verbose else "WARNING",
    )
    logger.enable("cronexpand")


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        console.print(f"cronexpand v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print debug logs to stderr.",
    ),
) -> None:
    """cronexpand CLI entry point."""
    _setup_logging(verbose)


def _load(config_path: Path | None) -> Config:
    config = load_config(config_path)
    if config.logging.verbose:
        _setup_logging(True)
    return config


def _parse_or_exit(expression: str) -> Schedule:
    """Parse the expression, printing the error and exiting with 1 on failure."""
    logger.debug("Parsing cron expression {!r}", expression)
    try:
        schedule = parse_schedule(expression)
    except CronExpressionError as e:
        logger.debug("Rejected with {}", type(e).__name__)
        console.print(f"[red]Parse failed:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1) from e
    return schedule


@app.command()
def expand(
    expression: str = typer.Argument(
        ...,
        help='Quoted cron line, e.g. "*/15 0 1,15 * 1-5 /usr/bin/find".',
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the expansion as JSON.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom config path (default: ~/.cronexpand/config.json).",
    ),
) -> None:
    """Expand a cron line and print the values of every field."""
    config = _load(config_path)
    schedule = _parse_or_exit(expression)

    if as_json or config.output.format == "json":
        console.print_json(json.dumps(schedule.to_dict()))
        return

    console.print(Text(schedule.render(config.output.label_width)), soft_wrap=True)


@app.command()
def check(
    expression: str = typer.Argument(..., help="Quoted cron line to validate."),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom config path (default: ~/.cronexpand/config.json).",
    ),
) -> None:
    """Validate a cron line without printing its expansion."""
    _load(config_path)
    _parse_or_exit(expression)
    console.print("[green]Valid[/green]")


@app.command()
def onboard(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Custom config path (default: ~/.cronexpand/config.json).",
    ),
    overwrite: bool = typer.Option(
        False,
        "--overwrite",
        help="Overwrite existing config with defaults.",
    ),
) -> None:
    """Initialize cronexpand configuration file."""
    path = config_path or get_config_path()

    if path.exists() and not overwrite:
        save_config(load_config(path), path)
        console.print(f"[green]Config refreshed:[/green] {path}")
        console.print("Existing values are preserved; missing fields are added.")
        return

    existed = path.exists()
    save_config(Config(), path)
    if existed:
        console.print(f"[green]Config reset:[/green] {path}")
    else:
        console.print(f"[green]Config created:[/green] {path}")
