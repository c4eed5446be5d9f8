"""CLI interface for inkcheck using Typer framework."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from inkcheck import __description__, __version__
from inkcheck.config import LogLevel, ValidatorConfig, load_config
from inkcheck.distributor import JsonResultDistributor, PlainResultDistributor
from inkcheck.errors import InkcheckError
from inkcheck.parser import PlainTextParser
from inkcheck.pipeline import ValidationPipeline
from inkcheck.plugins.validator import SCRIPT_VALIDATOR_NAME
from inkcheck.validation import ValidatorFactory

app = typer.Typer(
    name="inkcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"inkcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """inkcheck - validate prose against configurable rules and script plugins."""


@app.command()
def check(
    files: Annotated[
        list[Path],
        typer.Argument(help="Text files to validate")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .inkcheck.json)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: plain, json (default: plain)")
    ] = "plain",
    lang: Annotated[
        Optional[str],
        typer.Option("--lang", "-l", help="Message language: en, ja (default: from config)")
    ] = None,
    script_path: Annotated[
        Optional[Path],
        typer.Option("--script-path", "-s", help="Enable script plugins from this directory")
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level: error, warn, info, debug")
    ] = None,
) -> None:
    """Validate text files and report findings."""
    valid_formats = ["plain", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        settings = load_config(config)
        updates = {}
        if lang:
            updates["lang"] = lang
        if script_path is not None:
            validators = [v for v in settings.validators if v.name != SCRIPT_VALIDATOR_NAME]
            validators.append(ValidatorConfig(
                name=SCRIPT_VALIDATOR_NAME, attributes={"script-path": str(script_path)}
            ))
            updates["validators"] = validators
        if updates:
            settings = settings.model_validate({**settings.model_dump(), **updates})

        _setup_logging(log_level or settings.logging.level)

        collection = PlainTextParser().parse_files(files)

        if format == "json":
            distributor = JsonResultDistributor(sys.stdout)
        else:
            distributor = PlainResultDistributor(sys.stdout)

        pipeline = ValidationPipeline(settings, distributor=distributor)
        errors = pipeline.check(collection)
    except InkcheckError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] Invalid option: {e}")
        raise typer.Exit(1)

    if format == "plain":
        if errors:
            err_console.print(f"[yellow]{len(errors)} error(s) found in {len(collection)} document(s)[/yellow]")
        else:
            err_console.print("[green]No errors found![/green]")

    raise typer.Exit(1 if errors else 0)


@app.command()
def validators() -> None:
    """List the validators available to configuration files."""
    factory = ValidatorFactory()

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Granularity", style="white")
    table.add_column("Description", style="dim")

    for name in factory.names():
        info = factory.describe(name)
        if info is None:
            table.add_row(name, "", "")
            continue
        granularities = ", ".join(g.value for g in info.granularities)
        table.add_row(name, granularities, info.description)

    console.print(table)
