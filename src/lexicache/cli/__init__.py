"""CLI module for lexicache.

Provides commands to inspect dictionary resources and to run the doubled
particle check over tokenized sentences.
"""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lexicache.cli.commands import (
    EXIT_FINDINGS,
    EXIT_INVALID_INPUT,
    check_sentences,
    show_dictionary,
)
from lexicache.config import load_config
from lexicache.utils.logging import set_package_level, setup_logging

app = typer.Typer(
    name="lexicache",
    help="lexicache - cached dictionary resources for text validation",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    setup_logging(level=level)
    set_package_level(level)


@app.command()
def load(
    path: str = typer.Argument(..., help="Resource path to load"),
    parser: str = typer.Option(
        "word", "--parser", "-p", help="Line parser: word, word-lowercase, key-value"
    ),
    source: str = typer.Option(
        None, "--source", "-s", help="Resource namespace: bundled or filesystem"
    ),
    package: str = typer.Option(
        None, "--package", help="Package holding bundled resources"
    ),
    name: str = typer.Option(None, "--name", "-n", help="Display name for messages"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
) -> None:
    """Load a dictionary resource and show a preview."""
    try:
        config = load_config(
            resource_package=package, source=source, verbose=verbose or None
        )
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid configuration:\n{escape(str(e))}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from e
    _configure_logging(config.verbose)
    show_dictionary(path, parser, config, display_name=name, console=console)


@app.command()
def check(
    input_path: Path = typer.Argument(..., help="JSON array of tokenized sentences"),
    skip: str = typer.Option(
        None, "--skip", help="Comma-separated particles to ignore"
    ),
    skip_dict: str = typer.Option(
        None, "--dict", help="Word list file of particles to ignore"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
) -> None:
    """Report particles repeated within a sentence."""
    _configure_logging(verbose)
    if check_sentences(input_path, skip=skip, skip_dict=skip_dict, console=console):
        raise typer.Exit(code=EXIT_FINDINGS)


if __name__ == "__main__":
    app()
