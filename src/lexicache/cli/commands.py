"""Implementation of the lexicache CLI commands.

This module loads dictionaries for inspection and runs the doubled
particle validator over pre-tokenized sentences.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lexicache.config import LexicacheConfig
from lexicache.dictionary.cache import DictionaryCache
from lexicache.dictionary.parsers import get_parser
from lexicache.dictionary.resolver import ResourceResolver, ResourceSource
from lexicache.errors import DictionaryLoadError
from lexicache.models import Sentence
from lexicache.validators.base import RuleAttributes
from lexicache.validators.doubled_particle import DoubledParticleValidator

EXIT_FINDINGS: int = 1
EXIT_INVALID_INPUT: int = 2

_PREVIEW_ROWS = 10

_sentences_adapter = TypeAdapter(list[Sentence])


def show_dictionary(
    path: str,
    parser_name: str,
    config: LexicacheConfig,
    display_name: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Load one dictionary and print its size and first entries.

    Args:
        path: Resource path.
        parser_name: Name of a built-in line parser.
        config: Resolver configuration.
        display_name: Name used in messages (default: *path*).
        console: Rich console instance for output.
    """
    if console is None:
        console = Console()

    try:
        parser = get_parser(parser_name)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from e

    cache = DictionaryCache(
        parser,
        resolver=ResourceResolver.from_config(config),
        source=ResourceSource(config.source),
    )
    name = display_name or path

    try:
        dictionary = cache.get_or_load(path, name)
    except DictionaryLoadError as e:
        console.print(f"[red]✗[/red] {e} ({e.__cause__})")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]✓[/green] Loaded [bold cyan]{name}[/bold cyan] "
        f"with {len(dictionary)} entries."
    )

    table = Table(title=f"{name} ({parser.name})", show_header=True, header_style="bold")
    if isinstance(dictionary, dict):
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="magenta")
        for key in sorted(dictionary)[:_PREVIEW_ROWS]:
            table.add_row(key, dictionary[key])
    else:
        table.add_column("Word", style="cyan")
        for word in sorted(dictionary)[:_PREVIEW_ROWS]:
            table.add_row(repr(word) if not word else word)
    console.print(table)


def check_sentences(
    input_path: Path,
    skip: Optional[str] = None,
    skip_dict: Optional[str] = None,
    console: Optional[Console] = None,
) -> int:
    """Run the doubled particle validator over a JSON file of sentences.

    The file holds a JSON array of objects matching :class:`Sentence`.

    Args:
        input_path: JSON file to read.
        skip: Comma-separated particles never reported.
        skip_dict: Word list file of particles never reported.
        console: Rich console instance for output.

    Returns:
        Number of findings.
    """
    if console is None:
        console = Console()

    try:
        sentences = _sentences_adapter.validate_json(input_path.read_bytes())
    except OSError as e:
        console.print(f"[red]✗[/red] Could not read {input_path}: {e}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from e
    except ValidationError as e:
        console.print(
            f"[red]✗[/red] Invalid sentence data in {input_path}:\n{escape(str(e))}"
        )
        raise typer.Exit(code=EXIT_INVALID_INPUT) from e

    values: dict[str, str] = {}
    if skip:
        values["list"] = skip
    if skip_dict:
        values["dict"] = skip_dict
    attributes = RuleAttributes(values=values)

    validator = DoubledParticleValidator()
    findings = []
    try:
        for sentence in sentences:
            findings.extend(validator.validate(sentence, attributes))
    except DictionaryLoadError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from e

    if not findings:
        console.print(f"[green]✓[/green] No repeated particles in {len(sentences)} sentence(s).")
        return 0

    table = Table(title="Repeated particles", show_header=True, header_style="bold")
    table.add_column("Line", style="dim", justify="right")
    table.add_column("Particle", style="cyan")
    table.add_column("Count", style="magenta", justify="right")
    table.add_column("Sentence")
    for finding in findings:
        table.add_row(
            str(finding.sentence.line_number),
            finding.surface,
            str(finding.count),
            finding.sentence.content,
        )
    console.print(table)
    return len(findings)
