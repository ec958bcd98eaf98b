"""Drain a byte stream through a :class:`LineParser`."""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Iterator, TypeVar, Union

from lexicache.dictionary.parsers import LineParser
from lexicache.errors import ResourceIOError
from lexicache.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

E = TypeVar("E")


def _iter_lines(reader: io.TextIOBase, label: str, path: str | None) -> Iterator[str]:
    lines = iter(reader)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise ResourceIOError(
                f"Resource {label} is not valid UTF-8: {e}", path=path
            ) from e
        except OSError as e:
            raise ResourceIOError(
                f"Failed to read resource {label}: {e}", path=path
            ) from e
        yield line[:-1] if line.endswith("\n") else line


def load(stream: BinaryIO, parser: LineParser[E], path: str | None = None) -> E:
    """Decode *stream* as UTF-8 and fold every line into a new dictionary.

    Lines are applied in stream order, so a later duplicate key in a
    key-value resource overwrites an earlier one. A trailing line without a
    terminator is included. The stream is closed before this function
    returns or raises. Exceptions raised by the parser's fold propagate
    unchanged.

    Args:
        stream: Binary stream positioned at the start of the resource.
        parser: Strategy describing how each line is accumulated.
        path: Resource path, used only for error messages.

    Returns:
        The populated accumulator.

    Raises:
        ResourceIOError: If the stream cannot be read or is not valid UTF-8.
    """
    label = path or getattr(stream, "name", "<stream>")
    try:
        with io.TextIOWrapper(stream, encoding="utf-8") as reader:
            return parser.parse_lines(_iter_lines(reader, label, path))
    finally:
        stream.close()


def load_file(file_path: Union[str, os.PathLike[str]], parser: LineParser[E]) -> E:
    """Load a dictionary straight from a filesystem path.

    Raises:
        ResourceIOError: If the file cannot be opened, read, or decoded.
    """
    path = os.fspath(file_path)
    try:
        stream = open(path, "rb")
    except OSError as e:
        raise ResourceIOError(f"Failed to open {path}: {e}", path=path) from e
    logger.debug(f"Loading {parser.name} dictionary from file {path}")
    return load(stream, parser, path=path)
