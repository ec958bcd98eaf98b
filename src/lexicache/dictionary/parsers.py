"""Line parsing strategies for dictionary resources.

A :class:`LineParser` describes how a dictionary is built from text: a
factory for the empty accumulator and a fold that incorporates one line.
Parsers hold no state of their own and are shared freely across threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, Optional, Set, TypeVar

from lexicache.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

E = TypeVar("E")


@dataclass(frozen=True)
class LineParser(Generic[E]):
    """Accumulator factory plus per-line fold.

    Attributes:
        name: Short identifier used by the CLI and in log messages.
        initial: Zero-argument callable returning a fresh accumulator.
        fold: ``fold(acc, line)`` incorporating one line. It may return an
            updated accumulator, or mutate ``acc`` in place and return
            ``None`` (``set.add`` works as a fold).
    """

    name: str
    initial: Callable[[], E]
    fold: Callable[[E, str], Optional[E]]

    def parse_lines(self, lines: Iterable[str]) -> E:
        """Fold an iterable of already-decoded lines into a new accumulator."""
        acc = self.initial()
        for line in lines:
            result = self.fold(acc, line)
            if result is not None:
                acc = result
        return acc


def _fold_key_value(mapping: Dict[str, str], line: str) -> Dict[str, str]:
    fields = line.split("\t")
    if len(fields) == 2:
        mapping[fields[0]] = fields[1]
    else:
        logger.warning(f"Skipping malformed dictionary line: {line!r}")
    return mapping


def _fold_word(words: Set[str], line: str) -> Set[str]:
    words.add(line)
    return words


def _fold_word_lowercase(words: Set[str], line: str) -> Set[str]:
    # str.lower() does not depend on the process locale
    words.add(line.lower())
    return words


KEY_VALUE: LineParser[Dict[str, str]] = LineParser(
    name="key-value", initial=dict, fold=_fold_key_value
)
WORD: LineParser[Set[str]] = LineParser(name="word", initial=set, fold=_fold_word)
WORD_LOWERCASE: LineParser[Set[str]] = LineParser(
    name="word-lowercase", initial=set, fold=_fold_word_lowercase
)

PARSERS: Dict[str, LineParser] = {
    parser.name: parser for parser in (KEY_VALUE, WORD, WORD_LOWERCASE)
}


def get_parser(name: str) -> LineParser:
    """Look up a built-in parser by its ``name``.

    Raises:
        ValueError: If no built-in parser has that name.
    """
    try:
        return PARSERS[name]
    except KeyError:
        raise ValueError(
            f"Unsupported parser: {name}. Supported parsers: {', '.join(PARSERS)}"
        ) from None
