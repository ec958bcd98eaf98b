"""lexicache: cached dictionary resources for text validation rules.

Example::

    from lexicache import KEY_VALUE, load_cached

    abbreviations = load_cached("en/abbreviations.tsv", "abbreviations", KEY_VALUE)
"""

from typing import TypeVar, Union

from lexicache._version import __version__
from lexicache.dictionary import (
    KEY_VALUE,
    WORD,
    WORD_LOWERCASE,
    DictionaryCache,
    LineParser,
    ResourceResolver,
    ResourceSource,
    get_shared_cache,
)
from lexicache.errors import (
    DictionaryLoadError,
    LexicacheError,
    ResourceIOError,
    ResourceNotFoundError,
)
from lexicache.models import Finding, Sentence, TaggedToken
from lexicache.validators import DoubledParticleValidator, RuleAttributes

__all__ = [
    "__version__",
    "DictionaryCache",
    "DictionaryLoadError",
    "DoubledParticleValidator",
    "Finding",
    "KEY_VALUE",
    "LexicacheError",
    "LineParser",
    "ResourceIOError",
    "ResourceNotFoundError",
    "ResourceResolver",
    "ResourceSource",
    "RuleAttributes",
    "Sentence",
    "TaggedToken",
    "WORD",
    "WORD_LOWERCASE",
    "load_cached",
]

E = TypeVar("E")


def load_cached(
    path: str,
    display_name: str,
    parser: LineParser[E] = WORD,  # type: ignore[assignment]
    source: Union[ResourceSource, str] = ResourceSource.BUNDLED,
) -> E:
    """Load *path* through the process-wide cache for *parser*.

    Args:
        path: Resource path.
        display_name: Human-readable dictionary name for logs and errors.
        parser: Line parser (default: :data:`WORD`).
        source: Namespace to resolve *path* against.

    Returns:
        The cached dictionary.

    Raises:
        DictionaryLoadError: If the resource cannot be loaded.
    """
    return get_shared_cache(parser, source).get_or_load(path, display_name)
