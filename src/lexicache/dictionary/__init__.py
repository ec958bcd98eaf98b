"""Dictionary resources: line parsers, stream loading, resolution and caching."""

from lexicache.dictionary.cache import DictionaryCache, get_shared_cache
from lexicache.dictionary.loader import load, load_file
from lexicache.dictionary.parsers import (
    KEY_VALUE,
    WORD,
    WORD_LOWERCASE,
    LineParser,
    get_parser,
)
from lexicache.dictionary.resolver import ResourceResolver, ResourceSource

__all__ = [
    "DictionaryCache",
    "KEY_VALUE",
    "LineParser",
    "ResourceResolver",
    "ResourceSource",
    "WORD",
    "WORD_LOWERCASE",
    "get_parser",
    "get_shared_cache",
    "load",
    "load_file",
]
