"""Memoized dictionary loading.

Each :class:`DictionaryCache` is bound to one :class:`LineParser` and keeps
the parsed result of every resource path it has successfully loaded. Loads
for the same path are serialized by a lock owned by that path, so unrelated
dictionaries still load in parallel. Failed loads are never stored.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Generic, Optional, Tuple, TypeVar, Union

from lexicache.dictionary.loader import load
from lexicache.dictionary.parsers import LineParser
from lexicache.dictionary.resolver import ResourceResolver, ResourceSource
from lexicache.errors import DictionaryLoadError
from lexicache.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

E = TypeVar("E")


class DictionaryCache(Generic[E]):
    """Load each resource path at most once per cache instance.

    Args:
        parser: Strategy used to build dictionaries from resource lines.
        resolver: Resolver used to open resources (default: bundled
            ``lexicache.resources``).
        source: Namespace resource paths are resolved against.
    """

    def __init__(
        self,
        parser: LineParser[E],
        resolver: Optional[ResourceResolver] = None,
        source: Union[ResourceSource, str] = ResourceSource.BUNDLED,
    ) -> None:
        self.parser = parser
        self.resolver = resolver or ResourceResolver()
        self.source = ResourceSource(source)
        self._entries: Dict[str, E] = {}
        self._path_locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, path: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._path_locks.get(path)
            if lock is None:
                lock = threading.Lock()
                self._path_locks[path] = lock
            return lock

    def get_or_load(self, path: str, display_name: str) -> E:
        """Return the dictionary for *path*, loading it on first request.

        Args:
            path: Resource path, resolved against :attr:`source`.
            display_name: Human-readable name used in logs and errors.

        Returns:
            The cached dictionary. Repeated calls return the same object.

        Raises:
            DictionaryLoadError: If the resource is missing or unreadable.
                Nothing is cached, so the next call tries again.
        """
        cached = self._entries.get(path)
        if cached is not None:
            return cached

        with self._lock_for(path):
            if path in self._entries:
                return self._entries[path]

            try:
                with self.resolver.open(path, self.source) as stream:
                    dictionary = load(stream, self.parser, path=path)
            except Exception as e:
                logger.error(f"Failed to load {display_name} from {path}: {e}")
                raise DictionaryLoadError(display_name, path) from e

            self._entries[path] = dictionary

        logger.info(f"Succeeded to load [bold]{display_name}[/bold].")
        return dictionary

    def clear(self) -> None:
        """Forget every cached dictionary.

        Path locks are kept, so a load still in flight stays the only load
        of its path.
        """
        with self._registry_lock:
            self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_SHARED_CACHES: Dict[Tuple[LineParser, ResourceSource], DictionaryCache] = {}
_SHARED_LOCK = threading.Lock()


def get_shared_cache(
    parser: LineParser[E],
    source: Union[ResourceSource, str] = ResourceSource.BUNDLED,
) -> DictionaryCache[E]:
    """Return the process-wide cache for *parser* and *source*.

    Created on first use with the default resolver.
    """
    key = (parser, ResourceSource(source))
    with _SHARED_LOCK:
        cache = _SHARED_CACHES.get(key)
        if cache is None:
            cache = DictionaryCache(parser, source=key[1])
            _SHARED_CACHES[key] = cache
        return cache
