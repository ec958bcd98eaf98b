"""Exception hierarchy for dictionary resolution and loading.

Line-level problems in a dictionary file are not represented here: a
malformed key-value line is logged and skipped by the parser, and never
reaches the caller.
"""

from __future__ import annotations

from typing import Optional


class LexicacheError(Exception):
    """Base class for every error raised by lexicache."""


class ResourceIOError(LexicacheError):
    """A resource stream could not be opened, read, or decoded as UTF-8.

    Args:
        message: Human-readable description.
        path: Resource path involved, when known.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class ResourceNotFoundError(LexicacheError):
    """A logical resource path did not resolve to any stream.

    Args:
        message: Human-readable description.
        path: The path that was looked up.
        source: ``"bundled"`` or ``"filesystem"``.
    """

    def __init__(self, message: str, path: str, source: str) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.source = source


class DictionaryLoadError(LexicacheError):
    """Loading a named dictionary failed for any reason.

    The underlying error is available as ``__cause__``.

    Args:
        display_name: Human-readable dictionary name.
        path: Resource path the dictionary was requested from.
    """

    def __init__(self, display_name: str, path: str) -> None:
        super().__init__(f"Failed to load {display_name}: {path}")
        self.display_name = display_name
        self.path = path
