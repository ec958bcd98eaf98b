"""Rich-backed logging helpers shared by every lexicache module.

Module loggers write to stderr through a :class:`rich.logging.RichHandler`
so dictionary load messages stay readable next to CLI output on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_HIGHLIGHT_KEYWORDS = ["dictionary", "resource", "cache", "particle"]


def _build_handler(console: Console, level: int = logging.NOTSET) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=True,
        show_level=True,
        level=level,
        omit_repeated_times=False,
        keywords=_HIGHLIGHT_KEYWORDS,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(
    level: int = logging.INFO,
    console: Optional[Console] = None,
) -> None:
    """
    Configure the root logger with a single Rich handler.

    Used by the command-line entry point. Library code never calls this.

    Args:
        level: Root logging level (default: INFO).
        console: Optional Rich Console instance (default: stderr console).
    """
    if console is None:
        console = Console(stderr=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(console, level=level))


def configure_module_logger(
    module_name: str,
    level: int = logging.INFO,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure a module-specific logger writing to stderr via Rich.

    Calling this twice for the same module replaces the handler instead of
    stacking a second one.

    Args:
        module_name: Module name (typically __name__).
        level: Logging level.
        console: Optional Rich Console instance.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)
    logger.handlers.clear()

    if console is None:
        console = Console(stderr=True, legacy_windows=False)
    logger.addHandler(_build_handler(console))
    logger.propagate = False

    return logger


def set_package_level(level: int) -> None:
    """Apply *level* to every already-configured ``lexicache.*`` logger."""
    manager = logging.Logger.manager
    for name, candidate in list(manager.loggerDict.items()):
        if name.startswith("lexicache") and isinstance(candidate, logging.Logger):
            candidate.setLevel(level)
