"""Locate dictionary resources by logical path.

Bundled resources are looked up with :mod:`importlib.resources`, so they are
found whether lexicache is installed as a plain directory, a wheel, or a
zip-app. Filesystem resources are opened directly.
"""

from __future__ import annotations

import enum
import logging
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Union

from lexicache.errors import ResourceIOError, ResourceNotFoundError
from lexicache.utils.logging import configure_module_logger

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from lexicache.config import LexicacheConfig

logger = configure_module_logger(__name__, level=logging.INFO)

DEFAULT_RESOURCE_PACKAGE = "lexicache.resources"


class ResourceSource(str, enum.Enum):
    """Where a logical resource path is resolved."""

    BUNDLED = "bundled"
    FILESYSTEM = "filesystem"


class ResourceResolver:
    """Open byte streams for bundled or filesystem resource paths.

    Args:
        package: Import name of the package whose data files form the
            bundled namespace.
    """

    def __init__(self, package: str = DEFAULT_RESOURCE_PACKAGE) -> None:
        self.package = package

    @classmethod
    def from_config(cls, config: LexicacheConfig) -> "ResourceResolver":
        return cls(package=config.resource_package)

    def _bundled(self, path: str) -> Traversable:
        try:
            root = resources.files(self.package)
        except ModuleNotFoundError as e:
            raise ResourceNotFoundError(
                f"Resource package {self.package} is not importable",
                path=path,
                source=ResourceSource.BUNDLED.value,
            ) from e
        resource = root
        for part in path.strip("/").split("/"):
            resource = resource.joinpath(part)
        return resource

    def exists(
        self,
        path: str,
        source: Union[ResourceSource, str] = ResourceSource.BUNDLED,
    ) -> bool:
        """Return ``True`` when *path* resolves to a readable file."""
        source = ResourceSource(source)
        if source is ResourceSource.FILESYSTEM:
            return Path(path).is_file()
        try:
            return self._bundled(path).is_file()
        except ResourceNotFoundError:
            return False

    def open(
        self,
        path: str,
        source: Union[ResourceSource, str] = ResourceSource.BUNDLED,
    ) -> BinaryIO:
        """Open *path* for binary reading.

        The caller owns the returned stream; use it as a context manager.

        Args:
            path: Logical resource path, ``/``-separated for bundled data.
            source: Namespace to resolve *path* against.

        Returns:
            An open binary stream.

        Raises:
            ResourceNotFoundError: If *path* does not resolve to a resource.
            ResourceIOError: If a filesystem path exists but cannot be opened.
        """
        source = ResourceSource(source)

        if source is ResourceSource.FILESYSTEM:
            try:
                return open(path, "rb")
            except FileNotFoundError as e:
                raise ResourceNotFoundError(
                    f"File not found: {path}", path=path, source=source.value
                ) from e
            except OSError as e:
                raise ResourceIOError(f"Failed to open {path}: {e}", path=path) from e

        resource = self._bundled(path)
        if not resource.is_file():
            raise ResourceNotFoundError(
                f"Failed to find bundled resource {path} in {self.package}",
                path=path,
                source=source.value,
            )
        logger.debug(f"Opening bundled resource {path} from {self.package}")
        try:
            return resource.open("rb")  # type: ignore[return-value]
        except OSError as e:
            raise ResourceIOError(f"Failed to open {path}: {e}", path=path) from e
