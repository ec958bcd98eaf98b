"""Configuration for dictionary resolution.

Values are merged with the following priority (highest to lowest):
1. Runtime Parameters (passed to :func:`load_config`)
2. Environment Variables (prefixed with LEXICACHE_)
3. Project Config ([tool.lexicache] in pyproject.toml)
4. Defaults
"""

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class LexicacheConfig(BaseModel):
    """Settings shared by the resolver, caches and CLI."""

    resource_package: str = Field(
        default="lexicache.resources",
        description="Package whose data files form the bundled namespace",
    )

    source: Literal["bundled", "filesystem"] = Field(
        default="bundled",
        description="Default namespace for resource paths",
    )

    verbose: bool = Field(
        default=False,
        description="Log every resource open and skipped line",
    )

    model_config = {
        "extra": "forbid",
    }


def _load_from_pyproject_toml(start: Optional[Path] = None) -> dict[str, Any]:
    """Read the [tool.lexicache] table of the nearest pyproject.toml.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        try:
            import tomli as tomllib  # noqa: F401
        except ImportError:
            return {}

    current_dir = start or Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if not pyproject_path.exists():
            continue
        try:
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            continue
        section = data.get("tool", {}).get("lexicache")
        if section is not None:
            return dict(section)
    return {}


def _load_from_env() -> dict[str, Any]:
    """Read LEXICACHE_* environment variables."""
    config: dict[str, Any] = {}

    env_mapping = {
        "LEXICACHE_RESOURCE_PACKAGE": "resource_package",
        "LEXICACHE_SOURCE": "source",
        "LEXICACHE_VERBOSE": "verbose",
    }

    for env_var, config_key in env_mapping.items():
        value = os.getenv(env_var)
        if value is None:
            continue
        if config_key == "verbose":
            config[config_key] = value.lower() in ("true", "1", "yes", "on")
        else:
            config[config_key] = value

    return config


def load_config(
    resource_package: Optional[str] = None,
    source: Optional[str] = None,
    verbose: Optional[bool] = None,
) -> LexicacheConfig:
    """Build a :class:`LexicacheConfig` from every configuration layer.

    Args:
        resource_package: Override for the bundled resource package.
        source: Override for the default resource namespace.
        verbose: Override for verbose logging.

    Returns:
        Merged configuration.
    """
    runtime_config: dict[str, Any] = {}
    if resource_package is not None:
        runtime_config["resource_package"] = resource_package
    if source is not None:
        runtime_config["source"] = source
    if verbose is not None:
        runtime_config["verbose"] = verbose

    merged_config = LexicacheConfig().model_dump()
    merged_config.update(_load_from_pyproject_toml())
    merged_config.update(_load_from_env())
    merged_config.update(runtime_config)

    return LexicacheConfig(**merged_config)
