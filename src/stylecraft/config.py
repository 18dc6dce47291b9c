"""
Compiler configuration.

Parses the [stylecraft] section from stylecraft.toml (or
[tool.stylecraft] from pyproject.toml) and provides typed settings for
the compiler session.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .specs import ThemeKeyMode

logger = logging.getLogger(__name__)

CONFIG_FILE = "stylecraft.toml"

DEFAULT_HOIST_THRESHOLD = 3
DEFAULT_DARK_MEDIA_QUERY = "(prefers-color-scheme: dark)"


class CompilerConfig(BaseModel):
    """Complete compiler configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hoist_threshold: int = Field(
        default=DEFAULT_HOIST_THRESHOLD,
        ge=1,
        description="Usages of one default value before it is hoisted into :root",
    )
    dark_media_query: str = Field(
        default=DEFAULT_DARK_MEDIA_QUERY,
        description="Media query wrapping dark variable overrides",
    )
    vars_theme_keys: ThemeKeyMode = Field(
        default=ThemeKeyMode.SCOPE,
        description="How light/dark keys are read in component variables",
    )
    style_theme_keys: ThemeKeyMode = Field(
        default=ThemeKeyMode.LITERAL,
        description="How light/dark keys are read in style configs",
    )
    dedupe: bool = Field(default=True, description="Merge rules with identical bodies")
    indent: str = Field(default="  ", description="Indentation for declarations")
    cache_max_entries: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on cached CSS entries (None = unbounded)",
    )


def _extract_section(data: dict[str, Any], toml_path: Path) -> dict[str, Any]:
    """Pick the stylecraft table out of a parsed TOML document."""
    if toml_path.name == "pyproject.toml":
        section = data.get("tool", {}).get("stylecraft", {})
    else:
        section = data.get("stylecraft", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[stylecraft] in {toml_path} must be a table")
    return section


def load_config(toml_path: Path | None = None) -> CompilerConfig:
    """
    Load compiler configuration from a TOML file.

    Args:
        toml_path: Path to stylecraft.toml or pyproject.toml. None, or a
            path that does not exist, yields the defaults.

    Returns:
        CompilerConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    if toml_path is None or not toml_path.exists():
        logger.debug("No configuration file, using defaults")
        return CompilerConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    section = _extract_section(data, toml_path)
    try:
        config = CompilerConfig(**section)
    except ValidationError as e:
        raise ConfigError(f"Invalid stylecraft configuration in {toml_path}: {e}") from e

    logger.debug("Loaded configuration from %s", toml_path)
    return config


def find_config(start: Path) -> Path | None:
    """Find stylecraft.toml, or a pyproject.toml with [tool.stylecraft], at or above start."""
    directory = start if start.is_dir() else start.parent
    for candidate_dir in [directory, *directory.parents]:
        candidate = candidate_dir / CONFIG_FILE
        if candidate.exists():
            return candidate
        pyproject = candidate_dir / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    if "stylecraft" in tomllib.load(f).get("tool", {}):
                        return pyproject
            except tomllib.TOMLDecodeError:
                logger.debug("Skipping unreadable %s", pyproject)
    return None
