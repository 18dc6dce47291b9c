"""
Stylesheet source files.

A source file describes themes, component variables and style configs
as data, in JSON, YAML or TOML::

    theme:
      - values:
          light: {text: "#1c1c1c"}
          dark: {text: "#eeeeee"}
    vars:
      - name: button
        values: {padding: 1rem}
    styles:
      - body: {color: "var(--text)"}
      - selectors: [h1, h2]
        styles: {marginTop: 0}

Inside style trees, ``{"$nested": [...], "$styles": {...}}`` builds a
nested-selector marker.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import SourceError
from .session import CompilerSession
from .specs import nested

logger = logging.getLogger(__name__)

NESTED_KEY = "$nested"
NESTED_STYLES_KEY = "$styles"

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml", ".toml")


class VariableEntry(BaseModel):
    """One create_theme / create_vars call."""

    name: str = ""
    values: dict[str, Any] = Field(default_factory=dict)


class StyleEntry(BaseModel):
    """One create_style call, optionally in selector-list form."""

    selectors: list[str] | None = None
    styles: dict[str, Any] = Field(default_factory=dict)


class StyleSource(BaseModel):
    """Parsed stylesheet source."""

    theme: list[VariableEntry] = Field(default_factory=list)
    vars: list[VariableEntry] = Field(default_factory=list)
    styles: list[StyleEntry] = Field(default_factory=list)


# =============================================================================
# Parsing
# =============================================================================


def convert_markers(tree: Any) -> Any:
    """Replace ``$nested`` mappings with NestedSelectors markers, recursively."""
    if not isinstance(tree, Mapping):
        return tree
    if NESTED_KEY in tree:
        return nested(tree[NESTED_KEY], convert_markers(tree.get(NESTED_STYLES_KEY, {})))
    return {key: convert_markers(value) for key, value in tree.items()}


def _variable_entries(section: Any, label: str) -> list[VariableEntry]:
    if section is None:
        return []
    items = section if isinstance(section, list) else [section]
    entries: list[VariableEntry] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise SourceError(f"'{label}' entries must be mappings, got {type(item).__name__}")
        if "values" in item and set(item) <= {"name", "values"}:
            entries.append(VariableEntry(**item))
        else:
            entries.append(VariableEntry(values=dict(item)))
    return entries


def _style_entries(section: Any) -> list[StyleEntry]:
    if section is None:
        return []
    items = section if isinstance(section, list) else [section]
    entries: list[StyleEntry] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise SourceError(f"'styles' entries must be mappings, got {type(item).__name__}")
        if "styles" in item and set(item) <= {"selectors", "styles"}:
            entries.append(
                StyleEntry(selectors=item.get("selectors"), styles=convert_markers(item["styles"]))
            )
        else:
            entries.append(StyleEntry(styles=convert_markers(item)))
    return entries


def parse_source(data: Mapping[str, Any]) -> StyleSource:
    """Build a StyleSource from already-decoded data."""
    unknown = set(data) - {"theme", "vars", "styles"}
    if unknown:
        raise SourceError(f"Unknown section(s): {', '.join(sorted(unknown))}")
    try:
        return StyleSource(
            theme=_variable_entries(data.get("theme"), "theme"),
            vars=_variable_entries(data.get("vars"), "vars"),
            styles=_style_entries(data.get("styles")),
        )
    except ValidationError as e:
        raise SourceError(f"Invalid stylesheet source: {e}") from e


def _decode(path: Path, content: str) -> Any:
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(content)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(content)
        return tomllib.loads(content)
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SourceError(f"Invalid YAML in {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise SourceError(f"Invalid TOML in {path}: {e}") from e


def load_source(path: Path) -> StyleSource:
    """
    Load a stylesheet source file.

    Args:
        path: .json, .yaml/.yml or .toml file

    Returns:
        Parsed StyleSource

    Raises:
        SourceError: If the file is missing, has an unsupported extension,
            or does not parse.
    """
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise SourceError(
            f"Unsupported source type '{path.suffix}' (expected {', '.join(SUPPORTED_SUFFIXES)})"
        )
    if not path.exists():
        raise SourceError(f"Source not found: {path}")

    data = _decode(path, path.read_text(encoding="utf-8"))
    if data is None:
        logger.warning("Empty stylesheet source %s", path)
        return StyleSource()
    if not isinstance(data, Mapping):
        raise SourceError(f"Top level of {path} must be a mapping")

    return parse_source(data)


def apply_source(session: CompilerSession, source: StyleSource) -> None:
    """Replay a source through a session: themes, then variables, then styles."""
    for entry in source.theme:
        session.create_theme(entry.values, entry.name)
    for entry in source.vars:
        session.create_vars(entry.values, entry.name)
    for style in source.styles:
        if style.selectors:
            session.create_style(style.selectors, style.styles)
        else:
            session.create_style(style.styles)
    logger.debug(
        "Applied %s theme, %s vars and %s style entries",
        len(source.theme),
        len(source.vars),
        len(source.styles),
    )
