"""
Variable collector.

Walks a theme or component-variable tree, derives hierarchical custom
property names and writes the leaves into the theme variable store. The
walk also builds the caller-facing mirror of the tree, where each leaf is
replaced by a ``var()`` reference.

Example:
    collector.collect({"color": {"linkHover": "#3a78d2"}}, full_theme=True)
    # store root: --color-link-hover: #3a78d2
    # returns:    {"color": {"linkHover": "var(--color-link-hover)"}}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..specs import THEME_KEYS, ThemeKeyMode, ThemeMode
from .compiler import format_value, is_property_value, to_kebab_case
from .optimizer import DefaultValueOptimizer
from .store import ThemeVariableStore

logger = logging.getLogger(__name__)


def name_segment(key: str) -> str:
    """Kebab-case a key for use inside a variable name."""
    return to_kebab_case(str(key)).lstrip("-")


def variable_name(path: list[str]) -> str:
    return "--" + "-".join(path)


class VariableCollector:
    """Collects theme variables into a store and mirrors them as references."""

    def __init__(self, store: ThemeVariableStore, optimizer: DefaultValueOptimizer) -> None:
        self.store = store
        self.optimizer = optimizer

    def collect(
        self,
        values: Mapping[str, Any],
        prefix: str = "",
        *,
        full_theme: bool = False,
        theme_keys: ThemeKeyMode = ThemeKeyMode.SCOPE,
    ) -> dict[str, Any]:
        """
        Collect variables from a configuration tree.

        Args:
            values: Nested mapping of names to values, optionally with
                ``light`` / ``dark`` sub-trees
            prefix: Name prefix; ``light`` or ``dark`` act as a theme tag
                for the whole tree instead
            full_theme: Write untagged leaves to the root partition. When
                False only light/dark tagged leaves reach the store.
            theme_keys: Whether ``light`` / ``dark`` keys scope their
                sub-tree (SCOPE) or are ordinary path segments (LITERAL)

        Returns:
            Mirror of ``values`` with every leaf replaced by a var() reference
        """
        theme: ThemeMode | None = None
        path: list[str] = []
        if prefix in THEME_KEYS and theme_keys is ThemeKeyMode.SCOPE:
            theme = ThemeMode(prefix)
        elif prefix:
            path = [name_segment(prefix)]

        mirror: dict[str, Any] = {}
        self._walk(values, path, theme, full_theme, theme_keys is ThemeKeyMode.SCOPE, mirror)
        logger.debug(
            "Collected %s variables (prefix=%r, full_theme=%s)",
            len(mirror),
            prefix,
            full_theme,
        )
        return mirror

    def _walk(
        self,
        node: Mapping[str, Any],
        path: list[str],
        theme: ThemeMode | None,
        full_theme: bool,
        scoping: bool,
        mirror: dict[str, Any],
    ) -> None:
        for raw_key, value in node.items():
            key = str(raw_key)

            if scoping and key in THEME_KEYS and not is_property_value(value):
                # light/dark children land on the same level of the mirror
                self._walk(value, path, ThemeMode(key), full_theme, scoping, mirror)
                continue

            child_path = [*path, name_segment(key)]

            if scoping and self._is_themed_leaf(value):
                # light first, so the dark reference resolves against it
                modes = sorted(value.items(), key=lambda item: str(item[0]) != "light")
                for mode_key, mode_value in modes:
                    reference = self._leaf(
                        child_path, mode_value, ThemeMode(str(mode_key)), full_theme
                    )
                    if reference is not None:
                        mirror[key] = reference
                continue

            if is_property_value(value):
                reference = self._leaf(child_path, value, theme, full_theme)
                if reference is not None:
                    mirror[key] = reference
                continue

            child = mirror.get(key)
            if not isinstance(child, dict):
                child = {}
                mirror[key] = child
            self._walk(value, child_path, theme, full_theme, scoping, child)

    @staticmethod
    def _is_themed_leaf(value: Any) -> bool:
        """``{"light": x, "dark": y}`` with primitive values."""
        return (
            isinstance(value, Mapping)
            and bool(value)
            and all(str(k) in THEME_KEYS for k in value)
            and all(is_property_value(v) for v in value.values())
        )

    def _leaf(
        self,
        path: list[str],
        value: Any,
        theme: ThemeMode | None,
        full_theme: bool,
    ) -> str | None:
        text = format_value(value)
        name = variable_name(path)
        if text is None:
            logger.debug("Skipping %s: no value", name)
            return None

        target = theme or (ThemeMode.ROOT if full_theme else None)
        if target is not None:
            self.store.set(target, name, text)

        reference = name[2:]
        self.optimizer.track(reference, text)
        return self.optimizer.resolve(reference, text)
