"""
Core value types for stylecraft.

Defines theme partitions, the nested-selector marker used inside style
trees, and the bookkeeping records shared by the store and optimizer.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# =============================================================================
# Enums
# =============================================================================


class ThemeMode(str, Enum):
    """Partitions of the theme variable store."""

    ROOT = "root"
    LIGHT = "light"
    DARK = "dark"


class ThemeKeyMode(str, Enum):
    """
    How a literal ``light`` / ``dark`` key is interpreted.

    SCOPE treats the key as theme scoping syntax, LITERAL treats it as an
    ordinary name (a path segment for variables, a selector for styles).
    """

    SCOPE = "scope"
    LITERAL = "literal"


THEME_KEYS = frozenset({ThemeMode.LIGHT.value, ThemeMode.DARK.value})


# =============================================================================
# Style tree markers
# =============================================================================


@dataclass(frozen=True)
class NestedSelectors:
    """
    Style-tree node combining explicit selectors with the parent selector.

    The key the marker is stored under is ignored; each comma-separated part
    of the parent selector is combined with each entry of ``selectors``.

    Example:
        NestedSelectors(
            selectors=("&:hover", "&:focus-visible"),
            styles={"color": "red"},
        )
    """

    selectors: tuple[str, ...]
    styles: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Structural form used for cache keys."""
        return {"$nested": list(self.selectors), "$styles": self.styles}


def nested(selectors: Sequence[str], styles: Mapping[str, Any]) -> NestedSelectors:
    """Build a nested-selector marker for use inside a style config."""
    if isinstance(selectors, str):
        selectors = [selectors]
    return NestedSelectors(selectors=tuple(selectors), styles=styles)


# =============================================================================
# Bookkeeping
# =============================================================================


@dataclass
class DefaultValueEntry:
    """
    Usage record for one literal default value.

    ``count`` is always the sum of ``ref_counts``; ``ref_counts`` keeps
    first-seen order, which is the hoisting tie-break order.
    """

    value: str
    count: int = 0
    ref_counts: dict[str, int] = field(default_factory=dict)
    optimized: bool = False


@dataclass
class CssVariableSet:
    """Generated variable declarations and the assembled CSS block."""

    variables: list[str]
    css: str
