"""
Style config compiler.

Turns a nested style configuration into flat CSS rule text. Keys are
selector fragments, at-rules or property names; nesting is resolved into
full selectors so the output never relies on native CSS nesting.

Emission is depth-first, one block per selector: the properties of a
level form one ``selector { ... }`` block, followed by the blocks of its
nested rules, each separated by a blank line.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from ..specs import THEME_KEYS, NestedSelectors, ThemeKeyMode

logger = logging.getLogger(__name__)

# Prefixes that attach to the parent selector without a descendant space
_ADJACENT_PREFIXES = (":", ">", "+", "~")

# At-rules whose body is not scoped by the surrounding selector
_STATEMENT_AT_RULES = frozenset(
    {
        "@font-face",
        "@keyframes",
        "@-webkit-keyframes",
        "@page",
        "@property",
        "@counter-style",
        "@font-feature-values",
        "@font-palette-values",
        "@view-transition",
    }
)

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_VENDOR_RE = re.compile(r"^(ms|moz|webkit)(?=[A-Z])")


# =============================================================================
# Helpers
# =============================================================================


def is_property_value(value: Any) -> bool:
    """True for property values (primitives, None, lists), False for nested rules."""
    if isinstance(value, NestedSelectors):
        return False
    return not isinstance(value, Mapping)


def to_kebab_case(name: str) -> str:
    """
    Convert a camelCase property name to kebab-case.

    Vendor prefixes become a leading hyphen: ``WebkitFontSmoothing`` and
    ``msTransform`` map to ``-webkit-font-smoothing`` and ``-ms-transform``.
    Custom properties (``--x``) are returned unchanged.
    """
    if name.startswith("--"):
        return name
    kebab = _UPPER_RE.sub(lambda m: f"-{m.group(0).lower()}", name)
    if _LOWER_VENDOR_RE.match(name):
        kebab = f"-{kebab}"
    return kebab


def format_value(value: Any) -> str | None:
    """Coerce a property value to CSS text. None means "omit"."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        parts = [format_value(item) for item in value]
        return ", ".join(part for part in parts if part is not None)
    return str(value)


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas, ignoring commas inside parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in selector:
        if char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return [part for part in parts if part]


def _has_top_level_comma(selector: str) -> bool:
    return len(split_selector_list(selector)) > 1


def _join_selector(key: str, parent_selector: str) -> str:
    if key.startswith("&"):
        return parent_selector + key[1:]
    if key.startswith(_ADJACENT_PREFIXES):
        return f"{parent_selector}{key}"
    return f"{parent_selector} {key}" if parent_selector else key


def create_selector(key: str, parent_selector: str) -> str:
    """
    Build the selector for a nested key.

    Args:
        key: Current selector fragment
        parent_selector: Parent selector context ("" at the top level)

    Returns:
        At-rules and comma lists unchanged, ``&`` keys spliced onto the
        parent, pseudo/combinator keys appended without a space, anything
        else as a descendant of the parent.
    """
    if key.startswith("@"):
        return key
    if key.startswith("&"):
        return parent_selector + key[1:]
    if _has_top_level_comma(key):
        return key
    return _join_selector(key, parent_selector)


def _at_rule_name(key: str) -> str:
    return key.split(None, 1)[0].lower()


# =============================================================================
# Compiler
# =============================================================================


class StyleConfigCompiler:
    """
    Recursive style-config to CSS compiler.

    Args:
        indent: Indentation unit for declarations and at-rule bodies
        theme_keys: Whether ``light`` / ``dark`` keys are selectors
            (LITERAL) or colour-scheme media scopes (SCOPE)
    """

    def __init__(self, indent: str = "  ", theme_keys: ThemeKeyMode = ThemeKeyMode.LITERAL) -> None:
        self.indent = indent
        self.theme_keys = theme_keys

    def compile(self, config: Mapping[str, Any], parent_selector: str = "") -> str:
        """Compile one level of a style tree under ``parent_selector``."""
        properties: list[str] = []
        nested_rules: list[str] = []

        for raw_key, value in config.items():
            key = str(raw_key)

            if isinstance(value, NestedSelectors):
                css = self._compile_nested_selectors(value, parent_selector)
            elif is_property_value(value):
                declaration = self._declaration(key, value)
                if declaration is not None:
                    properties.append(declaration)
                continue
            elif key.startswith("@"):
                css = self._compile_at_rule(key, value, parent_selector)
            elif key in THEME_KEYS and self.theme_keys is ThemeKeyMode.SCOPE:
                css = self._compile_at_rule(
                    f"@media (prefers-color-scheme: {key})", value, parent_selector
                )
            else:
                css = self.compile(value, self._nest(key, parent_selector))

            if css:
                nested_rules.append(css)
            else:
                logger.debug("No CSS emitted for %r under %r", key, parent_selector)

        return self._assemble(parent_selector, properties, nested_rules)

    def _nest(self, key: str, parent_selector: str) -> str:
        if parent_selector and _has_top_level_comma(parent_selector):
            return ", ".join(
                create_selector(key, part) for part in split_selector_list(parent_selector)
            )
        return create_selector(key, parent_selector)

    def _compile_nested_selectors(self, marker: NestedSelectors, parent_selector: str) -> str:
        parents = split_selector_list(parent_selector) if parent_selector else [""]
        combined = [
            _join_selector(selector, parent) for parent in parents for selector in marker.selectors
        ]
        if not combined or not marker.styles:
            logger.debug("Nested selectors %r have no styles", marker.selectors)
            return ""
        return self.compile(marker.styles, ", ".join(combined))

    def _compile_at_rule(self, key: str, value: Mapping[str, Any], parent_selector: str) -> str:
        if _at_rule_name(key) in _STATEMENT_AT_RULES:
            parent_selector = ""

        if parent_selector:
            return self._wrap(key, self.compile(value, parent_selector))

        properties = {k: v for k, v in value.items() if is_property_value(v)}
        rules = {k: v for k, v in value.items() if not is_property_value(v)}
        chunks: list[str] = []
        if properties:
            chunks.append(self.compile(properties, key))
        if rules:
            chunks.append(self._wrap(key, self.compile(rules, "")))
        return "\n\n".join(chunk for chunk in chunks if chunk)

    def _wrap(self, key: str, body: str) -> str:
        if not body:
            return ""
        lines = [f"{self.indent}{line}" if line else line for line in body.split("\n")]
        return f"{key} {{\n" + "\n".join(lines) + "\n}"

    def _declaration(self, key: str, value: Any) -> str | None:
        text = format_value(value)
        if text is None:
            logger.debug("Skipping %r: no value", key)
            return None
        return f"{self.indent}{to_kebab_case(key)}: {text};"

    def _assemble(self, selector: str, properties: list[str], nested_rules: list[str]) -> str:
        chunks: list[str] = []
        if properties:
            header = f"{selector} {{" if selector else "{"
            chunks.append(header + "\n" + "\n".join(properties) + "\n}")
        chunks.extend(nested_rules)
        return "\n\n".join(chunks)


def compile_style_config(
    config: Mapping[str, Any],
    parent_selector: str = "",
    *,
    indent: str = "  ",
    theme_keys: ThemeKeyMode = ThemeKeyMode.LITERAL,
) -> str:
    """Compile a style config with a throwaway compiler."""
    return StyleConfigCompiler(indent=indent, theme_keys=theme_keys).compile(config, parent_selector)
