"""
Compiler session.

A CompilerSession owns all mutable compilation state: the theme variable
store, the default-value table, the collected style chunks and the CSS
cache. Independent documents compile in independent sessions; calls on
one session are serialized by its lock.

The package-level API works on a process-wide default session.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from typing import Any

from .config import CompilerConfig
from .core.cache import NEEDS_STYLES, CssCache
from .core.compiler import StyleConfigCompiler
from .core.dedupe import combine_identical_rules, normalize_blank_lines
from .core.generate import assemble_css
from .core.optimizer import DefaultValueOptimizer
from .core.store import DefaultValueTable, ThemeVariableStore
from .core.variables import VariableCollector
from .specs import ThemeKeyMode

logger = logging.getLogger(__name__)


class CompilerSession:
    """
    State and pipeline for one stylesheet compile.

    Typical flow::

        session = CompilerSession()
        colors = session.create_theme({"light": {"text": "black"}, "dark": {"text": "white"}})
        session.create_style({"body": {"color": colors["text"]}})
        css = session.css()
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self.config = config or CompilerConfig()
        self.store = ThemeVariableStore()
        self.defaults = DefaultValueTable()
        self.optimizer = DefaultValueOptimizer(
            self.store, self.defaults, threshold=self.config.hoist_threshold
        )
        self.collector = VariableCollector(self.store, self.optimizer)
        self.compiler = StyleConfigCompiler(
            indent=self.config.indent, theme_keys=self.config.style_theme_keys
        )
        self.cache = CssCache(max_entries=self.config.cache_max_entries)
        self.collected_styles: list[str] = []
        self._scanned = 0
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Variables
    # -------------------------------------------------------------------------

    def create_theme(self, values: Mapping[str, Any], name: str = "") -> dict[str, Any]:
        """Collect a theme: every leaf becomes a variable (root unless light/dark scoped)."""
        with self._lock:
            return self.collector.collect(
                values, name, full_theme=True, theme_keys=ThemeKeyMode.SCOPE
            )

    def create_vars(self, values: Mapping[str, Any], name: str = "") -> dict[str, Any]:
        """
        Collect component variables.

        Only light/dark scoped leaves are written to the store; the other
        leaves become ``var(--name, default)`` references that may be
        hoisted later.
        """
        with self._lock:
            return self.collector.collect(
                values, name, full_theme=False, theme_keys=self.config.vars_theme_keys
            )

    # -------------------------------------------------------------------------
    # Styles
    # -------------------------------------------------------------------------

    def create_style(
        self,
        config_or_selectors: Mapping[str, Any] | Sequence[str],
        styles: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Compile a style config and append it to the collected styles.

        Args:
            config_or_selectors: Style config, or a list of selectors that
                share ``styles``
            styles: Styles for the selector list form

        Returns:
            The effective style config
        """
        if isinstance(config_or_selectors, Mapping):
            config = dict(config_or_selectors)
        elif isinstance(config_or_selectors, str) and styles is not None:
            config = {config_or_selectors: styles}
        elif styles is not None:
            config = {",".join(config_or_selectors): styles}
        else:
            logger.debug("Selector list given without styles, nothing to compile")
            return {}

        css = self.compiler.compile(config)
        if css:
            with self._lock:
                self.collected_styles.append(css)
        return config

    def generate_styles(self) -> str:
        """Collected style rules only, without variable blocks."""
        with self._lock:
            return "\n\n".join(self.collected_styles)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def optimize(self) -> list[str]:
        """
        Scan new style chunks, hoist repeated defaults and rewrite references.

        Returns:
            Variable names hoisted into :root by this call
        """
        with self._lock:
            for chunk in self.collected_styles[self._scanned :]:
                self.optimizer.scan(chunk)
            self._scanned = len(self.collected_styles)

            hoisted = self.optimizer.hoist()
            self.collected_styles = [self.optimizer.rewrite(c) for c in self.collected_styles]
            return hoisted

    def css(self, include_styles: bool = True, *, cache_key: str | None = None) -> str:
        """
        Generate the complete stylesheet.

        Args:
            include_styles: Append collected style rules after the variables
            cache_key: Reuse / store the result under this cache key

        Returns:
            :root block, optional dark override block and style rules
        """
        with self._lock:
            if cache_key is not None and not self.cache.should_regenerate(
                cache_key, include_styles
            ):
                logger.debug("Using cached CSS for %s", cache_key[:40])
                return self.cache.get(cache_key) or ""

            self.optimize()
            raw = assemble_css(
                self.store,
                self.collected_styles,
                include_styles=include_styles,
                media_query=self.config.dark_media_query,
                indent=self.config.indent,
            )
            result = combine_identical_rules(raw) if self.config.dedupe else normalize_blank_lines(raw)

            if cache_key is not None:
                self.cache.set(cache_key, result, "" if include_styles else NEEDS_STYLES)

            logger.info(
                "Generated CSS: %s root, %s light, %s dark variables, %s style chunks",
                len(self.store.root),
                len(self.store.light),
                len(self.store.dark),
                len(self.collected_styles),
            )
            return result

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Clear variables, default counters and collected styles. The cache is kept."""
        with self._lock:
            self.store.reset()
            self.defaults.reset()
            self.collected_styles.clear()
            self._scanned = 0

    def clear_cache(self) -> None:
        with self._lock:
            self.cache.clear()


_default_session = CompilerSession()


def get_session() -> CompilerSession:
    """Return the process-wide default session."""
    return _default_session


def configure(config: CompilerConfig) -> CompilerSession:
    """Replace the default session with a fresh one using ``config``."""
    global _default_session
    _default_session = CompilerSession(config)
    return _default_session
