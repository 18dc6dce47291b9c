"""
Stylecraft - themed CSS compiler.

Compiles nested theme and style descriptions into flat CSS, hoisting
repeated variable defaults into :root and merging identical rules.

Usage::

    from stylecraft import create_style, create_theme, css

    colors = create_theme({"light": {"text": "black"}, "dark": {"text": "white"}})
    create_style({"body": {"color": colors["text"]}})
    print(css())

The module-level functions share one default CompilerSession; create a
CompilerSession directly to compile documents independently.

Unit and CSS function helpers for building values live in
``stylecraft.units`` (``px``, ``rem``, ...) and ``stylecraft.functions``
(``rgb``, ``clamp``, ``var_``, ...).
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ._version import __version__
from .config import CompilerConfig, load_config
from .core.cache import CssCache
from .errors import ConfigError, SourceError, StylecraftError
from .session import CompilerSession, configure, get_session
from .specs import NestedSelectors, ThemeKeyMode, ThemeMode, nested


def create_theme(values: Mapping[str, Any], name: str = "") -> dict[str, Any]:
    """Collect theme variables into the default session."""
    return get_session().create_theme(values, name)


def create_vars(values: Mapping[str, Any], name: str = "") -> dict[str, Any]:
    """Collect component variables into the default session."""
    return get_session().create_vars(values, name)


def create_style(
    config_or_selectors: Mapping[str, Any] | Sequence[str],
    styles: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Compile a style config into the default session."""
    return get_session().create_style(config_or_selectors, styles)


def css(include_styles: bool = True, *, cache_key: str | None = None) -> str:
    """Generate the complete stylesheet from the default session."""
    return get_session().css(include_styles, cache_key=cache_key)


def generate_styles() -> str:
    return get_session().generate_styles()


def reset() -> None:
    """Reset variables, counters and styles of the default session."""
    get_session().reset()


def clear_css_cache() -> None:
    get_session().clear_cache()


__all__ = [
    "__version__",
    # API
    "create_theme",
    "create_vars",
    "create_style",
    "nested",
    "css",
    "generate_styles",
    "reset",
    "clear_css_cache",
    # Sessions
    "CompilerSession",
    "get_session",
    "configure",
    # Types
    "CompilerConfig",
    "CssCache",
    "NestedSelectors",
    "ThemeKeyMode",
    "ThemeMode",
    "load_config",
    # Errors
    "StylecraftError",
    "ConfigError",
    "SourceError",
]
