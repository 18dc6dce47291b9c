"""
CSS unit helpers.

Each helper formats one or more values with a unit and joins them with
spaces::

    px(10)        # "10px"
    rem(1, 2.5)   # "1rem 2.5rem"
"""

from __future__ import annotations

from .core.compiler import format_value

CSSUnit = int | float | str


def _with_unit(unit: str, values: tuple[CSSUnit, ...]) -> str:
    return " ".join(f"{format_value(value)}{unit}" for value in values)


def px(*values: CSSUnit) -> str:
    return _with_unit("px", values)


def rem(*values: CSSUnit) -> str:
    return _with_unit("rem", values)


def em(*values: CSSUnit) -> str:
    return _with_unit("em", values)


def perc(*values: CSSUnit) -> str:
    """Percentages: ``perc(50, 75)`` gives ``"50% 75%"``."""
    return _with_unit("%", values)


def vw(*values: CSSUnit) -> str:
    return _with_unit("vw", values)


def vh(*values: CSSUnit) -> str:
    return _with_unit("vh", values)


def vmin(*values: CSSUnit) -> str:
    return _with_unit("vmin", values)


def vmax(*values: CSSUnit) -> str:
    return _with_unit("vmax", values)


def ch(*values: CSSUnit) -> str:
    return _with_unit("ch", values)


def ex(*values: CSSUnit) -> str:
    return _with_unit("ex", values)


def fr(*values: CSSUnit) -> str:
    return _with_unit("fr", values)


def deg(*values: CSSUnit) -> str:
    return _with_unit("deg", values)


def ms(*values: CSSUnit) -> str:
    return _with_unit("ms", values)


def s(*values: CSSUnit) -> str:
    return _with_unit("s", values)
