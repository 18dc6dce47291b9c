"""
CSS function-string builders.

Thin formatters producing CSS function calls for use as property or
variable values, e.g. ``clamp("1rem", "5vw", "2rem")``.
"""

from __future__ import annotations

from .core.compiler import format_value

Number = int | float


def _fmt(value: Number | str) -> str:
    return format_value(value) or ""


# =============================================================================
# Colors
# =============================================================================


def rgb(r: Number, g: Number, b: Number) -> str:
    return f"rgb({_fmt(r)}, {_fmt(g)}, {_fmt(b)})"


def rgba(r: Number, g: Number, b: Number, a: Number) -> str:
    return f"rgba({_fmt(r)}, {_fmt(g)}, {_fmt(b)}, {_fmt(a)})"


def hsl(h: Number, s: Number, l: Number) -> str:  # noqa: E741
    return f"hsl({_fmt(h)}, {_fmt(s)}%, {_fmt(l)}%)"


def hsla(h: Number, s: Number, l: Number, a: Number) -> str:  # noqa: E741
    return f"hsla({_fmt(h)}, {_fmt(s)}%, {_fmt(l)}%, {_fmt(a)})"


def hwb(h: Number, w: Number, b: Number) -> str:
    return f"hwb({_fmt(h)} {_fmt(w)}% {_fmt(b)}%)"


def lab(l: Number, a: Number, b: Number) -> str:  # noqa: E741
    return f"lab({_fmt(l)}% {_fmt(a)} {_fmt(b)})"


def lch(l: Number, c: Number, h: Number) -> str:  # noqa: E741
    return f"lch({_fmt(l)}% {_fmt(c)} {_fmt(h)})"


def oklab(l: Number, a: Number, b: Number) -> str:  # noqa: E741
    return f"oklab({_fmt(l)} {_fmt(a)} {_fmt(b)})"


def oklch(l: Number, c: Number, h: Number) -> str:  # noqa: E741
    return f"oklch({_fmt(l)} {_fmt(c)} {_fmt(h)})"


def color_mix(method: str, color1: str, color2: str, percentage: Number | None = None) -> str:
    """``color_mix("in srgb", "red", "blue", 30)`` gives ``color-mix(in srgb, red, blue 30%)``."""
    if percentage is not None:
        return f"color-mix({method}, {color1}, {color2} {_fmt(percentage)}%)"
    return f"color-mix({method}, {color1}, {color2})"


# =============================================================================
# Math & layout
# =============================================================================


def calc(expression: str) -> str:
    return f"calc({expression})"


def min_(*values: str) -> str:
    return f"min({', '.join(values)})"


def max_(*values: str) -> str:
    return f"max({', '.join(values)})"


def clamp(minimum: str, preferred: str, maximum: str) -> str:
    return f"clamp({minimum}, {preferred}, {maximum})"


def minmax(minimum: str, maximum: str) -> str:
    return f"minmax({minimum}, {maximum})"


def fit_content(dimension: str) -> str:
    return f"fit-content({dimension})"


def repeat(count: int | str, pattern: str) -> str:
    return f"repeat({count}, {pattern})"


# =============================================================================
# Transforms
# =============================================================================


def translate(x: str, y: str) -> str:
    return f"translate({x}, {y})"


def translate_x(x: str) -> str:
    return f"translateX({x})"


def translate_y(y: str) -> str:
    return f"translateY({y})"


def rotate(angle: str) -> str:
    return f"rotate({angle})"


def scale(x: Number, y: Number | None = None) -> str:
    if y is not None:
        return f"scale({_fmt(x)}, {_fmt(y)})"
    return f"scale({_fmt(x)})"


def skew(x: str, y: str | None = None) -> str:
    return f"skew({x}, {y})" if y is not None else f"skew({x})"


# =============================================================================
# Filters & images
# =============================================================================


def blur(radius: str) -> str:
    return f"blur({radius})"


def brightness(amount: Number) -> str:
    return f"brightness({_fmt(amount)})"


def drop_shadow(x: str, y: str, blur: str | None = None, color: str | None = None) -> str:
    parts = [x, y]
    if blur is not None:
        parts.append(blur)
    if color is not None:
        parts.append(color)
    return f"drop-shadow({' '.join(parts)})"


def linear_gradient(direction: str, *color_stops: str) -> str:
    return f"linear-gradient({direction}, {', '.join(color_stops)})"


def url(path: str) -> str:
    return f"url({path})"


# =============================================================================
# Utilities
# =============================================================================


def var_(name: str, fallback: str | None = None) -> str:
    """
    Custom property reference.

    ``var_("theme-color")`` gives ``var(--theme-color)`` and
    ``var_("--theme-color", "#fff")`` gives ``var(--theme-color, #fff)``.
    """
    if not name.startswith("--"):
        name = f"--{name}"
    return f"var({name}, {fallback})" if fallback else f"var({name})"


def env(name: str, fallback: str | None = None) -> str:
    return f"env({name}, {fallback})" if fallback else f"env({name})"


def attr(attribute_name: str) -> str:
    return f"attr({attribute_name})"


def counter(name: str, style: str | None = None) -> str:
    return f"counter({name}, {style})" if style else f"counter({name})"
