"""
Variable block generation and final CSS assembly.

Produces the ``:root`` block (root variables plus light variables as
defaults), the dark-mode override block, and the assembled stylesheet.
"""

from __future__ import annotations

from ..config import DEFAULT_DARK_MEDIA_QUERY
from ..specs import CssVariableSet
from .store import ThemeVariableStore


def generate_root_variables(store: ThemeVariableStore, indent: str = "  ") -> CssVariableSet:
    """
    Generate the :root block.

    Light variables are emitted as the defaults and win over a root
    variable of the same name.
    """
    declarations = store.root
    declarations.update(store.light)

    variables = [":root {"]
    for name, value in declarations.items():
        variables.append(f"{indent}{name}: {value};")
    variables.append("}")

    return CssVariableSet(variables=variables, css="\n".join(variables))


def generate_dark_variables(
    store: ThemeVariableStore,
    media_query: str = DEFAULT_DARK_MEDIA_QUERY,
    indent: str = "  ",
) -> CssVariableSet:
    """Generate dark overrides wrapped in a colour-scheme media query."""
    variables = [f"@media {media_query} {{", f"{indent}:root {{"]
    for name, value in store.dark.items():
        variables.append(f"{indent * 2}{name}: {value};")
    variables.append(f"{indent}}}")
    variables.append("}")

    return CssVariableSet(variables=variables, css="\n".join(variables))


def assemble_css(
    store: ThemeVariableStore,
    styles: list[str],
    *,
    include_styles: bool = True,
    media_query: str = DEFAULT_DARK_MEDIA_QUERY,
    indent: str = "  ",
) -> str:
    """
    Join variable blocks and collected styles.

    Blocks are separated by one blank line and the result ends with a
    single newline.
    """
    blocks = [generate_root_variables(store, indent).css]

    if store.dark:
        blocks.append(generate_dark_variables(store, media_query, indent).css)

    if include_styles:
        blocks.extend(chunk for chunk in styles if chunk)

    return "\n\n".join(blocks) + "\n"
