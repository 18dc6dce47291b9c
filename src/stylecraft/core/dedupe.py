"""
Rule deduplication pass.

Merges top-level rules whose bodies are textually identical into a single
rule with a comma-joined selector list. The comparison is byte-for-byte:
bodies that differ only in whitespace are left alone.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Unindented "selector {\n body \n}" blocks; at-rule headers and the
# indented rules inside at-rule bodies never match.
_RULE_RE = re.compile(
    r"^(?P<selector>[^\s@{}][^{}\n]*?) \{\n(?P<body>[^{}]*?)\n\}$",
    re.MULTILINE,
)
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def normalize_blank_lines(css: str) -> str:
    """Collapse three or more consecutive newlines to exactly two."""
    return _BLANK_LINES_RE.sub("\n\n", css)


def combine_identical_rules(css: str) -> str:
    """
    Merge rules with identical bodies.

    Rules whose selector is already a comma list are not considered. For
    every body shared by two or more distinct selectors, the first rule is
    rewritten to carry all of them and the later rules are removed.

    Args:
        css: Assembled CSS text

    Returns:
        CSS text with merged rules and normalized blank lines
    """
    groups: dict[str, list[re.Match[str]]] = {}
    for match in _RULE_RE.finditer(css):
        if "," in match.group("selector"):
            continue
        groups.setdefault(match.group("body"), []).append(match)

    replacements: dict[int, tuple[int, str]] = {}
    for body, matches in groups.items():
        selectors = list(dict.fromkeys(m.group("selector").strip() for m in matches))
        if len(selectors) < 2:
            continue
        first, *rest = matches
        merged = ", ".join(selectors)
        replacements[first.start()] = (first.end(), f"{merged} {{\n{body}\n}}")
        for match in rest:
            replacements[match.start()] = (match.end(), "")
        logger.debug("Merged %s rules into %r", len(matches), merged)

    if not replacements:
        return normalize_blank_lines(css)

    out: list[str] = []
    pos = 0
    for start in sorted(replacements):
        end, text = replacements[start]
        out.append(css[pos:start])
        out.append(text)
        pos = end
    out.append(css[pos:])

    result = normalize_blank_lines("".join(out))
    if css.endswith("\n"):
        result = result.rstrip("\n") + "\n"
    return result
