"""
Default-value optimizer.

Counts how often each literal is used as a ``var()`` fallback and hoists
frequently repeated fallbacks into root variables. Hoisting runs once per
compile, after every usage has been seen:

1. scan - track every ``var(--name, default)`` in generated CSS
2. hoist - per literal, promote the first reference (in first-seen
   order) whose count reaches the threshold
3. rewrite - replace ``var(--name, default)`` with ``var(--name)``
   wherever root now holds exactly that default
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from ..config import DEFAULT_HOIST_THRESHOLD
from ..specs import DefaultValueEntry, ThemeMode
from .store import DefaultValueTable, ThemeVariableStore

logger = logging.getLogger(__name__)

_VAR_START_RE = re.compile(r"var\(\s*--([a-zA-Z0-9_-]+)\s*,\s*")


@dataclass(frozen=True)
class VarReference:
    """A ``var(--name, default)`` occurrence located in CSS text."""

    name: str
    default: str
    start: int
    end: int
    default_start: int
    default_end: int


def iter_var_references(text: str) -> Iterator[VarReference]:
    """
    Yield the outermost var() references that carry a default.

    Defaults may contain balanced parentheses (``clamp(1rem, 2vw, 3rem)``);
    references nested inside a default are not yielded here.
    """
    pos = 0
    while True:
        match = _VAR_START_RE.search(text, pos)
        if match is None:
            return
        depth = 0
        close = -1
        for i in range(match.end(), len(text)):
            char = text[i]
            if char == "(":
                depth += 1
            elif char == ")":
                if depth == 0:
                    close = i
                    break
                depth -= 1
        if close == -1:
            return
        yield VarReference(
            name=match.group(1),
            default=text[match.end() : close].strip(),
            start=match.start(),
            end=close + 1,
            default_start=match.end(),
            default_end=close,
        )
        pos = close + 1


class DefaultValueOptimizer:
    """Tracks var() defaults and hoists repeated ones into the root partition."""

    def __init__(
        self,
        store: ThemeVariableStore,
        table: DefaultValueTable,
        threshold: int = DEFAULT_HOIST_THRESHOLD,
    ) -> None:
        self.store = store
        self.table = table
        self.threshold = threshold

    def track(self, reference: str, default_value: str) -> DefaultValueEntry:
        """Count one use of ``default_value`` as the fallback of ``reference``."""
        return self.table.track(reference, default_value)

    def resolve(self, reference: str, default_value: str) -> str:
        """
        Return the reference text for a variable.

        Bare ``var(--ref)`` when root already holds exactly this value, or
        when the light partition defines the name (light values are emitted
        as :root defaults); otherwise ``var(--ref, default)``.
        """
        name = f"--{reference}"
        if self.store.get(ThemeMode.ROOT, name) == default_value or self.store.has(
            ThemeMode.LIGHT, name
        ):
            return f"var({name})"
        return f"var({name}, {default_value})"

    def scan(self, css_text: str) -> int:
        """Track every var() default found in CSS text. Returns the number tracked."""
        tracked = 0
        for ref in iter_var_references(css_text):
            self.track(ref.name, ref.default)
            tracked += 1 + self.scan(ref.default)
        return tracked

    def hoist(self) -> list[str]:
        """
        Promote repeated defaults into root variables.

        Returns:
            Names written to the root partition by this call
        """
        hoisted: list[str] = []
        for entry in self.table:
            if entry.optimized:
                continue
            for reference, count in entry.ref_counts.items():
                if count < self.threshold:
                    continue
                name = f"--{reference}"
                current = self.store.get(ThemeMode.ROOT, name)
                if current == entry.value:
                    entry.optimized = True
                    break
                if current is not None:
                    logger.debug("Not hoisting %s: root already holds %s", name, current)
                    continue
                self.store.set(ThemeMode.ROOT, name, entry.value)
                entry.optimized = True
                hoisted.append(name)
                logger.debug("Hoisted %s: %s (%s uses)", name, entry.value, count)
                break
        if hoisted:
            logger.info("Hoisted %s default value(s) into :root", len(hoisted))
        return hoisted

    def rewrite(self, css_text: str) -> str:
        """Shorten var() references whose default matches the root value."""
        root = self.store.root
        out: list[str] = []
        pos = 0
        for ref in iter_var_references(css_text):
            out.append(css_text[pos : ref.start])
            if root.get(f"--{ref.name}") == ref.default:
                out.append(f"var(--{ref.name})")
            else:
                out.append(css_text[ref.start : ref.default_start])
                out.append(self.rewrite(css_text[ref.default_start : ref.default_end]))
                out.append(css_text[ref.default_end : ref.end])
            pos = ref.end
        out.append(css_text[pos:])
        return "".join(out)

    def process(self, chunks: list[str]) -> list[str]:
        """Hoist, then rewrite every chunk. Chunks must already be scanned."""
        self.hoist()
        return [self.rewrite(chunk) for chunk in chunks]
