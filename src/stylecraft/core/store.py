"""
Theme variable store and default-value tracking table.

Holds the three variable partitions (root, light, dark) and the usage
counters the optimizer uses to decide which defaults to hoist.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..specs import DefaultValueEntry, ThemeMode

logger = logging.getLogger(__name__)


def _mode(mode: ThemeMode | str) -> ThemeMode:
    return mode if isinstance(mode, ThemeMode) else ThemeMode(mode)


class ThemeVariableStore:
    """
    Partitioned CSS custom property storage.

    Every name starts with ``--``. Later writes to the same name and
    partition overwrite earlier ones.
    """

    def __init__(self) -> None:
        self._partitions: dict[ThemeMode, dict[str, str]] = {mode: {} for mode in ThemeMode}

    def set(self, mode: ThemeMode | str, name: str, value: str) -> None:
        """Write a variable into one partition."""
        if not name.startswith("--"):
            name = f"--{name}"
        self._partitions[_mode(mode)][name] = value

    def get(self, mode: ThemeMode | str, name: str) -> str | None:
        return self._partitions[_mode(mode)].get(name)

    def has(self, mode: ThemeMode | str, name: str) -> bool:
        return name in self._partitions[_mode(mode)]

    def defines(self, name: str) -> bool:
        """Whether any partition holds the name."""
        return any(name in partition for partition in self._partitions.values())

    def partition(self, mode: ThemeMode | str) -> dict[str, str]:
        """Return a copy of one partition in insertion order."""
        return dict(self._partitions[_mode(mode)])

    @property
    def root(self) -> dict[str, str]:
        return self.partition(ThemeMode.ROOT)

    @property
    def light(self) -> dict[str, str]:
        return self.partition(ThemeMode.LIGHT)

    @property
    def dark(self) -> dict[str, str]:
        return self.partition(ThemeMode.DARK)

    def is_empty(self, mode: ThemeMode | str) -> bool:
        return not self._partitions[_mode(mode)]

    def reset(self) -> None:
        """Clear every partition."""
        for partition in self._partitions.values():
            partition.clear()


class DefaultValueTable:
    """Per-literal usage counters for var() default values."""

    def __init__(self) -> None:
        self._entries: dict[str, DefaultValueEntry] = {}

    def track(self, reference: str, default_value: str) -> DefaultValueEntry:
        """
        Record one use of ``default_value`` as the fallback of ``reference``.

        Args:
            reference: Variable name without the leading ``--``
            default_value: Literal fallback text

        Returns:
            The updated entry for the literal
        """
        entry = self._entries.get(default_value)
        if entry is None:
            entry = DefaultValueEntry(value=default_value)
            self._entries[default_value] = entry
        entry.ref_counts[reference] = entry.ref_counts.get(reference, 0) + 1
        entry.count += 1
        return entry

    def get(self, default_value: str) -> DefaultValueEntry | None:
        return self._entries.get(default_value)

    def __iter__(self) -> Iterator[DefaultValueEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self) -> None:
        self._entries.clear()
