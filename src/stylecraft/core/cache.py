"""
CSS cache.

Memoizes generated CSS under a key derived from the input configuration.
Metadata is kept as a trailing HTML comment on the stored text and is
stripped on read.
"""

from __future__ import annotations

import json
import logging
import re
from collections import OrderedDict
from enum import Enum
from typing import Any

from ..specs import NestedSelectors

logger = logging.getLogger(__name__)

NEEDS_STYLES = "NEEDS_STYLES"

_METADATA_RE = re.compile(r"<!--(?P<metadata>.*?)-->\Z", re.DOTALL)


def _jsonable(obj: Any) -> Any:
    if isinstance(obj, NestedSelectors):
        return obj.to_dict()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    return str(obj)


class CssCache:
    """
    In-memory cache of generated CSS.

    Args:
        max_entries: Upper bound on stored entries. None keeps every entry;
            otherwise the least recently written entry is evicted first.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self.max_entries = max_entries
        self._entries: OrderedDict[str, str] = OrderedDict()

    @staticmethod
    def generate_key(config: Any) -> str:
        """Deterministic key from a configuration object (key order matters)."""
        return json.dumps(config, default=_jsonable, separators=(",", ":"), ensure_ascii=False)

    def set(self, key: str, css: str, metadata: str = "") -> None:
        """Store CSS, tagging it with ``metadata`` when given."""
        self._entries[key] = f"{css}<!--{metadata}-->" if metadata else css
        self._entries.move_to_end(key)
        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cached CSS %s", evicted[:40])

    def get(self, key: str) -> str | None:
        """Return the cached CSS without its metadata comment."""
        value = self._entries.get(key)
        if value is None:
            return None
        return _METADATA_RE.sub("", value)

    def get_metadata(self, key: str) -> str | None:
        value = self._entries.get(key)
        if value is None:
            return None
        match = _METADATA_RE.search(value)
        return match.group("metadata") if match else ""

    def has(self, key: str) -> bool:
        return key in self._entries

    def should_regenerate(self, key: str, include_styles: bool = True) -> bool:
        """
        Whether CSS for ``key`` has to be generated again.

        True when nothing is cached, or when styles are requested and the
        cached entry was generated without them.
        """
        if key not in self._entries:
            return True
        return include_styles and NEEDS_STYLES in (self.get_metadata(key) or "")

    def invalidate(self, key: str) -> bool:
        """Drop one entry. Returns whether it existed."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
