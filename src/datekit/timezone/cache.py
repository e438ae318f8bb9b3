from __future__ import annotations

import logging
from typing import Callable, Iterator

logger = logging.getLogger(__name__)


class ZoneNameCache:
    """
    Memo of zone display-name lists, keyed by list flavour.

    Entries are built on first request and kept for the lifetime of the
    cache; the underlying zone data is assumed not to change.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[str]] = {}

    def get_or_build(self, key: str, build: Callable[[], list[str]]) -> list[str]:
        entry = self._entries.get(key)
        if entry is None:
            entry = build()
            self._entries[key] = entry
            logger.debug("Cached %d zone names under %r.", len(entry), key)
        return entry

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"ZoneNameCache(keys={sorted(self._entries)})"
