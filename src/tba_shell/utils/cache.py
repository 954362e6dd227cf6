from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    last_modified: float


class ResponseCache:
    """In-memory store of the last good response per request URL.

    Entries live as long as the owning client; there is no eviction.
    Not safe for concurrent read-modify-write.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def get(self, url: str) -> CacheEntry | None:
        return self._entries.get(url)

    def put(self, url: str, data: Any, last_modified: float) -> CacheEntry:
        entry = CacheEntry(data=data, last_modified=last_modified)
        self._entries[url] = entry
        return entry

    def last_modified(self, url: str) -> float:
        entry = self._entries.get(url)
        return entry.last_modified if entry is not None else 0.0

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)
