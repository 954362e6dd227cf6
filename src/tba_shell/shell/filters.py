from __future__ import annotations


class MalformedFilter(ValueError):
    """A filter pair did not have the form <key>=<value>."""


class FilterSet:
    """Parsed ``key=value&key=value`` filters. Later duplicates win."""

    def __init__(self, filters: dict[str, str] | None = None):
        self._filters: dict[str, str] = dict(filters or {})

    @classmethod
    def parse(cls, text: str) -> "FilterSet":
        filters: dict[str, str] = {}
        for part in text.split("&"):
            pair = part.split("=")
            if len(pair) != 2 or not pair[0] or not pair[1]:
                raise MalformedFilter('Invalid filter syntax, expecting "<key>=<value>".')
            filters[pair[0]] = pair[1]
        return cls(filters)

    def value_of(self, key: str) -> str | None:
        return self._filters.get(key)

    def count(self) -> int:
        return len(self._filters)

    def keys(self) -> frozenset[str]:
        return frozenset(self._filters)

    def __repr__(self) -> str:
        return f"FilterSet({self._filters!r})"
