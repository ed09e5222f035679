"""The key-value store holding strings, lists, sets and sorted sets."""

from __future__ import annotations

import time
from collections.abc import Callable

from .structures import RList, RSet, SortedSet


class Database:
    """Keyspaces for plain strings (with optional expiry), lists, sets and
    sorted sets. Each kind of value lives in its own namespace."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._strings: dict[str, str] = {}
        self._expiry: dict[str, float] = {}
        self._lists: dict[str, RList] = {}
        self._sets: dict[str, RSet] = {}
        self._sorted_sets: dict[str, SortedSet] = {}

    # Strings

    def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store ``value``; with ``ttl`` it expires after that many seconds.

        Setting without a ttl leaves any earlier expiry of the key in place.
        """
        if ttl is not None and ttl < 0:
            raise ValueError("time to live must be non-negative")
        self._strings[key] = value
        if ttl is not None:
            self._expiry[key] = self._clock() + ttl

    def get(self, key: str) -> str | None:
        if self.is_expired(key):
            self.delete(key)
            return None
        return self._strings.get(key)

    def is_expired(self, key: str) -> bool:
        deadline = self._expiry.get(key)
        return deadline is not None and self._clock() > deadline

    def delete(self, key: str) -> bool:
        """Remove a string key; return True if it held a value."""
        self._expiry.pop(key, None)
        return self._strings.pop(key, None) is not None

    # Lists

    def lpush(self, key: str, value: str) -> None:
        self._lists.setdefault(key, RList()).lpush(value)

    def rpush(self, key: str, value: str) -> None:
        self._lists.setdefault(key, RList()).rpush(value)

    def lpop(self, key: str) -> str | None:
        items = self._lists.get(key)
        return items.lpop() if items is not None else None

    def rpop(self, key: str) -> str | None:
        items = self._lists.get(key)
        return items.rpop() if items is not None else None

    def lrange(self, start: int, end: int, key: str) -> list[str] | None:
        """Return list elements ``start``..``end``, or None if no such list."""
        items = self._lists.get(key)
        return items.lrange(start, end) if items is not None else None

    # Sets

    def sadd(self, key: str, value: str) -> bool:
        return self._sets.setdefault(key, RSet()).sadd(value)

    def srem(self, key: str, value: str) -> bool:
        members = self._sets.get(key)
        return members.srem(value) if members is not None else False

    def smembers(self, key: str) -> list[str] | None:
        members = self._sets.get(key)
        return members.smembers() if members is not None else None

    def sismember(self, key: str, value: str) -> bool:
        members = self._sets.get(key)
        return members.ismember(value) if members is not None else False

    # Sorted sets

    def zadd(self, key: str, score: float, member: str) -> bool:
        return self._sorted_sets.setdefault(key, SortedSet()).zadd(score, member)

    def zrem(self, key: str, member: str) -> bool:
        zset = self._sorted_sets.get(key)
        return zset.zrem(member) if zset is not None else False

    def zrange(self, key: str, start: int, end: int) -> list[str] | None:
        zset = self._sorted_sets.get(key)
        return zset.zrange(start, end) if zset is not None else None

    def zscore(self, key: str, member: str) -> float | None:
        zset = self._sorted_sets.get(key)
        return zset.zscore(member) if zset is not None else None