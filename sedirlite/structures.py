"""In-memory value types: lists, sets and sorted sets."""

from __future__ import annotations

import bisect
import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import total_ordering
from itertools import islice


def _window(items: Iterable[str], start: int, end: int) -> list[str]:
    """Return the items from ``start`` to ``end`` inclusive."""
    if start < 0 or end < 0:
        raise ValueError("range indices must be non-negative")
    if end < start:
        raise ValueError("end index must not be less than start index")
    return list(islice(items, start, end + 1))


def _same_score(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))


@dataclass
class RList:
    """A double-ended list of strings."""

    items: deque[str] = field(default_factory=deque)

    def lpush(self, value: str) -> None:
        self.items.appendleft(value)

    def lpop(self) -> str | None:
        return self.items.popleft() if self.items else None

    def rpush(self, value: str) -> None:
        self.items.append(value)

    def rpop(self) -> str | None:
        return self.items.pop() if self.items else None

    def lrange(self, start: int, end: int) -> list[str]:
        """Return elements from ``start`` to ``end`` inclusive."""
        return _window(self.items, start, end)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class RSet:
    """An unordered set of strings."""

    members: set[str] = field(default_factory=set)

    def sadd(self, value: str) -> bool:
        """Add ``value``; return True if it was not present before."""
        if value in self.members:
            return False
        self.members.add(value)
        return True

    def srem(self, value: str) -> bool:
        """Remove ``value``; return True if it was present."""
        if value not in self.members:
            return False
        self.members.remove(value)
        return True

    def smembers(self) -> list[str]:
        return list(self.members)

    def ismember(self, value: str) -> bool:
        return value in self.members

    def __len__(self) -> int:
        return len(self.members)


@total_ordering
@dataclass(frozen=True, eq=False)
class SortedMember:
    """A member of a sorted set, ordered by score and then by name.

    NaN scores compare equal to each other and greater than any number.
    """

    member: str
    score: float

    @property
    def _key(self) -> tuple[bool, float, str]:
        nan = math.isnan(self.score)
        return (nan, 0.0 if nan else self.score, self.member)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedMember):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SortedMember):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)


class SortedSet:
    """A set of members each carrying a score, kept in score order."""

    def __init__(self) -> None:
        self._scores: dict[str, float] = {}
        self._sorted: list[SortedMember] = []

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, member: object) -> bool:
        return member in self._scores

    def _discard(self, entry: SortedMember) -> None:
        index = bisect.bisect_left(self._sorted, entry)
        if index < len(self._sorted) and self._sorted[index] == entry:
            del self._sorted[index]

    def zadd(self, score: float, member: str) -> bool:
        """Set ``member``'s score.

        Returns False if the member already had exactly this score.
        """
        score = float(score)
        old = self._scores.get(member)
        if old is not None:
            if _same_score(old, score):
                return False
            self._discard(SortedMember(member, old))
        entry = SortedMember(member, score)
        index = bisect.bisect_left(self._sorted, entry)
        inserted = not (index < len(self._sorted) and self._sorted[index] == entry)
        if inserted:
            self._sorted.insert(index, entry)
        self._scores[member] = score
        return inserted

    def zrem(self, member: str) -> bool:
        """Remove ``member``; return True if it was present."""
        score = self._scores.pop(member, None)
        if score is None:
            return False
        self._discard(SortedMember(member, score))
        return True

    def zrange(self, start: int, end: int) -> list[str]:
        """Return member names by rank from ``start`` to ``end`` inclusive."""
        return _window((entry.member for entry in self._sorted), start, end)

    def zscore(self, member: str) -> float | None:
        return self._scores.get(member)