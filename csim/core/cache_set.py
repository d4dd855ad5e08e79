"""One set of the cache, kept in strict LRU order.

Lines are stored in an OrderedDict keyed by tag. OrderedDict keeps insertion
order; an accessed line is moved to the end, so the least recently used line
is always at the beginning and the most recently used at the end.
"""
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CacheLine:
    """container for one way of a set."""

    tag: int = 0
    valid: bool = False


class CacheSet:
    """Bounded, recency-ordered collection of valid lines.

    API:
    - find(tag): line holding `tag`, or None
    - touch(tag): mark `tag` as most recently used
    - insert(tag): add a new MRU line, evicting the LRU line when full;
      returns the evicted line or None
    - lines(): lines from MRU to LRU
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError("capacity must be >= 1")
        self.capacity = int(capacity)
        self._od: "OrderedDict[int, CacheLine]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._od)

    def __contains__(self, tag: int) -> bool:
        return tag in self._od

    @property
    def full(self) -> bool:
        return len(self._od) >= self.capacity

    def find(self, tag: int) -> Optional[CacheLine]:
        return self._od.get(tag)

    def touch(self, tag: int) -> None:
        self._od.move_to_end(tag)

    def insert(self, tag: int) -> Optional[CacheLine]:
        evicted = None
        if self.full:
            _, evicted = self._od.popitem(last=False)
        self._od[tag] = CacheLine(tag=tag, valid=True)
        return evicted

    def lines(self) -> List[CacheLine]:
        return list(reversed(self._od.values()))

    def tags(self) -> List[int]:
        """Tags from MRU to LRU."""
        return list(reversed(self._od.keys()))

    def reset(self) -> None:
        self._od.clear()
