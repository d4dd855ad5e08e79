"""Core cache implementation

This file provides the set-associative LRU cache model driven by the replayer.
Behavior:
- Cache is composed of S = 2^s sets; each set holds up to E lines.
  set_index = (address >> b) mod 2^s
  tag = address >> (s + b)
- Access returns an Outcome: HIT, MISS (a free line was filled) or
  MISS_EVICT (the set was full and its LRU line was replaced).
"""
import enum
from typing import List, Optional

from csim.core.address import Geometry
from csim.core.cache_set import CacheSet
from csim.data.stats_export import Statistics


class Outcome(enum.Enum):
    HIT = 'hit'
    MISS = 'miss'
    MISS_EVICT = 'miss eviction'

    @property
    def hit(self) -> bool:
        return self is Outcome.HIT

    @property
    def evicted(self) -> bool:
        return self is Outcome.MISS_EVICT


class Cache:
    """Set-associative cache with strict LRU replacement.
    """

    def __init__(
        self,
        set_bits: int = 1,
        associativity: int = 1,
        block_bits: int = 1,
        stats: Optional[Statistics] = None,
    ):
        self.geometry = Geometry(set_bits, associativity, block_bits)
        self.stats = stats or Statistics()
        # allocate the sets: num_sets x associativity
        self.sets: List[CacheSet] = [CacheSet(associativity) for _ in range(self.geometry.num_sets)]

    @classmethod
    def from_geometry(cls, geometry: Geometry, stats: Optional[Statistics] = None) -> 'Cache':
        return cls(geometry.set_bits, geometry.associativity, geometry.block_bits, stats=stats)

    @property
    def num_sets(self) -> int:
        return self.geometry.num_sets

    @property
    def associativity(self) -> int:
        return self.geometry.associativity

    @property
    def hits(self) -> int:
        return self.stats.hits

    @property
    def misses(self) -> int:
        return self.stats.misses

    @property
    def evictions(self) -> int:
        return self.stats.evictions

    def _decode(self, address: int):
        """Decode address into (tag, set_index)."""
        return self.geometry.decode(address)

    def access(self, address: int) -> Outcome:
        """Perform a cache access and record its outcome in `stats`."""
        tag, set_index = self._decode(address)
        cache_set = self.sets[set_index]

        if tag in cache_set:
            # hit: becomes MRU
            cache_set.touch(tag)
            outcome = Outcome.HIT
        elif cache_set.full:
            cache_set.insert(tag)
            outcome = Outcome.MISS_EVICT
        else:
            cache_set.insert(tag)
            outcome = Outcome.MISS

        self.stats.record_access(outcome.hit, outcome.evicted)
        return outcome

    def contains(self, address: int) -> bool:
        """Check whether `address` is cached without touching recency or counters."""
        tag, set_index = self._decode(address)
        return tag in self.sets[set_index]

    def contents(self) -> List[List[int]]:
        """Per-set tag lists, each ordered MRU to LRU."""
        return [s.tags() for s in self.sets]

    def reset(self):
        """Invalidate every line and zero the counters.
        """
        for s in self.sets:
            s.reset()
        self.stats.reset()
