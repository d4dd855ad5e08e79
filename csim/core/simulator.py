"""TraceReplayer drives the cache with trace records.
Feeds each access event into the core Cache in program order.
"""
import logging
from typing import Callable, Dict, Iterable, List, Optional

from .cache import Cache, Outcome
from .trace import AccessEvent, AccessKind, parse_lines, read_trace
from ..data.stats_export import Statistics

logger = logging.getLogger(__name__)

Callback = Callable[[dict], None]


class TraceReplayer:
    def __init__(self, cache: Cache):
        self.cache = cache
        self.sequence: List[AccessEvent] = []
        self.index = 0
        # serviced records per kind (a modify record counts once here)
        self.records: Dict[AccessKind, int] = {kind: 0 for kind in AccessKind}

    @property
    def stats(self) -> Statistics:
        return self.cache.stats

    def reset(self):
        # clear cache contents and counters, rewind the sequence pointer
        self.cache.reset()
        self.index = 0
        self.records = {kind: 0 for kind in AccessKind}

    def load_events(self, events: Iterable[AccessEvent]):
        self.sequence = list(events)
        self.index = 0

    def has_next(self) -> bool:
        return self.index < len(self.sequence)

    def step(self) -> Optional[dict]:
        if not self.has_next():
            return None
        event = self.sequence[self.index]
        self.index += 1
        return self._service(event)

    def run_all(self, callback: Optional[Callback] = None) -> Statistics:
        while self.has_next():
            info = self.step()
            if callback:
                callback(info)
        return self.stats

    def replay(self, events: Iterable[AccessEvent], callback: Optional[Callback] = None) -> Statistics:
        """Service `events` as they arrive, without buffering them."""
        for event in events:
            info = self._service(event)
            if callback:
                callback(info)
        return self.stats

    def replay_lines(self, lines: Iterable[str], callback: Optional[Callback] = None) -> Statistics:
        return self.replay(parse_lines(lines), callback)

    def replay_file(self, path: str, callback: Optional[Callback] = None) -> Statistics:
        logger.debug("replaying %s", path)
        stats = self.replay(read_trace(path), callback)
        logger.debug("finished %s: %r", path, stats)
        return stats

    def _service(self, event: AccessEvent) -> dict:
        # a modify is a load followed by a store to the same address
        outcomes: List[Outcome] = [self.cache.access(event.address)
                                   for _ in range(event.kind.accesses)]
        self.records[event.kind] += 1
        return {
            'event': event,
            'outcomes': outcomes,
            'stats': self.stats.as_dict(),
        }


def describe_step(info: dict) -> str:
    """Verbose echo of one serviced record, e.g. ``M 20,1 miss hit``."""
    words = ' '.join(o.value for o in info['outcomes'])
    return f"{info['event']} {words}"
