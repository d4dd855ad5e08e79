"""Simulation wrapper used by the command line

Turns a SimulationConfig into a fresh cache and replays the configured
trace file against it.
"""
import logging
from typing import Callable, Iterable, Optional

from csim.core.cache import Cache
from csim.core.simulator import TraceReplayer
from csim.data.stats_export import Statistics
from csim.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self, config: SimulationConfig):
        self.config = config
        self.geometry = config.validate()
        self.cache: Optional[Cache] = None
        self.replayer: Optional[TraceReplayer] = None

    def _create_cache(self):
        # every run starts from an empty cache; nothing carries over
        self.cache = Cache.from_geometry(self.geometry)
        self.replayer = TraceReplayer(self.cache)
        logger.debug("built cache %s", self.geometry.describe())

    def run(self, callback: Optional[Callable[[dict], None]] = None) -> Statistics:
        """Replay the configured trace file and return the run's statistics."""
        self._create_cache()
        return self.replayer.replay_file(self.config.trace_file, callback)

    def run_lines(self, lines: Iterable[str], callback: Optional[Callable[[dict], None]] = None) -> Statistics:
        """Same as run() but reads records from `lines` instead of the trace file."""
        self._create_cache()
        return self.replayer.replay_lines(lines, callback)
