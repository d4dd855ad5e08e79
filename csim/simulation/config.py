"""Run parameters for one simulation.

Filled in by the command line front end; `validate()` is called before any
cache is built.
"""
from dataclasses import dataclass
from typing import Optional

from csim.core.address import ConfigurationError, Geometry
from csim.data.stats_export import RESULTS_FILE


@dataclass
class SimulationConfig:
    set_bits: Optional[int] = None
    associativity: Optional[int] = None
    block_bits: Optional[int] = None
    trace_file: Optional[str] = None
    verbose: bool = False
    results_file: Optional[str] = RESULTS_FILE

    def validate(self) -> Geometry:
        """Check required parameters and return the cache geometry."""
        missing = [name for name in ('set_bits', 'associativity', 'block_bits', 'trace_file')
                   if getattr(self, name) in (None, 0, '')]
        if missing:
            raise ConfigurationError(f"missing required parameter(s): {', '.join(missing)}", missing=missing)
        # Geometry rejects negative values
        return Geometry(self.set_bits, self.associativity, self.block_bits)
