"""Cache model, address decoding and trace replay."""
from .address import ConfigurationError, Geometry, decode, encode
from .cache import Cache, Outcome
from .cache_set import CacheLine, CacheSet
from .simulator import TraceReplayer
from .trace import AccessEvent, AccessKind, TraceSourceError, parse_line, read_trace

__all__ = [
    "AccessEvent", "AccessKind", "Cache", "CacheLine", "CacheSet", "ConfigurationError",
    "Geometry", "Outcome", "TraceReplayer", "TraceSourceError", "decode", "encode",
    "parse_line", "read_trace",
]
