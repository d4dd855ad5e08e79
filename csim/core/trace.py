"""Valgrind memory trace parsing.

Each data access record looks like ``" L 7ff000998,8"``: one leading space,
the operation, a space, a hex address, a comma and a decimal access size.
Instruction fetches (``"I 0400d7d4,8"``) start in the first column and are
skipped together with any other line whose second character is not one of
``L``, ``S`` or ``M``.
"""
import enum
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

# hex address with optional 0x prefix, then an optional ",<size>"
_RECORD_RE = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)(?:\s*,\s*(\d+))?")


class TraceSourceError(OSError):
    """The trace file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class AccessKind(enum.Enum):
    LOAD = 'L'
    STORE = 'S'
    MODIFY = 'M'

    @property
    def accesses(self) -> int:
        """Number of cache accesses one record of this kind makes."""
        return 2 if self is AccessKind.MODIFY else 1


@dataclass(frozen=True)
class AccessEvent:
    kind: AccessKind
    address: int
    size: int = 0

    def __str__(self):
        return f"{self.kind.value} {self.address:x},{self.size}"


def parse_line(line: str) -> Optional[AccessEvent]:
    """Parse one trace line. Returns None for anything that is not a data access."""
    if len(line) < 3 or line[1] not in 'LSM':
        return None
    m = _RECORD_RE.match(line, 2)
    if m is None:
        return None
    address = int(m.group(1), 16)
    size = int(m.group(2)) if m.group(2) is not None else 0
    return AccessEvent(AccessKind(line[1]), address, size)


def parse_lines(lines: Iterable[str]) -> Iterator[AccessEvent]:
    for lineno, line in enumerate(lines, 1):
        event = parse_line(line)
        if event is None:
            logger.debug("skipping trace line %d: %r", lineno, line.rstrip('\n'))
            continue
        yield event


def read_trace(path: str) -> Iterator[AccessEvent]:
    """Lazily yield the access events of the trace file at `path`.

    Raises TraceSourceError if the file cannot be opened or read.
    """
    try:
        fh = open(path, 'r', encoding='ascii', errors='replace')
    except OSError as e:
        raise TraceSourceError(path, e.strerror or str(e)) from e
    with fh:
        try:
            yield from parse_lines(fh)
        except OSError as e:
            raise TraceSourceError(path, e.strerror or str(e)) from e
