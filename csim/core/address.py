"""Cache geometry and address decomposition.

An address is split into three contiguous bit ranges, low to high:

    | tag | set index (s bits) | block offset (b bits) |

The block offset never takes part in hit/miss decisions.
"""
from dataclasses import dataclass
from typing import Tuple


class ConfigurationError(ValueError):
    """Raised when cache geometry or run parameters are missing or invalid."""

    def __init__(self, message: str, missing: Tuple[str, ...] = ()):
        super().__init__(message)
        self.missing = tuple(missing)


def decode(address: int, s: int, b: int) -> Tuple[int, int]:
    """Split `address` into (tag, set_index) for `s` index bits and `b` offset bits."""
    set_index = (address >> b) & ((1 << s) - 1)
    tag = address >> (s + b)
    return tag, set_index


def encode(tag: int, set_index: int, offset: int, s: int, b: int) -> int:
    """Inverse of decode(): build an address from its parts."""
    return (tag << (s + b)) | (set_index << b) | offset


@dataclass(frozen=True)
class Geometry:
    """Shape of the simulated cache.

    - set_bits (s): number of set-index bits, S = 2^s sets
    - associativity (E): lines per set
    - block_bits (b): number of block-offset bits, B = 2^b bytes per block
    """

    set_bits: int
    associativity: int
    block_bits: int

    def __post_init__(self):
        for name in ('set_bits', 'associativity', 'block_bits'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an int, got {type(value).__name__}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")

    @property
    def num_sets(self) -> int:
        return 1 << self.set_bits

    @property
    def block_size(self) -> int:
        return 1 << self.block_bits

    def decode(self, address: int) -> Tuple[int, int]:
        return decode(address, self.set_bits, self.block_bits)

    def encode(self, tag: int, set_index: int, offset: int = 0) -> int:
        return encode(tag, set_index, offset, self.set_bits, self.block_bits)

    def describe(self) -> str:
        return (f"s={self.set_bits} E={self.associativity} b={self.block_bits} "
                f"(S={self.num_sets} sets, B={self.block_size} bytes)")
