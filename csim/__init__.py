"""LRU set-associative cache simulator for Valgrind memory traces."""

__version__ = "0.1.0"
