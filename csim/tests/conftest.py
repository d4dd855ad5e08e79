"""Test configuration for pytest.

Ensure the repository root is on sys.path so tests can import the `csim`
package without installing it, and provide helpers for writing trace files.
"""
import os
import sys

import pytest

# Compute project root: two directories above this file (csim/tests -> csim -> project root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

TRACES_DIR = os.path.join(ROOT, 'traces')


@pytest.fixture
def write_trace(tmp_path):
    """Return a function that writes trace records to a file and returns its path.

    Records are written one per line with the leading space Valgrind uses
    for data accesses, e.g. write_trace("L 0,1", "M 8,1").
    """
    def _write(*records, name='test.trace'):
        path = tmp_path / name
        path.write_text(''.join(f" {r}\n" for r in records))
        return str(path)
    return _write


@pytest.fixture
def trace_path():
    def _path(name):
        return os.path.join(TRACES_DIR, name)
    return _path
