"""Trace replay scenarios and whole-run properties."""
import random

import pytest

from csim.core.cache import Cache, Outcome
from csim.core.simulator import TraceReplayer, describe_step
from csim.core.trace import AccessEvent, AccessKind, parse_lines


def _replay(records, s=1, E=1, b=1):
    cache = Cache(set_bits=s, associativity=E, block_bits=b)
    replayer = TraceReplayer(cache)
    stats = replayer.replay_lines(f" {r}\n" for r in records)
    return stats.summary()


@pytest.mark.parametrize('records,expected', [
    (['L 0,1', 'L 0,1'], (1, 1, 0)),
    # same set, different tag, one line per set
    (['L 0,1', 'L 8,1'], (0, 2, 1)),
    (['M 0,1'], (1, 1, 0)),
    # address 2 maps to the other set
    (['L 0,1', 'L 2,1', 'L 0,1'], (1, 2, 0)),
])
def test_small_scenarios(records, expected):
    assert _replay(records) == expected


@pytest.mark.parametrize('name,s,E,b,expected', [
    ('yi.trace', 4, 2, 4, (4, 5, 2)),
    ('yi.trace', 1, 1, 1, (2, 7, 5)),
    ('dave.trace', 2, 1, 4, (2, 3, 1)),
])
def test_reference_traces(trace_path, name, s, E, b, expected):
    cache = Cache(set_bits=s, associativity=E, block_bits=b)
    stats = TraceReplayer(cache).replay_file(trace_path(name))
    assert stats.summary() == expected


def test_instruction_fetches_never_reach_cache():
    records = ['I 0400d7d4,8\n', 'I 0400d7d8,4\n', ' L 10,1\n']
    cache = Cache(set_bits=1, associativity=1, block_bits=1)
    stats = TraceReplayer(cache).replay_lines(records)
    assert stats.accesses == 1


def test_modify_second_access_always_hits():
    rng = random.Random(7)
    kinds = 'LSM'
    lines = [f" {rng.choice(kinds)} {rng.randint(0, 1 << 12):x},4\n" for _ in range(400)]
    cache = Cache(set_bits=2, associativity=2, block_bits=3)
    replayer = TraceReplayer(cache)
    seen = []
    replayer.replay_lines(lines, callback=seen.append)
    modifies = [info for info in seen if info['event'].kind is AccessKind.MODIFY]
    assert modifies
    for info in modifies:
        assert len(info['outcomes']) == 2
        assert info['outcomes'][1] is Outcome.HIT


def test_conservation():
    rng = random.Random(3)
    lines = [f" {rng.choice('LSM')} {rng.randint(0, 4096):x},1\n" for _ in range(300)]
    lines += ['I 0400d7d4,8\n'] * 10
    cache = Cache(set_bits=3, associativity=2, block_bits=2)
    replayer = TraceReplayer(cache)
    stats = replayer.replay_lines(lines)
    expected = sum(e.kind.accesses for e in parse_lines(lines))
    assert stats.hits + stats.misses == expected
    recs = replayer.records
    assert recs[AccessKind.LOAD] + recs[AccessKind.STORE] + 2 * recs[AccessKind.MODIFY] == expected
    assert stats.evictions <= stats.misses


def test_determinism():
    rng = random.Random(11)
    lines = [f" {rng.choice('LSM')} {rng.randint(0, 1 << 16):x},8\n" for _ in range(500)]
    runs = []
    for _ in range(2):
        cache = Cache(set_bits=3, associativity=4, block_bits=4)
        stats = TraceReplayer(cache).replay_lines(lines)
        runs.append((stats.summary(), cache.contents()))
    assert runs[0] == runs[1]


def test_capacity_eviction_hits_least_recently_touched():
    # 4-way set 0, 1-bit offset, 1 set bit: tags k map to address k << 2
    records = [f"L {k << 2:x},1" for k in range(4)]
    records += ['L 4,1', 'L 0,1']          # touch tags 1 and 0
    records += [f"L {9 << 2:x},1"]         # new tag, set is full
    cache = Cache(set_bits=1, associativity=4, block_bits=1)
    TraceReplayer(cache).replay_lines(f" {r}\n" for r in records)
    assert cache.stats.summary() == (2, 5, 1)
    # tag 2 was the least recently touched
    assert cache.contents()[0] == [9, 0, 1, 3]


def test_stepping_api():
    cache = Cache(set_bits=1, associativity=1, block_bits=1)
    replayer = TraceReplayer(cache)
    replayer.load_events([
        AccessEvent(AccessKind.LOAD, 0, 1),
        AccessEvent(AccessKind.MODIFY, 8, 1),
    ])
    assert replayer.has_next()
    info1 = replayer.step()
    assert info1['outcomes'] == [Outcome.MISS]
    info2 = replayer.step()
    assert info2['outcomes'] == [Outcome.MISS_EVICT, Outcome.HIT]
    assert info2['stats']['evictions'] == 1
    assert replayer.step() is None
    assert not replayer.has_next()

    replayer.reset()
    assert cache.stats.summary() == (0, 0, 0)
    replayer.load_events([AccessEvent(AccessKind.STORE, 0, 1)] * 3)
    seen = []
    stats = replayer.run_all(seen.append)
    assert len(seen) == 3
    assert stats.summary() == (2, 1, 0)


def test_describe_step_verbose_format():
    cache = Cache(set_bits=1, associativity=1, block_bits=1)
    replayer = TraceReplayer(cache)
    seen = []
    replayer.replay_lines([' L 0,1\n', ' M 8,1\n', ' S 8,1\n'], callback=seen.append)
    assert [describe_step(i) for i in seen] == [
        'L 0,1 miss',
        'M 8,1 miss eviction hit',
        'S 8,1 hit',
    ]
