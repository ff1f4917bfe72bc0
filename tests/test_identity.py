"""Tests for local identity sequencing."""

from dbdatagen.identity import IdentitySequencer, IdentityState


def test_truncated_table_starts_at_seed():
    """Should give the first row the seed, not seed + increment."""
    seq = IdentitySequencer(IdentityState(seed=1, increment=1, current=500, row_count=0), fresh=True)

    assert [seq.next() for _ in range(3)] == [1, 2, 3]


def test_empty_table_starts_at_seed():
    seq = IdentitySequencer(IdentityState(seed=100, increment=5, current=100, row_count=0))

    assert [seq.next() for _ in range(3)] == [100, 105, 110]


def test_populated_table_continues_after_current():
    """Should continue at current + increment when rows exist."""
    seq = IdentitySequencer(IdentityState(seed=1, increment=2, current=41, row_count=20))

    assert [seq.next() for _ in range(3)] == [43, 45, 47]


def test_negative_increment():
    seq = IdentitySequencer(IdentityState(seed=-1, increment=-1, current=None, row_count=0))

    assert [seq.next() for _ in range(3)] == [-1, -2, -3]


def test_peek_does_not_advance():
    seq = IdentitySequencer(IdentityState(seed=10))

    assert seq.peek() == 10
    assert seq.next() == 10
    assert seq.peek() == 11
