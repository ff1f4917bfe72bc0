"""Local identity sequencing for IDENTITY_INSERT loads."""

from dataclasses import dataclass


@dataclass
class IdentityState:
    """
    Identity metadata read once per table.

    Attributes:
        seed: IDENT_SEED of the table
        increment: IDENT_INCR of the table
        current: IDENT_CURRENT of the table
        row_count: Rows in the table when generation starts
    """

    seed: int = 1
    increment: int = 1
    current: int | None = None
    row_count: int = 0


class IdentitySequencer:
    """
    Hand out identity values without a round trip per row.

    A truncated or empty table restarts at the seed; otherwise the sequence
    continues after the current identity.

    Example:
        >>> seq = IdentitySequencer(IdentityState(seed=1, increment=1, current=1), fresh=True)
        >>> [seq.next() for _ in range(3)]
        [1, 2, 3]
    """

    def __init__(self, state: IdentityState, fresh: bool = False):
        self.increment = state.increment or 1
        if fresh or state.row_count == 0 or state.current is None:
            self._next = state.seed
        else:
            self._next = state.current + self.increment

    def next(self) -> int:
        value = self._next
        self._next += self.increment
        return value

    def peek(self) -> int:
        return self._next
