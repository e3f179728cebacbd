"""Connection enumeration for a locality preserving crossbar switch.

Implements the construction from Sahin, "A locality preserving one-sided
binary tree - crossbar switch wiring design algorithm" (CISS 2015).

The wiring plan is produced one connection at a time from two cursors:

- ``outer_idx`` (``i``) is the distance between the two terminals being
  joined. Level ``i`` occupies blocks ``2i - 2`` and ``2i - 1``.
- ``inner_idx`` (``j``) walks the start terminal of the current level.

While ``2i < N`` a level joins every terminal ``j`` to ``(i + j) mod N``
(the *full block* regime, N wires). When ``2i == N`` the pairs at distance
``i`` and ``N - i`` coincide, so only ``i`` wires remain (the *half block*
regime). Nothing is precomputed; every connection is a closed-form function
of ``(N, i, j)``.
"""

from __future__ import annotations

__all__ = ["Crossbar", "enumerate_connections"]

from xbar.crossbar.model import Connection, Position
from xbar.crossbar.topology import blocks, columns, rows, validate_count


def _half_block(n: int, i: int, j: int) -> Connection:
    block = 2 * i - 2
    return Connection(
        start=Position.at(block, j, n),
        end=Position.at(block, i + j, n),
        col_idx=j,
    )


def _full_block_reverse(n: int, i: int, j: int) -> Connection:
    """Wire drawn upwards in the odd block of the level.

    Used when the repetition is odd and ``j + i`` wraps past the last
    terminal. Once three repetitions are in use the wire moves to the
    upper half of the columns.
    """
    block = 2 * i - 1
    if j < 3 * i:
        col = j % i
    else:
        col = i + min(j % i, j + i - n)
    return Connection(
        start=Position.at(block, i + j - n, n),
        end=Position.at(block, j, n),
        col_idx=col,
    )


def _full_block_forward(
    n: int, i: int, j: int, is_odd: bool, is_wrap: bool
) -> Connection:
    block = 2 * i - 2
    return Connection(
        start=Position.at(block + int(is_odd), j, n),
        end=Position.at(block + int(is_odd or is_wrap), (i + j) % n, n),
        col_idx=j % i,
    )


def _full_block(n: int, i: int, j: int) -> Connection:
    is_odd = ((j // i) & 1) == 1
    is_wrap = i + j >= n
    if is_odd and is_wrap:
        return _full_block_reverse(n, i, j)
    return _full_block_forward(n, i, j, is_odd, is_wrap)


class Crossbar:
    """Iterator over the connections of a crossbar with ``count`` terminals.

    Single pass: once exhausted it keeps raising StopIteration. Build a new
    instance to enumerate again; two instances for the same count yield
    identical sequences.

    >>> conns = list(Crossbar(10))
    >>> len(conns)
    45
    """

    blocks = staticmethod(blocks)
    rows = staticmethod(rows)
    columns = staticmethod(columns)

    def __init__(self, count: int) -> None:
        self.count = validate_count(count)
        self._outer_idx = 1
        self._inner_idx = 0

    def __iter__(self) -> Crossbar:
        return self

    def __next__(self) -> Connection:
        n = self.count
        rem = 2 * self._outer_idx
        if rem > n:
            raise StopIteration
        if rem == n:
            conn = _half_block(n, self._outer_idx, self._inner_idx)
            self._step(self._outer_idx)
        else:
            conn = _full_block(n, self._outer_idx, self._inner_idx)
            self._step(n)
        return conn

    def __repr__(self) -> str:
        return (
            f"Crossbar(count={self.count}, outer_idx={self._outer_idx}, "
            f"inner_idx={self._inner_idx})"
        )

    def _step(self, inner_limit: int) -> None:
        self._inner_idx += 1
        if self._inner_idx >= inner_limit:
            self._inner_idx = 0
            self._outer_idx += 1


def enumerate_connections(count: int) -> Crossbar:
    """Return a fresh iterator over the wiring plan for ``count`` terminals."""
    return Crossbar(count)
