"""Crossbar dimensions as functions of the terminal count.

A crossbar with ``N`` terminals repeats every terminal once per block,
using ``N - 1`` blocks, and needs ``floor(N / 2)`` wiring columns.
"""

from __future__ import annotations

__all__ = ["Topology", "blocks", "columns", "rows", "topology", "validate_count"]

from dataclasses import dataclass

MIN_TERMINALS = 2


def validate_count(count: int) -> int:
    """Return ``count`` if it is a usable terminal count, else raise ValueError."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(
            f"terminal count must be an integer >= {MIN_TERMINALS}, got {count!r}"
        )
    if count < MIN_TERMINALS:
        raise ValueError(
            f"terminal count must be an integer >= {MIN_TERMINALS}, got {count}"
        )
    return count


def blocks(count: int) -> int:
    """Number of blocks: ``N - 1``."""
    return validate_count(count) - 1


def rows(count: int) -> int:
    """Number of rows: ``N * (N - 1)``, i.e. N terminals in each block."""
    return validate_count(count) * (count - 1)


def columns(count: int) -> int:
    """Number of wiring columns: ``floor(N / 2)``."""
    return validate_count(count) // 2


@dataclass(frozen=True)
class Topology:
    """Dimensions of a crossbar switch."""

    count: int
    blocks: int
    rows: int
    columns: int

    @property
    def connections(self) -> int:
        """Number of wires, one per unordered terminal pair."""
        return self.rows // 2


def topology(count: int) -> Topology:
    """Compute blocks, rows and columns for ``count`` terminals."""
    return Topology(
        count=count,
        blocks=blocks(count),
        rows=rows(count),
        columns=columns(count),
    )
