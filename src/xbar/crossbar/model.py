"""Data model for crossbar wiring plans."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """One row of the crossbar: a terminal occurrence inside a block."""

    block_idx: int
    row_idx: int
    # Always row_idx + block_idx * count; set by Position.at
    abs_idx: int = field(compare=False)

    @classmethod
    def at(cls, block_idx: int, row_idx: int, count: int) -> Position:
        """Build a position in a crossbar with ``count`` terminals."""
        return cls(block_idx, row_idx, row_idx + block_idx * count)


@dataclass(frozen=True)
class Connection:
    """A vertical wire joining two rows in one column."""

    start: Position
    end: Position
    col_idx: int

    @property
    def terminals(self) -> tuple[int, int]:
        """The pair of terminal numbers this wire connects."""
        return (self.start.row_idx, self.end.row_idx)

    @property
    def span(self) -> range:
        """Absolute rows occupied by the wire in its column (end excluded)."""
        return range(self.start.abs_idx, self.end.abs_idx)
