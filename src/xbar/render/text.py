"""Plain-text renderings of a wiring plan."""

from __future__ import annotations

from xbar.crossbar import Crossbar, topology
from xbar.render.constants import TEXT_EMPTY, TEXT_ENDPOINT, TEXT_WIRE


def format_connections(count: int) -> str:
    """One line per connection, in enumeration order.

    Each line reads ``block:row -> block:row  col c``.
    """
    lines = []
    for conn in Crossbar(count):
        lines.append(
            f"{conn.start.block_idx}:{conn.start.row_idx} -> "
            f"{conn.end.block_idx}:{conn.end.row_idx}  col {conn.col_idx}"
        )
    return "\n".join(lines) + "\n"


def render_text(count: int) -> str:
    """ASCII chart of the crossbar.

    One line per row, a blank line between blocks. The gutter shows the
    terminal number; each column then gets one cell: ``+`` where a wire
    ends, ``|`` inside its span.
    """
    topo = topology(count)
    grid = [[TEXT_EMPTY] * topo.columns for _ in range(topo.rows)]

    for conn in Crossbar(count):
        col = conn.col_idx
        grid[conn.start.abs_idx][col] = TEXT_ENDPOINT
        grid[conn.end.abs_idx][col] = TEXT_ENDPOINT
        for k in range(conn.start.abs_idx + 1, conn.end.abs_idx):
            grid[k][col] = TEXT_WIRE

    gutter = len(str(count - 1))
    out: list[str] = []
    for abs_idx, cells in enumerate(grid):
        block_idx, row_idx = divmod(abs_idx, count)
        if row_idx == 0 and block_idx > 0:
            out.append("")
        out.append(f"{row_idx:>{gutter}} -{''.join(cells)}".rstrip())
    return "\n".join(out) + "\n"
