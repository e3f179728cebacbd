"""SVG generation for crossbar wiring plans using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from xbar.crossbar import Connection, Crossbar, topology
from xbar.render.style import GridMetrics, Theme


def canvas_size(count: int, metrics: GridMetrics | None = None) -> tuple[int, int]:
    """Width and height of the drawing for ``count`` terminals.

    One extra column of width is left for the stubs joining labels to
    wires, and one blank row separates consecutive blocks.
    """
    m = metrics or GridMetrics()
    topo = topology(count)
    width = (
        topo.columns * m.block_width + m.block_width + 2 * m.margin_x + m.label_pad
    )
    height = (topo.rows + topo.blocks - 1) * m.block_height + 2 * m.margin_y
    return width, height


def row_top(count: int, block_idx: int, row_idx: int, metrics: GridMetrics) -> int:
    """Y coordinate of a row; blocks are separated by one empty row."""
    return metrics.margin_y + metrics.block_height * (
        block_idx * (count + 1) + row_idx
    )


def render_svg(
    count: int,
    theme: Theme,
    metrics: GridMetrics | None = None,
) -> str:
    """Render the wiring plan for ``count`` terminals to an SVG string."""
    m = metrics or GridMetrics()
    width, height = canvas_size(count, m)

    d = draw.Drawing(width, height)

    # Background with border
    d.append(draw.Rectangle(
        0, 0, width, height,
        fill=theme.background_color,
        stroke=theme.border_color,
        stroke_width=theme.border_width,
    ))

    for conn in Crossbar(count):
        _render_connection(d, conn, count, theme, m)

    svg = d.as_svg()
    if not svg.endswith("\n"):
        svg += "\n"
    return svg


def _render_connection(
    d: draw.Drawing,
    conn: Connection,
    count: int,
    theme: Theme,
    m: GridMetrics,
) -> None:
    """Draw one wire as a bracket from its start row to its end row."""
    l0 = m.margin_x + m.label_pad
    l1 = l0 + (1 + conn.col_idx) * m.block_width
    t0 = row_top(count, conn.start.block_idx, conn.start.row_idx, m)
    t1 = row_top(count, conn.end.block_idx, conn.end.row_idx, m)

    path = draw.Path(
        stroke=theme.wire_color,
        stroke_width=theme.wire_width,
        fill="none",
    )
    path.M(l0, t0).L(l1, t0).L(l1, t1).L(l0, t1)
    d.append(path)

    for row_idx, top in ((conn.start.row_idx, t0), (conn.end.row_idx, t1)):
        d.append(draw.Text(
            str(row_idx),
            m.block_height,
            m.margin_x, top + m.block_height / 4,
            fill=theme.label_color,
            fill_opacity=1,
            stroke="none",
            font_family=theme.label_font_family,
        ))
