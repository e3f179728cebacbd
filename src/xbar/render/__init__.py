"""Rendering of crossbar wiring plans (SVG and plain text)."""

from xbar.render.style import GridMetrics, Theme
from xbar.render.svg import canvas_size, render_svg
from xbar.render.text import format_connections, render_text

__all__ = [
    "GridMetrics",
    "Theme",
    "canvas_size",
    "format_connections",
    "render_svg",
    "render_text",
]
