"""Tests for SVG and text rendering."""

import xml.etree.ElementTree as ET

import pytest

from xbar.crossbar import Crossbar
from xbar.render import GridMetrics, canvas_size, format_connections, render_svg, render_text
from xbar.themes import CLASSIC_THEME, DARK_THEME

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render_simple(n=5, theme=CLASSIC_THEME, metrics=None):
    return render_svg(n, theme, metrics)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_canvas_size_defaults():
    # 2 columns: 2*20 + 20 + 2*40 + 30; rows + blocks - 1 = 23
    assert canvas_size(5) == (170, 23 * 20 + 80)


def test_canvas_size_custom_metrics():
    metrics = GridMetrics(block_width=10, block_height=5, margin_x=0, margin_y=3,
                          label_pad=7)
    assert canvas_size(10, metrics) == (5 * 10 + 10 + 7, (90 + 9 - 1) * 5 + 6)


def test_render_dimensions():
    root = ET.fromstring(_render_simple())
    assert float(root.get("width")) == 170
    assert float(root.get("height")) == 540


def test_one_path_per_connection():
    root = ET.fromstring(_render_simple(7))
    paths = root.findall(f".//{SVG_NS}path")
    assert len(paths) == 21


def test_two_labels_per_connection():
    root = ET.fromstring(_render_simple(6))
    texts = [t.text for t in root.iter(f"{SVG_NS}text")]
    assert len(texts) == 30
    assert sorted(set(texts), key=int) == [str(i) for i in range(6)]


def test_wire_geometry():
    """First wire of N=5: rows 0 and 1 of block 0, column 0."""
    root = ET.fromstring(_render_simple(5))
    d = root.find(f".//{SVG_NS}path").get("d")
    assert d.replace(",", " ").split() == [
        "M70", "40", "L90", "40", "L90", "60", "L70", "60",
    ]


def test_block_gap_in_wire_geometry():
    """A wire ending in block 1 skips the blank separator row."""
    root = ET.fromstring(_render_simple(5))
    wrapped = root.findall(f".//{SVG_NS}path")[4].get("d")
    # (0,4) at y=40+20*4, (1,0) at y=40+20*6
    assert wrapped.replace(",", " ").split()[-1] == "160"
    assert "120" in wrapped


def test_render_theme_colors():
    svg = _render_simple(theme=DARK_THEME)
    assert DARK_THEME.background_color in svg
    assert DARK_THEME.wire_color in svg


def test_render_classic_background():
    svg = _render_simple()
    assert CLASSIC_THEME.background_color in svg
    assert CLASSIC_THEME.border_color in svg


def test_render_ends_with_newline():
    assert _render_simple().endswith("\n")


def test_render_rejects_small_count():
    with pytest.raises(ValueError):
        render_svg(1, CLASSIC_THEME)


@pytest.mark.parametrize("field,value", [("block_width", 0), ("margin_y", -1)])
def test_metrics_validation(field, value):
    with pytest.raises(ValueError, match=field):
        GridMetrics(**{field: value})


def test_format_connections():
    lines = format_connections(5).splitlines()
    assert len(lines) == 10
    assert lines[0] == "0:0 -> 0:1  col 0"
    assert lines[4] == "0:4 -> 1:0  col 0"
    assert lines[8] == "3:0 -> 3:3  col 1"


def test_render_text_two_terminals():
    assert render_text(2) == "0 -+\n1 -+\n"


def test_render_text_layout():
    n = 5
    chart = render_text(n).splitlines()
    # rows plus one blank separator between blocks
    assert len(chart) == 20 + 3
    assert chart[5] == ""
    rows = [line for line in chart if line]
    assert len(rows) == 20


def test_render_text_marks_every_endpoint():
    n = 6
    rows = [line for line in render_text(n).splitlines() if line]
    endpoints = sum(line.count("+") for line in rows)
    assert endpoints == 2 * sum(1 for _ in Crossbar(n))
