#!/usr/bin/env python3
"""Batch render crossbar diagrams for a range of terminal counts to SVG and PNG.

Outputs go to /tmp/xbar_renders/.

Usage:
    python scripts/render_gallery.py --min 2 --max 12 --theme dark
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from xbar.crossbar import connection_graph, is_complete  # noqa: E402
from xbar.render.svg import render_svg  # noqa: E402
from xbar.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/xbar_renders")


def render_count(
    count: int, output_dir: Path, theme_name: str
) -> tuple[str, list[str]]:
    """Render the crossbar for ``count`` terminals to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = f"xbar_{count:03d}"
    issues: list[str] = []

    if not is_complete(connection_graph(count)):
        issues.append("COVERAGE ERROR: plan does not realize the complete graph")

    try:
        svg_str = render_svg(count, THEMES[theme_name])
    except ValueError as e:
        return name, issues + [f"RENDER ERROR: {e}"]

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render crossbar diagrams")
    parser.add_argument("--min", type=int, default=2, help="Smallest terminal count")
    parser.add_argument("--max", type=int, default=12, help="Largest terminal count")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="classic", help="Visual theme"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    counts = list(range(args.min, args.max + 1))
    print(f"Rendering {len(counts)} crossbars to {OUTPUT_DIR}/")
    print()

    any_errors = False

    for count in counts:
        name, issues = render_count(count, OUTPUT_DIR, args.theme)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
