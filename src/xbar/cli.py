"""CLI for xbar."""

from __future__ import annotations

from pathlib import Path

import click

from xbar import __version__
from xbar.crossbar import connection_graph, is_complete, missing_pairs, topology
from xbar.render import GridMetrics, format_connections, render_svg, render_text
from xbar.render.constants import BLOCK_HEIGHT, MARGIN_X
from xbar.themes import THEMES

num_terms_option = click.option(
    "-n", "--num-terms", "count", type=click.IntRange(min=2), required=True,
    metavar="COUNT", help="Number of terminals",
)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """xbar: Wiring plans for one-sided binary tree crossbar switches."""


@cli.command()
@num_terms_option
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path),
              required=True, help="Output file path")
@click.option("--format", "fmt", type=click.Choice(["svg", "text"]), default="svg",
              help="Output format (default: svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme for SVG output (default: classic)")
@click.option("--block-size", type=click.IntRange(min=1), default=BLOCK_HEIGHT,
              help=f"Row height and column width in pixels (default: {BLOCK_HEIGHT})")
@click.option("--margin", type=click.IntRange(min=0), default=MARGIN_X,
              help=f"Canvas margin in pixels (default: {MARGIN_X})")
def render(
    count: int,
    output: Path,
    fmt: str,
    theme: str,
    block_size: int,
    margin: int,
) -> None:
    """Render a crossbar switch with COUNT terminals."""
    if fmt == "text":
        content = render_text(count)
    else:
        metrics = GridMetrics(
            block_width=block_size,
            block_height=block_size,
            margin_x=margin,
            margin_y=margin,
        )
        content = render_svg(count, THEMES[theme], metrics)

    try:
        output.write_text(content)
    except OSError as e:
        raise click.FileError(str(output), hint=str(e))

    click.echo(f"Crossbar switch with {count} terminals was printed to "
               f"the {fmt.upper()} file {output}.")


@cli.command()
@num_terms_option
def info(count: int) -> None:
    """Show the dimensions of a crossbar with COUNT terminals."""
    topo = topology(count)
    click.echo(f"Terminals: {topo.count}")
    click.echo(f"Blocks: {topo.blocks}")
    click.echo(f"Rows: {topo.rows}")
    click.echo(f"Columns: {topo.columns}")
    click.echo(f"Connections: {topo.connections}")

    graph = connection_graph(count)
    if is_complete(graph):
        click.echo(f"Complete: yes (K_{count})")
    else:
        click.echo("Complete: no", err=True)
        for a, b in missing_pairs(graph):
            click.echo(f"  - missing {a} -- {b}", err=True)
        raise SystemExit(1)


@cli.command(name="list")
@num_terms_option
def list_connections(count: int) -> None:
    """List every connection of a crossbar with COUNT terminals."""
    click.echo(format_connections(count), nl=False)
