"""Typer-based CLI for building road graphs from OSM files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import get_config
from .container import Container
from .domain.classification import SPEED_TABLE
from .domain.errors import RoadNetworkError
from .monitoring import configure_logging, log_graph_stats
from .services import RoadNetworkService

app = typer.Typer(
    help="Build routable road graphs from OpenStreetMap data.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"road-network v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    )
):
    """Road network graph builder."""
    try:
        configure_logging(get_config().observability)
    except RoadNetworkError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command("build")
def build(
    path: Optional[Path] = typer.Argument(
        None, help="OSM .pbf file. Defaults to the configured pbf_path."
    ),
    no_reduce: bool = typer.Option(
        False, "--no-reduce", help="Keep every component instead of the largest."
    ),
):
    """Build the road graph and print its size."""
    container = Container.create_default()
    service: RoadNetworkService = container.resolve(RoadNetworkService)
    source = path or container.config.graph.pbf_path

    try:
        graph = service.build(source, reduce=False if no_reduce else None)
    except RoadNetworkError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    log_graph_stats(graph, prefix="final ")

    table = Table(title=f"Road graph: {source}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(len(graph.nodes)))
    table.add_row("Arcs", str(graph.edge_count))
    table.add_row("Ways", str(len(graph.raw_ways)))
    console.print(table)


@app.command("speeds")
def speeds():
    """Print the road classification speed table."""
    table = Table(title="Free-flow speeds")
    table.add_column("Road type")
    table.add_column("km/h", justify="right")
    for highway, speed in SPEED_TABLE.items():
        table.add_row(highway, str(speed))
    console.print(table)


if __name__ == "__main__":
    app()
