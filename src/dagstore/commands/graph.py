"""Command group: query and edit a graph document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dagstore.commands._base import DagGroup

if TYPE_CHECKING:
    from dagstore.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  dagstore graph add jobs.json fetch '{"retries": 3}'
  dagstore graph link jobs.json fetch build
  dagstore graph topo jobs.json
  dagstore graph successors jobs.json fetch
  dagstore graph remove jobs.json build --prune"""

_file_argument = click.argument("file", type=click.Path(path_type=Path))
_output_option = click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the result here instead of updating FILE in place.",
)


@click.group(cls=DagGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Query and edit the DAG stored in a graph document."""


@graph.command(
    examples="""\
  dagstore graph show jobs.json
  dagstore --json graph show jobs.yaml"""
)
@_file_argument
@click.pass_obj
def show(app: AppContext, file: Path) -> None:
    """List nodes with their values and successors."""
    app.emit(app.service.show(file))


@graph.command(
    examples="""\
  dagstore graph topo jobs.json
  dagstore -q graph topo jobs.json"""
)
@_file_argument
@click.pass_obj
def topo(app: AppContext, file: Path) -> None:
    """Print a topological order (ties broken by ascending key)."""
    app.emit(app.service.topo(file))


@graph.command(examples="  dagstore graph successors jobs.json fetch")
@_file_argument
@click.argument("key")
@click.pass_obj
def successors(app: AppContext, file: Path, key: str) -> None:
    """List the direct successors of KEY."""
    app.emit(app.service.successors(file, key))


@graph.command(examples="  dagstore graph predecessors jobs.json build")
@_file_argument
@click.argument("key")
@click.pass_obj
def predecessors(app: AppContext, file: Path, key: str) -> None:
    """List the direct predecessors of KEY."""
    app.emit(app.service.predecessors(file, key))


@graph.command(
    examples="""\
  dagstore graph add jobs.json fetch
  dagstore graph add jobs.json 1 '"first"'
  dagstore graph add jobs.json build '{"cmd": "make"}' -o jobs-v2.json"""
)
@_file_argument
@click.argument("key")
@click.argument("value", required=False)
@_output_option
@click.pass_obj
def add(app: AppContext, file: Path, key: str, value: str | None, output: Path | None) -> None:
    """Insert or replace node KEY (VALUE is parsed as JSON when possible)."""
    app.emit(app.service.add(file, key, value, output=output))


@graph.command(examples="  dagstore graph link jobs.json fetch build")
@_file_argument
@click.argument("source")
@click.argument("destination")
@_output_option
@click.pass_obj
def link(app: AppContext, file: Path, source: str, destination: str, output: Path | None) -> None:
    """Add the edge SOURCE -> DESTINATION unless it would create a cycle."""
    app.emit(app.service.link(file, source, destination, output=output))


@graph.command(examples="  dagstore graph unlink jobs.json fetch build")
@_file_argument
@click.argument("source")
@click.argument("destination")
@_output_option
@click.pass_obj
def unlink(
    app: AppContext, file: Path, source: str, destination: str, output: Path | None
) -> None:
    """Remove the edge SOURCE -> DESTINATION."""
    app.emit(app.service.unlink(file, source, destination, output=output))


@graph.command(
    examples="""\
  dagstore graph remove jobs.json build
  dagstore graph remove jobs.json fetch --prune"""
)
@_file_argument
@click.argument("key")
@click.option("--prune", is_flag=True, help="Also remove every descendant of KEY.")
@_output_option
@click.pass_obj
def remove(app: AppContext, file: Path, key: str, prune: bool, output: Path | None) -> None:
    """Remove node KEY and its edges."""
    app.emit(app.service.remove(file, key, prune=prune, output=output))
