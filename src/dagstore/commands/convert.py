"""Standalone command: re-encode a graph document in another format."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dagstore.codecs import available_formats
from dagstore.commands._base import DagCommand

if TYPE_CHECKING:
    from dagstore.commands._context import AppContext


@click.command(
    cls=DagCommand,
    examples="""\
  dagstore convert pipeline.json pipeline.yaml
  dagstore convert pipeline.yaml pipeline.bin --to cbor""",
)
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("output", type=click.Path(path_type=Path))
@click.option(
    "--to",
    "fmt",
    type=click.Choice(available_formats(), case_sensitive=False),
    default=None,
    help="Target format (default: inferred from OUTPUT's suffix).",
)
@click.pass_obj
def convert(app: AppContext, source: Path, output: Path, fmt: str | None) -> None:
    """Decode SOURCE and write it to OUTPUT in another encoding."""
    app.emit(app.service.convert(source, output, fmt))
