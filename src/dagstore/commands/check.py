"""Standalone command: decode a graph document and verify its invariants."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dagstore.commands._base import DagCommand

if TYPE_CHECKING:
    from dagstore.commands._context import AppContext


@click.command(
    cls=DagCommand,
    examples="""\
  dagstore check pipeline.json
  dagstore --json check pipeline.yaml
  dagstore -q check pipeline.cbor && echo valid""",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.pass_obj
def check(app: AppContext, file: Path) -> None:
    """Check that FILE is a valid, acyclic graph document."""
    app.emit(app.service.check(file))
