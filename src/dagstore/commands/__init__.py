"""Subcommand modules for dagstore.

register_commands() defers imports so ``dagstore --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``graph`` group and the standalone commands."""
    from dagstore.commands.check import check
    from dagstore.commands.convert import convert
    from dagstore.commands.graph import graph

    cli.add_command(graph)
    cli.add_command(check)
    cli.add_command(convert)
