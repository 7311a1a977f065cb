"""Root ``dagstore`` command: global flags, settings and subcommand registration."""

from __future__ import annotations

import click

from dagstore import __version__
from dagstore.commands import register_commands
from dagstore.commands._base import DagGroup
from dagstore.commands._context import AppContext
from dagstore.config.settings import DagSettings


@click.group(
    cls=DagGroup,
    invoke_without_command=True,
    examples="""\
  dagstore graph add jobs.json fetch
  dagstore --json check jobs.json
  dagstore -v --log-json graph topo jobs.yaml
  dagstore -c ci/dagstore.toml convert jobs.json jobs.cbor""",
)
@click.version_option(version=__version__, prog_name="dagstore")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Bare keys or a one-word status.")
@click.option("-v", "--verbose", is_flag=True, help="Show result metadata and debug logs.")
@click.option("--log-json", is_flag=True, help="Emit logs on stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Use this TOML file instead of dagstore.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """dagstore — inspect and edit directed acyclic graph documents."""
    ctx.obj = AppContext(DagSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
