"""Click base classes that add an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints the command's usage examples
and exits before any argument is validated.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples and exit.",
    )


class _ExamplesMixin:
    """Accept ``examples=`` and expose it through ``--examples``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class DagCommand(_ExamplesMixin, click.Command):
    pass


class DagGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command`` subcommands are :class:`DagCommand`."""

    command_class = DagCommand
