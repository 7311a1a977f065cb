"""Rich theme plus an in-memory Console, so renderers can return strings."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DAG_THEME = Theme(
    {
        "dag.ok": "bold green",
        "dag.error": "bold red",
        "dag.warning": "bold yellow",
        "dag.op": "bold cyan",
        "dag.key": "dim",
        "dag.node": "bold blue",
        "dag.path": "dim",
        "dag.arrow": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing into a StringIO; *width* defaults to 120 columns."""
    return Console(
        file=StringIO(),
        theme=DAG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console from :func:`create_console` so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
