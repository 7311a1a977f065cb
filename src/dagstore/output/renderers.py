"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

from rich.table import Table
from rich.text import Text

from dagstore.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dagstore.services.result import ServiceResult

_Renderer: TypeAlias = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: bare keys for list results, a status word otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    for key in ("order", "items", "removed"):
        values = result.data.get(key)
        if isinstance(values, list):
            return "\n".join(_key_of(v) for v in values)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _key_of(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("key", ""))
    return str(item)


def _compact(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "dag.ok"), (f"  {result.op}", "dag.op")))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="dag.key")
    if key in ("key", "source", "destination"):
        v = Text(str(value), style="dag.node")
    elif key in ("path", "output"):
        v = Text(str(value), style="dag.path")
    else:
        v = Text(_compact(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text.assemble(("  warning: ", "dag.warning"), warning))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text.assemble(("ERROR", "dag.error"), (f"  {result.op}", "dag.op"), code, " — ", msg)
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {_compact(v)}"))


# ── Query renderers ───────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "nodes", d.get("nodes", 0))
    _field(console, "edges", d.get("edges", 0))
    _field(console, "roots", d.get("roots", []))
    _field(console, "leaves", d.get("leaves", []))
    if verbose:
        _render_meta(console, result)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="dag.node", no_wrap=True)
    table.add_column("Value")
    table.add_column("Successors", style="dag.arrow")
    for item in items:
        table.add_row(
            str(item["key"]),
            _compact(item.get("value")),
            ", ".join(str(s) for s in item.get("successors", [])),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} nodes")
    if verbose:
        _render_meta(console, result)


def _render_order(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    order = result.data.get("order", [])
    _status_line(console, result)
    line = Text("  ")
    for i, key in enumerate(order):
        if i:
            line.append(" → ", style="dag.arrow")
        line.append(str(key), style="dag.node")
    console.print(line)
    if verbose:
        _render_meta(console, result)


def _render_neighbours(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "key", d.get("key"))
    _field(console, result.op, d.get("items", []))
    if verbose:
        _render_meta(console, result)


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if result.meta and "path" in result.meta:
        _field(console, "path", result.meta["path"])
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "check": _render_check,
    "show": _render_show,
    "topo": _render_order,
    "successors": _render_neighbours,
    "predecessors": _render_neighbours,
    "add": _render_mutation,
    "link": _render_mutation,
    "unlink": _render_mutation,
    "remove": _render_mutation,
    "convert": _render_mutation,
}
