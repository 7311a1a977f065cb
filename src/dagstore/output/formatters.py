"""Pick the output mode for a ServiceResult.

JSON for machines (``--json``), bare keys for ``--quiet``, Rich text
otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dagstore.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from dagstore.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        no_color=not settings.color,
        width=settings.width,
    )
