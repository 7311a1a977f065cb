"""structlog configuration for dagstore.

Library code logs through stdlib ``logging.getLogger(__name__)``; the CLI
calls :func:`configure_logging` once so those records, and any structlog
loggers, share one renderer on stderr:

- Human (default): console renderer, colored when stderr is a TTY
- JSON (--log-json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "dagstore"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _package_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    quiet: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and route every record to *stream*.

    Args:
        verbose: DEBUG for the ``dagstore`` logger (wins over *quiet*).
        log_json: Render JSON lines instead of console output.
        quiet: Only ERROR and above from the ``dagstore`` logger.
        stream: Destination, stderr by default.
    """
    out = stream if stream is not None else sys.stderr
    shared = _shared_processors()

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(_package_level(verbose=verbose, quiet=quiet))
