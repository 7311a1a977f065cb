"""GraphService — DagStore operations over graph documents on disk.

Each operation loads a document (format inferred from the file suffix),
runs one store operation and, for mutations, writes the document back in
place or to an explicit output path. Every outcome is a ServiceResult;
codec and store failures become failed results carrying the failure kind
as the error code.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Concatenate, ParamSpec, TypeAlias

from dagstore.codecs import format_for_path, get_codec
from dagstore.config.models import CodecConfig
from dagstore.domain.errors import DagError
from dagstore.domain.store import DagStore
from dagstore.services.result import (
    INVALID_KEY,
    IO_ERROR,
    NOT_FOUND,
    UNKNOWN_FORMAT,
    ServiceError,
    ServiceResult,
)

logger = logging.getLogger(__name__)

P = ParamSpec("P")

Store: TypeAlias = DagStore[Any, Any]


class _OperationFailed(Exception):
    """Internal: aborts an operation with a service-level error code."""

    def __init__(self, code: str, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.error = ServiceError(code=code, message=message, detail=detail)


def _operation(
    op: str,
) -> Callable[
    [Callable[Concatenate[GraphService, P], ServiceResult]],
    Callable[Concatenate[GraphService, P], ServiceResult],
]:
    """Translate load/save/store failures raised inside *op* into results."""

    def decorator(
        fn: Callable[Concatenate[GraphService, P], ServiceResult],
    ) -> Callable[Concatenate[GraphService, P], ServiceResult]:
        @functools.wraps(fn)
        def wrapper(self: GraphService, *args: P.args, **kwargs: P.kwargs) -> ServiceResult:
            try:
                return fn(self, *args, **kwargs)
            except _OperationFailed as exc:
                logger.info("%s failed: %s", op, exc.error.message)
                return ServiceResult(ok=False, op=op, error=exc.error)
            except DagError as exc:
                logger.info("%s rejected: %s", op, exc.message)
                return ServiceResult(ok=False, op=op, error=ServiceError.from_failure(exc.failure))

        return wrapper

    return decorator


def coerce_key(store: Store, raw: str) -> int | str:
    """Map a command-line key onto the store's key type.

    Numeric strings become ints unless the store already uses string keys
    or holds *raw* verbatim.
    """
    if raw in store:
        return raw
    try:
        as_int = int(raw)
    except ValueError:
        return raw
    if all(isinstance(key, int) for key in store):
        return as_int
    return raw


def parse_value(raw: str | None) -> Any:
    """Interpret a command-line value as JSON, falling back to the raw string."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


class GraphService:
    """Load, query, mutate and re-encode graph documents."""

    def __init__(self, codec_config: CodecConfig | None = None) -> None:
        self._codec_config = codec_config or CodecConfig()

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _format(self, path: Path, fmt: str | None = None) -> str:
        """Resolve the format: explicit *fmt*, then suffix, then the default for bare names."""
        if fmt is None and not path.suffix:
            fmt = self._codec_config.default_format
        try:
            name = fmt or format_for_path(path)
            get_codec(name)
        except KeyError as exc:
            raise _OperationFailed(UNKNOWN_FORMAT, str(exc.args[0]), path=str(path)) from exc
        return name.strip().lower()

    def _load(self, path: Path, *, missing_ok: bool = False) -> Store:
        fmt = self._format(path)
        if missing_ok and not path.exists():
            logger.debug("%s does not exist, starting from an empty graph", path)
            return DagStore()
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise _OperationFailed(NOT_FOUND, f"File not found: {path}", path=str(path)) from exc
        except OSError as exc:
            raise _OperationFailed(IO_ERROR, f"Cannot read {path}: {exc}", path=str(path)) from exc
        return get_codec(fmt, self._codec_config).decode(data)

    def _save(self, store: Store, path: Path, fmt: str | None = None) -> str:
        name = self._format(path, fmt)
        try:
            data = get_codec(name, self._codec_config).encode(store)
        except TypeError as exc:
            raise _OperationFailed(IO_ERROR, f"Cannot encode graph as {name}: {exc}") from exc
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise _OperationFailed(IO_ERROR, f"Cannot write {path}: {exc}", path=str(path)) from exc
        logger.debug("Wrote %d bytes of %s to %s", len(data), name, path)
        return name

    @staticmethod
    def _require_node(store: Store, key: int | str) -> None:
        if key not in store:
            raise _OperationFailed(NOT_FOUND, f"Node {key!r} not found", key=key)

    @staticmethod
    def _meta(path: Path, **extra: Any) -> dict[str, Any]:
        return {"path": str(path), **extra}

    # ------------------------------------------------------------------
    # Read-only operations
    # ------------------------------------------------------------------

    @_operation("check")
    def check(self, path: Path) -> ServiceResult:
        """Decode *path* and report its size, roots and leaves."""
        store = self._load(path)
        keys = store.keys()
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "nodes": len(store),
                "edges": len(store.edges()),
                "roots": [k for k in keys if not store.predecessors(k)],
                "leaves": [k for k in keys if not store.successors(k)],
            },
            meta=self._meta(path, format=self._format(path)),
        )

    @_operation("show")
    def show(self, path: Path) -> ServiceResult:
        """List every node with its value and successors."""
        store = self._load(path)
        items = [
            {"key": key, "value": value, "successors": store.successors(key)}
            for key, value in store.nodes()
        ]
        return ServiceResult(
            ok=True,
            op="show",
            data={"count": len(items), "items": items},
            meta=self._meta(path),
        )

    @_operation("topo")
    def topo(self, path: Path) -> ServiceResult:
        """Topological order, ties broken by ascending key."""
        store = self._load(path)
        order = store.topological_order()
        return ServiceResult(
            ok=True,
            op="topo",
            data={"count": len(order), "order": order},
            meta=self._meta(path),
        )

    @_operation("successors")
    def successors(self, path: Path, key: str) -> ServiceResult:
        store = self._load(path)
        node = coerce_key(store, key)
        self._require_node(store, node)
        items = store.successors(node)
        return ServiceResult(
            ok=True,
            op="successors",
            data={"key": node, "count": len(items), "items": items},
            meta=self._meta(path),
        )

    @_operation("predecessors")
    def predecessors(self, path: Path, key: str) -> ServiceResult:
        store = self._load(path)
        node = coerce_key(store, key)
        self._require_node(store, node)
        items = store.predecessors(node)
        return ServiceResult(
            ok=True,
            op="predecessors",
            data={"key": node, "count": len(items), "items": items},
            meta=self._meta(path),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @_operation("add")
    def add(
        self,
        path: Path,
        key: str,
        value: str | None = None,
        *,
        output: Path | None = None,
    ) -> ServiceResult:
        """Insert or replace a node; a missing *path* starts an empty graph.

        *value* is parsed as JSON when possible, otherwise kept as a string.
        """
        store = self._load(path, missing_ok=True)
        node = coerce_key(store, key)
        if any(type(existing) is not type(node) for existing in store):
            msg = f"Key {node!r} does not match the document's key type"
            raise _OperationFailed(INVALID_KEY, msg, key=node)
        new_value = parse_value(value)
        replaced = node in store
        previous = store.insert_node(node, new_value)
        target = output or path
        self._save(store, target)
        data: dict[str, Any] = {"key": node, "value": new_value, "replaced": replaced}
        if replaced:
            data["previous"] = previous
        return ServiceResult(ok=True, op="add", data=data, meta=self._meta(target))

    @_operation("link")
    def link(
        self,
        path: Path,
        source: str,
        destination: str,
        *,
        output: Path | None = None,
    ) -> ServiceResult:
        """Insert ``source -> destination`` and write the document back."""
        store = self._load(path)
        src, dst = coerce_key(store, source), coerce_key(store, destination)
        result = store.insert_edge(src, dst)
        result.raise_for_error()
        target = output or path
        self._save(store, target)
        return ServiceResult(
            ok=True,
            op="link",
            data={"source": src, "destination": dst, "successors": store.successors(src)},
            meta=self._meta(target),
        )

    @_operation("unlink")
    def unlink(
        self,
        path: Path,
        source: str,
        destination: str,
        *,
        output: Path | None = None,
    ) -> ServiceResult:
        """Remove ``source -> destination``; a missing edge is only a warning."""
        store = self._load(path)
        src, dst = coerce_key(store, source), coerce_key(store, destination)
        removed = store.remove_edge(src, dst)
        warnings: list[str] = []
        if not removed:
            warnings.append(f"No edge {src!r} -> {dst!r}")
        target = output or path
        if removed or output is not None:
            self._save(store, target)
        return ServiceResult(
            ok=True,
            op="unlink",
            data={"source": src, "destination": dst, "removed": removed},
            warnings=warnings,
            meta=self._meta(target),
        )

    @_operation("remove")
    def remove(
        self,
        path: Path,
        key: str,
        *,
        prune: bool = False,
        output: Path | None = None,
    ) -> ServiceResult:
        """Remove a node and its edges, or with *prune* every descendant too."""
        store = self._load(path)
        node = coerce_key(store, key)
        self._require_node(store, node)
        if prune:
            removed = store.prune(node)
        else:
            store.remove_node(node)
            removed = [node]
        target = output or path
        self._save(store, target)
        return ServiceResult(
            ok=True,
            op="remove",
            data={"key": node, "count": len(removed), "removed": removed},
            meta=self._meta(target),
        )

    @_operation("convert")
    def convert(self, path: Path, output: Path, fmt: str | None = None) -> ServiceResult:
        """Re-encode *path* into *output* (format from *fmt* or the suffix)."""
        store = self._load(path)
        source_format = self._format(path)
        target_format = self._save(store, output, fmt)
        return ServiceResult(
            ok=True,
            op="convert",
            data={
                "source_format": source_format,
                "target_format": target_format,
                "nodes": len(store),
                "edges": len(store.edges()),
                "output": str(output),
            },
            meta=self._meta(path),
        )
