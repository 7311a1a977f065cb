"""Format-agnostic graph document shared by every codec.

A document is two ordered lists: ``nodes`` as ``[key, value]`` pairs and
``edges`` as ``[source, [successor, ...]]`` entries. Only sources with at
least one successor are listed. Keys are integers or strings so they
survive every supported encoding unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from dagstore.domain.errors import MalformedPayload
from dagstore.domain.store import DagStore

NodeKey = StrictInt | StrictStr


class GraphDocument(BaseModel):
    """Validated shape of a decoded payload (invariants are checked later)."""

    model_config = {"frozen": True, "extra": "forbid"}

    nodes: list[tuple[NodeKey, Any]] = Field(default_factory=list)
    edges: list[tuple[NodeKey, list[NodeKey]]] = Field(default_factory=list)


def _check_key(key: Any) -> None:
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        msg = f"Only int and str keys can be encoded, got {type(key).__name__}: {key!r}"
        raise TypeError(msg)


def to_payload(store: DagStore[Any, Any]) -> dict[str, Any]:
    """Return the plain ``dict``/``list`` payload for *store*.

    Raises:
        TypeError: If a key is neither ``int`` nor ``str``.
    """
    nodes: list[list[Any]] = []
    for key, value in store.nodes():
        _check_key(key)
        nodes.append([key, value])
    edges = [[source, successors] for source, successors in store.adjacency()]
    return {"nodes": nodes, "edges": edges}


def from_payload(payload: Any) -> DagStore[Any, Any]:
    """Validate *payload*'s shape and rebuild a store, rechecking invariants.

    Raises:
        MalformedPayload: If the payload is not a graph document.
        DecodeInvariantViolation: If it describes dangling keys or a cycle.
    """
    try:
        doc = GraphDocument.model_validate(payload)
    except ValidationError as exc:
        msg = f"Not a graph document: {exc.error_count()} validation error(s)"
        errors = [f"{_loc(err['loc'])}: {err['msg']}" for err in exc.errors()]
        raise MalformedPayload(msg, errors=errors) from exc
    return DagStore.from_parts(doc.nodes, doc.edges)


def _loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"
