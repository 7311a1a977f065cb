"""Failure vocabulary shared by the store, the codecs and the services.

Mutations that can fail return an :class:`EdgeResult` instead of raising.
The decoding boundary has no value to return on failure, so it raises a
:class:`DagError` subclass carrying the same :class:`DagFailure` payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar


class ErrorKind(StrEnum):
    """Closed set of failure kinds callers can branch on."""

    NODE_NOT_FOUND = "NODE_NOT_FOUND"
    CYCLE_DETECTED = "CYCLE_DETECTED"
    DECODE_INVARIANT_VIOLATION = "DECODE_INVARIANT_VIOLATION"
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"


@dataclass(frozen=True)
class DagFailure:
    """A single failure: what kind, a human message, and structured detail."""

    kind: ErrorKind
    message: str
    detail: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EdgeResult:
    """Outcome of an edge insertion.

    Truthy on success so ``if store.insert_edge(a, b):`` reads naturally.
    """

    ok: bool
    error: DagFailure | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> EdgeResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, **detail: Any) -> EdgeResult:
        return cls(ok=False, error=DagFailure(kind=kind, message=message, detail=detail))

    def raise_for_error(self) -> None:
        """Raise the matching :class:`DagError` subclass if this result failed."""
        if self.error is not None:
            raise error_for(self.error)


class DagError(Exception):
    """Base exception carrying a :class:`DagFailure`.

    Abstract: only the subclasses below name a concrete :class:`ErrorKind`.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, **detail: Any) -> None:
        if type(self) is DagError:
            raise TypeError("DagError is abstract; raise one of its subclasses")
        super().__init__(message)
        self.failure = DagFailure(kind=self.kind, message=message, detail=detail)

    @property
    def message(self) -> str:
        return self.failure.message

    @property
    def detail(self) -> dict[str, Any]:
        return self.failure.detail


class NodeNotFound(DagError):
    kind = ErrorKind.NODE_NOT_FOUND


class CycleDetected(DagError):
    kind = ErrorKind.CYCLE_DETECTED


class DecodeInvariantViolation(DagError):
    kind = ErrorKind.DECODE_INVARIANT_VIOLATION


class MalformedPayload(DagError):
    kind = ErrorKind.MALFORMED_PAYLOAD


_ERRORS_BY_KIND: dict[ErrorKind, type[DagError]] = {
    cls.kind: cls
    for cls in (NodeNotFound, CycleDetected, DecodeInvariantViolation, MalformedPayload)
}


def error_for(failure: DagFailure) -> DagError:
    """Build the exception matching *failure*'s kind."""
    return _ERRORS_BY_KIND[failure.kind](failure.message, **failure.detail)
