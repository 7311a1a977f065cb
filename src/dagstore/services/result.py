"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult. Failure codes
are the :class:`~dagstore.domain.errors.ErrorKind` values plus the
service-level codes defined here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from dagstore.domain.errors import DagFailure

NOT_FOUND = "NOT_FOUND"
UNKNOWN_FORMAT = "UNKNOWN_FORMAT"
IO_ERROR = "IO_ERROR"
INVALID_KEY = "INVALID_KEY"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_failure(cls, failure: DagFailure) -> ServiceError:
        return cls(code=str(failure.kind), message=failure.message, detail=failure.detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"link"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (source path, format, timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
