"""dagstore — an in-memory DAG container with cycle-checked edges.

The store lives in :mod:`dagstore.domain.store`; encodings in
:mod:`dagstore.codecs`.
"""

from dagstore.domain.errors import (
    CycleDetected,
    DagError,
    DagFailure,
    DecodeInvariantViolation,
    EdgeResult,
    ErrorKind,
    MalformedPayload,
    NodeNotFound,
)
from dagstore.domain.store import DagStore

__version__ = "0.1.0"

__all__ = [
    "CycleDetected",
    "DagError",
    "DagFailure",
    "DagStore",
    "DecodeInvariantViolation",
    "EdgeResult",
    "ErrorKind",
    "MalformedPayload",
    "NodeNotFound",
    "__version__",
]
