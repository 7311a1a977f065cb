"""Codec base class — format glue around the graph document.

Subclasses only turn a plain payload into bytes and back. Validation of
the document shape and of the DAG invariants happens here, once, for
every format.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from dagstore.codecs.document import from_payload, to_payload
from dagstore.domain.errors import MalformedPayload
from dagstore.domain.store import DagStore

logger = logging.getLogger(__name__)


class Codec:
    """Encode a :class:`DagStore` to bytes and decode it back.

    Subclasses set :attr:`name`, :attr:`suffixes` and :attr:`binary`, and
    implement :meth:`dumps` / :meth:`loads`. ``loads`` must translate its
    parser's own errors into :class:`MalformedPayload`.
    """

    name: ClassVar[str]
    suffixes: ClassVar[tuple[str, ...]]
    binary: ClassVar[bool] = False

    def encode(self, store: DagStore[Any, Any]) -> bytes:
        """Serialize *store*.

        Raises:
            TypeError: If a key or value cannot be represented in this format.
        """
        data = self.dumps(to_payload(store))
        logger.debug("Encoded %d nodes as %s (%d bytes)", len(store), self.name, len(data))
        return data

    def decode(self, data: bytes) -> DagStore[Any, Any]:
        """Parse *data* and rebuild the store it describes.

        Raises:
            MalformedPayload: If *data* is not a graph document in this format.
            DecodeInvariantViolation: If the document breaks a DAG invariant.
        """
        store = from_payload(self.loads(data))
        logger.debug("Decoded %d nodes from %s", len(store), self.name)
        return store

    def dumps(self, payload: dict[str, Any]) -> bytes:
        raise NotImplementedError

    def loads(self, data: bytes) -> Any:
        raise NotImplementedError

    def _malformed(self, exc: Exception) -> MalformedPayload:
        return MalformedPayload(f"Invalid {self.name} payload: {exc}", format=self.name)
