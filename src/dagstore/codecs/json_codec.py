"""JSON text codec."""

from __future__ import annotations

import json
from typing import Any

from dagstore.codecs.base import Codec


class JsonCodec(Codec):
    name = "json"
    suffixes = (".json",)

    def __init__(self, *, indent: int | None = 2) -> None:
        self.indent = indent

    def dumps(self, payload: dict[str, Any]) -> bytes:
        text = json.dumps(payload, indent=self.indent, ensure_ascii=False)
        return text.encode("utf-8")

    def loads(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, ValueError, RecursionError) as exc:
            raise self._malformed(exc) from exc
