"""Compact binary codec (CBOR, RFC 8949) backed by cbor2."""

from __future__ import annotations

from typing import Any

import cbor2

from dagstore.codecs.base import Codec


class CborCodec(Codec):
    name = "cbor"
    suffixes = (".cbor",)
    binary = True

    def dumps(self, payload: dict[str, Any]) -> bytes:
        try:
            return cbor2.dumps(payload)
        except cbor2.CBOREncodeError as exc:
            raise TypeError(str(exc)) from exc

    def loads(self, data: bytes) -> Any:
        try:
            return cbor2.loads(data)
        except cbor2.CBORDecodeError as exc:
            raise self._malformed(exc) from exc
