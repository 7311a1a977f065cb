"""Pluggable encodings for :class:`~dagstore.domain.store.DagStore`.

Codecs are looked up by name (``json``, ``yaml``, ``cbor``) or by file
suffix. Codec options come from :class:`~dagstore.config.models.CodecConfig`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from dagstore.codecs.base import Codec
from dagstore.codecs.cbor_codec import CborCodec
from dagstore.codecs.document import GraphDocument, from_payload, to_payload
from dagstore.codecs.json_codec import JsonCodec
from dagstore.codecs.yaml_codec import YamlCodec

if TYPE_CHECKING:
    from dagstore.config.models import CodecConfig

_CODECS: dict[str, type[Codec]] = {
    JsonCodec.name: JsonCodec,
    YamlCodec.name: YamlCodec,
    CborCodec.name: CborCodec,
}


def available_formats() -> list[str]:
    return sorted(_CODECS)


def get_codec(name: str, config: CodecConfig | None = None) -> Codec:
    """Return a codec instance for format *name*.

    Raises:
        KeyError: If *name* is not a known format.
    """
    key = name.strip().lower()
    if key not in _CODECS:
        msg = f"Unknown format {name!r}. Available formats: {', '.join(available_formats())}"
        raise KeyError(msg)
    if key == JsonCodec.name:
        return JsonCodec(indent=config.json_indent if config else 2)
    if key == YamlCodec.name:
        return YamlCodec(flow_style=config.yaml_flow_style if config else False)
    return _CODECS[key]()


def format_for_path(path: Path) -> str:
    """Infer the format name from *path*'s suffix.

    Raises:
        KeyError: If the suffix matches no codec.
    """
    suffix = path.suffix.lower()
    for name, codec_cls in _CODECS.items():
        if suffix in codec_cls.suffixes:
            return name
    msg = f"Cannot infer format from suffix {path.suffix!r} of {path.name}"
    raise KeyError(msg)


def codec_for_path(path: Path, config: CodecConfig | None = None) -> Codec:
    return get_codec(format_for_path(path), config)


__all__ = [
    "CborCodec",
    "Codec",
    "GraphDocument",
    "JsonCodec",
    "YamlCodec",
    "available_formats",
    "codec_for_path",
    "format_for_path",
    "from_payload",
    "get_codec",
    "to_payload",
]
