"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dagstore.toml only contains
overrides. No config file is needed at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

FormatName = Literal["json", "yaml", "cbor"]


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    default_format: FormatName = "json"
    json_indent: int | None = 2
    yaml_flow_style: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    color: bool = True

