"""YAML text codec backed by ruamel.yaml's safe loader and dumper."""

from __future__ import annotations

from io import StringIO
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.representer import RepresenterError

from dagstore.codecs.base import Codec


class YamlCodec(Codec):
    name = "yaml"
    suffixes = (".yaml", ".yml")

    def __init__(self, *, flow_style: bool = False) -> None:
        self.flow_style = flow_style

    def _new_yaml(self) -> YAML:
        """Create a fresh safe YAML instance.

        ruamel.yaml's YAML object is stateful, so one is built per call.
        """
        y = YAML(typ="safe")
        y.default_flow_style = self.flow_style
        return y

    def dumps(self, payload: dict[str, Any]) -> bytes:
        buf = StringIO()
        try:
            self._new_yaml().dump(payload, buf)
        except RepresenterError as exc:
            raise TypeError(str(exc)) from exc
        return buf.getvalue().encode("utf-8")

    def loads(self, data: bytes) -> Any:
        try:
            return self._new_yaml().load(data.decode("utf-8"))
        except (UnicodeDecodeError, YAMLError, ValueError, RecursionError) as exc:
            raise self._malformed(exc) from exc
