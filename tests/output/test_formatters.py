"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dagstore.output.formatters import OutputSettings, format_result
from dagstore.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="NOT_FOUND", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.color is True
        assert s.width is None


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("topo", order=[1, 2])
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "topo"
        assert data["data"]["order"] == [1, 2]

    def test_json_mode_error(self) -> None:
        output = format_result(_err("check", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_FOUND"
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(
            _ok("topo", order=[1]), settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["op"] == "topo"


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("link"), settings=OutputSettings(quiet=True))
        assert output == "OK: link"

    def test_quiet_error(self) -> None:
        output = format_result(_err("check", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultRich:
    def test_default_settings(self) -> None:
        output = format_result(_ok("topo", order=[1, 2]))
        assert "1 → 2" in output
        assert not output.startswith("{")

    def test_no_color_has_no_escape_codes(self) -> None:
        output = format_result(_ok("topo", order=[1]), settings=OutputSettings(color=False))
        assert "\x1b[" not in output
