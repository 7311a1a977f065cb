"""Tests for the check command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

from click.testing import CliRunner

from dagstore.cli import cli

WriteDoc: TypeAlias = Callable[[Path, list[list[Any]], list[list[Any]]], Path]


class TestCheckCommand:
    def test_valid_document(self, cli_runner: CliRunner, write_doc: WriteDoc) -> None:
        write_doc(Path("jobs.json"), [[1, "a"], [2, "b"]], [[1, [2]]])
        result = cli_runner.invoke(cli, ["check", "jobs.json"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "nodes: 2" in result.stdout
        assert "edges: 1" in result.stdout

    def test_json_output(self, cli_runner: CliRunner, write_doc: WriteDoc) -> None:
        write_doc(Path("jobs.json"), [[1, "a"], [2, "b"]], [[1, [2]]])
        result = cli_runner.invoke(cli, ["--json", "check", "jobs.json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"] == {"nodes": 2, "edges": 1, "roots": [1], "leaves": [2]}
        assert data["meta"]["format"] == "json"

    def test_cycle_fails(self, cli_runner: CliRunner, write_doc: WriteDoc) -> None:
        write_doc(Path("loop.json"), [[1, "a"], [2, "b"]], [[1, [2]], [2, [1]]])
        result = cli_runner.invoke(cli, ["check", "loop.json"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "DECODE_INVARIANT_VIOLATION" in result.stderr

    def test_cycle_fails_json(self, cli_runner: CliRunner, write_doc: WriteDoc) -> None:
        write_doc(Path("loop.json"), [[1, "a"]], [[1, [1]]])
        result = cli_runner.invoke(cli, ["--json", "check", "loop.json"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "DECODE_INVARIANT_VIOLATION"

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "nowhere.json"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: check")

    def test_malformed(self, cli_runner: CliRunner) -> None:
        Path("bad.yaml").write_text("nodes: [1, 2\n")
        result = cli_runner.invoke(cli, ["check", "bad.yaml"])
        assert result.exit_code == 1
        assert "MALFORMED_PAYLOAD" in result.stderr
