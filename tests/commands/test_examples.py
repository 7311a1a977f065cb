"""Tests for --examples flag on CLI commands.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from dagstore.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["dagstore --json check", "--log-json"]),
    (["graph", "--examples"], ["dagstore graph link", "dagstore graph topo"]),
    (["graph", "show", "--examples"], ["dagstore --json graph show"]),
    (["graph", "topo", "--examples"], ["dagstore -q graph topo"]),
    (["graph", "successors", "--examples"], ["dagstore graph successors"]),
    (["graph", "predecessors", "--examples"], ["dagstore graph predecessors"]),
    (["graph", "add", "--examples"], ["-o jobs-v2.json"]),
    (["graph", "link", "--examples"], ["dagstore graph link"]),
    (["graph", "unlink", "--examples"], ["dagstore graph unlink"]),
    (["graph", "remove", "--examples"], ["--prune"]),
    (["check", "--examples"], ["dagstore check pipeline.json"]),
    (["convert", "--examples"], ["--to cbor"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = item
    return "_".join(a for a in args if a != "--examples") or "root"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert result.output.startswith("Examples for 'cli")
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestExamplesInHelp:
    @pytest.mark.parametrize(
        "args",
        [
            ["graph", "--help"],
            ["graph", "link", "--help"],
            ["check", "--help"],
            ["convert", "--help"],
        ],
    )
    def test_examples_in_help(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "--examples" in result.output


class TestExamplesEagerExit:
    """--examples exits before required arguments are validated."""

    def test_missing_arguments_ignored(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["graph", "link", "--examples"])
        assert result.exit_code == 0
        assert "Missing argument" not in result.output
