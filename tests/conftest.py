"""Shared pytest fixtures for dagstore tests."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from dagstore.domain.store import DagStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep user config and DAGSTORE_* variables out of every test."""
    for name in [n for n in os.environ if n.startswith("DAGSTORE_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def chain_store() -> DagStore[int, str]:
    """1:"a" -> 2:"b" -> 3:"c"."""
    store: DagStore[int, str] = DagStore()
    for key, value in [(1, "a"), (2, "b"), (3, "c")]:
        store.insert_node(key, value)
    assert store.insert_edge(1, 2)
    assert store.insert_edge(2, 3)
    return store


@pytest.fixture
def diamond_store() -> DagStore[str, dict[str, Any]]:
    """fetch -> {lint, test} -> build, plus an isolated docs node."""
    store: DagStore[str, dict[str, Any]] = DagStore()
    for key in ("build", "docs", "fetch", "lint", "test"):
        store.insert_node(key, {"name": key})
    edges = [("fetch", "lint"), ("fetch", "test"), ("lint", "build"), ("test", "build")]
    for source, dest in edges:
        assert store.insert_edge(source, dest)
    return store


@pytest.fixture
def write_doc() -> Callable[[Path, list[list[Any]], list[list[Any]]], Path]:
    """Return a helper that writes a JSON graph document by hand.

    Bypasses the store so tests can produce cyclic or dangling documents.
    """

    def _write(path: Path, nodes: list[list[Any]], edges: list[list[Any]]) -> Path:
        path.write_text(json.dumps({"nodes": nodes, "edges": edges}), encoding="utf-8")
        return path

    return _write
