"""Tests for operation-specific Rich renderers."""

from dagstore.output.renderers import render_quiet, render_result
from dagstore.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = _err("link", "CYCLE_DETECTED", "Edge 3 -> 1 would create a cycle")
        output = render_result(result, no_color=True)
        assert "ERROR" in output
        assert "link" in output
        assert "[CYCLE_DETECTED]" in output
        assert "Edge 3 -> 1 would create a cycle" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("link", "NODE_NOT_FOUND", "Node 9 not found", missing=[9])
        output = render_result(result, verbose=True, no_color=True)
        assert "detail" in output
        assert "missing: [9]" in output

    def test_detail_hidden_by_default(self) -> None:
        result = _err("link", "NODE_NOT_FOUND", "Node 9 not found", missing=[9])
        assert "missing" not in render_result(result, no_color=True)

    def test_no_error_object(self) -> None:
        result = ServiceResult(ok=False, op="check")
        assert "Unknown error" in render_result(result)

    def test_message_is_not_markup(self) -> None:
        result = _err("check", "MALFORMED_PAYLOAD", "bad [bold]payload[/bold]")
        assert "bad [bold]payload[/bold]" in render_result(result, no_color=True)


# ── Query renderers ──────────────────────────────────────────────────


class TestQueryRenderers:
    def test_check(self) -> None:
        result = _ok("check", nodes=3, edges=2, roots=[1], leaves=[3])
        output = render_result(result, no_color=True)
        assert "OK" in output
        assert "nodes: 3" in output
        assert "roots: [1]" in output
        assert "leaves: [3]" in output

    def test_show_table(self) -> None:
        result = _ok(
            "show",
            count=2,
            items=[
                {"key": "fetch", "value": {"name": "fetch"}, "successors": ["lint", "test"]},
                {"key": "lint", "value": None, "successors": []},
            ],
        )
        output = render_result(result, no_color=True, width=100)
        assert "Key" in output
        assert "Successors" in output
        assert "fetch" in output
        assert "lint, test" in output
        assert "2 nodes" in output

    def test_topo_arrows(self) -> None:
        result = _ok("topo", count=3, order=[1, 2, 3])
        output = render_result(result, no_color=True)
        assert "1 → 2 → 3" in output

    def test_neighbours(self) -> None:
        result = _ok("successors", key="fetch", count=2, items=["lint", "test"])
        output = render_result(result, no_color=True)
        assert "key: fetch" in output
        assert 'successors: ["lint","test"]' in output

    def test_verbose_meta(self) -> None:
        result = ServiceResult(
            ok=True, op="topo", data={"order": []}, meta={"path": "graph.json"}
        )
        assert "path: graph.json" in render_result(result, verbose=True, no_color=True)
        assert "meta" not in render_result(result, no_color=True)


# ── Mutation renderers ───────────────────────────────────────────────


class TestMutationRenderer:
    def test_link(self) -> None:
        result = ServiceResult(
            ok=True,
            op="link",
            data={"source": 1, "destination": 3, "successors": [2, 3]},
            meta={"path": "chain.json"},
        )
        output = render_result(result, no_color=True)
        assert "OK" in output
        assert "source: 1" in output
        assert "destination: 3" in output
        assert "path: chain.json" in output

    def test_warnings(self) -> None:
        result = ServiceResult(
            ok=True,
            op="unlink",
            data={"source": 1, "destination": 3, "removed": False},
            warnings=["No edge 1 -> 3"],
        )
        output = render_result(result, no_color=True)
        assert "warning: No edge 1 -> 3" in output
        assert "removed: False" in output

    def test_unknown_op_uses_generic(self) -> None:
        output = render_result(_ok("custom", answer=42), no_color=True)
        assert "custom" in output
        assert "answer: 42" in output


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_order_one_per_line(self) -> None:
        assert render_quiet(_ok("topo", order=["a", "b"])) == "a\nb"

    def test_items_by_key(self) -> None:
        result = _ok("show", items=[{"key": 1}, {"key": 2}])
        assert render_quiet(result) == "1\n2"

    def test_removed(self) -> None:
        assert render_quiet(_ok("remove", key=2, removed=[2])) == "2"

    def test_plain_success(self) -> None:
        assert render_quiet(_ok("link", source=1, destination=2)) == "OK: link"

    def test_error(self) -> None:
        output = render_quiet(_err("link", "CYCLE_DETECTED", "would create a cycle"))
        assert output.startswith("ERROR: link")
        assert "would create a cycle" in output
