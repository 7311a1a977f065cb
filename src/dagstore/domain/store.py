"""DagStore — an in-memory directed acyclic graph of keyed values.

Nodes and successor sets live in a NetworkX DiGraph; every query sorts on
the way out so iteration is always in ascending key order, whatever order
the mutations arrived in. Acyclicity is enforced on each ``insert_edge``
before anything is committed.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

import networkx as nx

from dagstore.domain.errors import DecodeInvariantViolation, EdgeResult, ErrorKind

_VALUE = "value"

K = TypeVar("K")
V = TypeVar("V")


class DagStore(Generic[K, V]):
    """Ordered DAG container mapping keys to values with acyclic edges.

    Keys must be hashable and mutually orderable. Values are arbitrary.

    Usage::

        store: DagStore[int, str] = DagStore()
        store.insert_node(1, "a")
        store.insert_node(2, "b")
        store.insert_edge(1, 2)          # EdgeResult(ok=True)
        store.insert_edge(2, 1).error    # DagFailure(kind=CYCLE_DETECTED, ...)
        store.topological_order()        # [1, 2]
    """

    def __init__(self) -> None:
        self._graph: nx.DiGraph[K] = nx.DiGraph()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_parts(
        cls,
        nodes: Iterable[tuple[K, V]],
        edges: Iterable[tuple[K, Iterable[K]]] = (),
    ) -> DagStore[K, V]:
        """Build a store from node pairs and adjacency lists.

        Raises:
            DecodeInvariantViolation: On duplicate or unorderable keys, an
                adjacency entry naming an unknown key, or a cycle.
        """
        store: DagStore[K, V] = cls()
        g = store._graph
        for key, value in nodes:
            if key in g:
                msg = f"Duplicate node key {key!r}"
                raise DecodeInvariantViolation(msg, key=key)
            g.add_node(key, **{_VALUE: value})

        try:
            sorted(g)
        except TypeError as exc:
            msg = f"Node keys are not mutually orderable: {exc}"
            raise DecodeInvariantViolation(msg) from exc

        for source, destinations in edges:
            if source not in g:
                msg = f"Adjacency entry for unknown node {source!r}"
                raise DecodeInvariantViolation(msg, source=source)
            for destination in destinations:
                if destination not in g:
                    msg = f"Edge {source!r} -> {destination!r} names an unknown node"
                    raise DecodeInvariantViolation(msg, source=source, destination=destination)
                g.add_edge(source, destination)

        if not nx.is_directed_acyclic_graph(g):
            cycle = [u for u, _ in nx.find_cycle(g)]
            msg = f"Cycle in adjacency data: {' -> '.join(map(repr, [*cycle, cycle[0]]))}"
            raise DecodeInvariantViolation(msg, cycle=cycle)
        return store

    def copy(self) -> DagStore[K, V]:
        """Return an independent copy (values are shared, structure is not)."""
        other: DagStore[K, V] = type(self)()
        other._graph = self._graph.copy()
        return other

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def insert_node(self, key: K, value: V) -> V | None:
        """Insert or replace a node, returning the previous value if any.

        Replacing a value leaves the node's edges untouched.
        """
        previous = self.get_node(key)
        if key in self._graph:
            self._graph.nodes[key][_VALUE] = value
        else:
            self._graph.add_node(key, **{_VALUE: value})
        return previous

    def remove_node(self, key: K) -> V | None:
        """Remove a node and every edge touching it; ``None`` if absent."""
        if key not in self._graph:
            return None
        value: V = self._graph.nodes[key][_VALUE]
        self._graph.remove_node(key)
        return value

    def contains_node(self, key: K) -> bool:
        return key in self._graph

    def get_node(self, key: K) -> V | None:
        if key not in self._graph:
            return None
        value: V = self._graph.nodes[key][_VALUE]
        return value

    def nodes(self) -> list[tuple[K, V]]:
        """All ``(key, value)`` pairs in ascending key order."""
        return [(key, self._graph.nodes[key][_VALUE]) for key in sorted(self._graph)]

    def keys(self) -> list[K]:
        return sorted(self._graph)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def insert_edge(self, source: K, destination: K) -> EdgeResult:
        """Add ``source -> destination`` unless it would break the DAG.

        Inserting an edge that already exists is a successful no-op.
        On failure the store is unchanged.
        """
        missing = [key for key in (source, destination) if key not in self._graph]
        if missing:
            return EdgeResult.failure(
                ErrorKind.NODE_NOT_FOUND,
                f"Node {missing[0]!r} not found",
                source=source,
                destination=destination,
                missing=missing,
            )
        if source == destination or self._reaches(destination, source):
            return EdgeResult.failure(
                ErrorKind.CYCLE_DETECTED,
                f"Edge {source!r} -> {destination!r} would create a cycle",
                source=source,
                destination=destination,
            )
        self._graph.add_edge(source, destination)
        return EdgeResult.success()

    def remove_edge(self, source: K, destination: K) -> bool:
        """Remove an edge, returning whether it was present."""
        if not self.has_edge(source, destination):
            return False
        self._graph.remove_edge(source, destination)
        return True

    def has_edge(self, source: K, destination: K) -> bool:
        if source not in self._graph or destination not in self._graph:
            return False
        return self._graph.has_edge(source, destination)

    def successors(self, key: K) -> list[K]:
        """Direct successors in ascending order; empty if *key* is absent."""
        if key not in self._graph:
            return []
        return sorted(self._graph.successors(key))

    def predecessors(self, key: K) -> list[K]:
        """Direct predecessors in ascending order; empty if *key* is absent."""
        if key not in self._graph:
            return []
        return sorted(self._graph.predecessors(key))

    def edges(self) -> list[tuple[K, K]]:
        """All edges, ascending by source then destination."""
        return [(source, dest) for source, dests in self.adjacency() for dest in dests]

    def adjacency(self) -> list[tuple[K, list[K]]]:
        """``(source, successors)`` for every node with outgoing edges."""
        g = self._graph
        return [(key, sorted(g.successors(key))) for key in sorted(g) if g.out_degree(key)]

    # ------------------------------------------------------------------
    # Derived queries
    # ------------------------------------------------------------------

    def descendants(self, key: K) -> list[K]:
        """Keys reachable from *key* by one or more edges, ascending."""
        if key not in self._graph:
            return []
        return sorted(nx.descendants(self._graph, key))

    def topological_order(self) -> list[K]:
        """Every key before its successors; ties broken by ascending key."""
        return list(nx.lexicographical_topological_sort(self._graph))

    def prune(self, key: K) -> list[K]:
        """Remove *key* and all of its descendants, returning them ascending."""
        if key not in self._graph:
            return []
        doomed = sorted({key, *nx.descendants(self._graph, key)})
        self._graph.remove_nodes_from(doomed)
        return doomed

    def _reaches(self, start: K, target: K) -> bool:
        """Depth-first search along successor edges from *start* for *target*."""
        stack = [start]
        seen = {start}
        while stack:
            node = stack.pop()
            if node == target:
                return True
            for succ in self._graph.successors(node):
                if succ not in seen:
                    seen.add(succ)
                    stack.append(succ)
        return False

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def is_empty(self) -> bool:
        return self._graph.number_of_nodes() == 0

    def __contains__(self, key: object) -> bool:
        return key in self._graph

    def __iter__(self) -> Iterator[K]:
        return iter(sorted(self._graph))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DagStore):
            return NotImplemented
        return self.nodes() == other.nodes() and self.edges() == other.edges()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()})"
        )
