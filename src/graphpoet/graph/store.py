"""Weighted graph protocol and edge-list implementation.

The Graph protocol defines the mutable, directed, weighted graph ADT that
the poet is written against. Two representations satisfy it and must be
observably identical under every sequence of operations:

- EdgeListGraph (this module) keeps a set of labels and a flat list of
  immutable Edge values. Every edge query scans the list.
- AdjacencyGraph (``adjacency_store``) keeps one record per vertex, each
  owning its outgoing-edge map.

Every query returns a snapshot, so later mutation never changes a result a
caller already holds. Neither representation is thread-safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from graphpoet.graph.errors import InvalidLabelError, NegativeWeightError
from graphpoet.observability.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class Graph(Protocol):
    """Mutable directed graph with positive integer edge weights.

    Vertices are string labels. At most one edge exists per ordered
    (source, target) pair and a weight of zero means "no edge".
    """

    def add(self, vertex: str | None) -> bool:
        """Add a vertex. Return False if it exists or the label is missing."""
        ...

    def set(self, source: str, target: str, weight: int) -> int:
        """Set, overwrite or (with weight 0) delete an edge.

        A positive weight creates missing endpoints. Deleting an edge that
        does not exist changes nothing. Returns the previous weight, or 0
        if there was no edge.

        Raises:
            NegativeWeightError: If weight is negative.
            InvalidLabelError: If either label is None or empty.
        """
        ...

    def remove(self, vertex: str) -> bool:
        """Remove a vertex and every incident edge. False if absent."""
        ...

    def vertices(self) -> frozenset[str]:
        """Return a snapshot of the vertex labels."""
        ...

    def sources(self, target: str) -> dict[str, int]:
        """Return ``{source: weight}`` for every edge into *target*."""
        ...

    def targets(self, source: str) -> dict[str, int]:
        """Return ``{target: weight}`` for every edge out of *source*."""
        ...


def validate_edge_args(source: str | None, target: str | None, weight: int) -> None:
    """Reject arguments that would violate the representation invariants."""
    if weight < 0:
        raise NegativeWeightError(source=str(source), target=str(target), weight=weight)
    if not source:
        raise InvalidLabelError(source, context="edge source")
    if not target:
        raise InvalidLabelError(target, context="edge target")


@dataclass(frozen=True)
class Edge:
    """Immutable directed edge from *source* to *target* with a weight."""

    source: str
    target: str
    weight: int

    def __post_init__(self) -> None:
        validate_edge_args(self.source, self.target, self.weight)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgeListGraph:
    """Graph stored as a vertex set plus a flat list of edges.

    Vertex membership is O(1); every edge query is O(E).

    Representation invariant:
        - no stored edge has weight <= 0
        - both endpoints of every edge are in the vertex set
        - at most one edge per (source, target) pair

    Mutators assert the invariant for the edge they touch. ``_check_rep``
    scans the whole graph.
    """

    def __init__(self) -> None:
        self._vertices: set[str] = set()
        self._edges: list[Edge] = []

    def _check_rep(self) -> None:
        seen: set[tuple[str, str]] = set()
        for edge in self._edges:
            self._check_edge(edge)
            key = (edge.source, edge.target)
            assert key not in seen, f"duplicate edge {key!r}"
            seen.add(key)

    def _check_edge(self, edge: Edge) -> None:
        assert edge.weight > 0, f"stored edge with weight {edge.weight}"
        assert edge.source in self._vertices, f"dangling source {edge.source!r}"
        assert edge.target in self._vertices, f"dangling target {edge.target!r}"

    def add(self, vertex: str | None) -> bool:
        if not vertex or vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        validate_edge_args(source, target, weight)

        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                if weight == 0:
                    self._edges.pop(i)
                else:
                    self._edges[i] = Edge(source, target, weight)
                    self._check_edge(self._edges[i])
                log.debug("edge_set", source=source, target=target, weight=weight, previous=edge.weight)
                return edge.weight

        # Deleting a missing edge leaves the graph untouched, vertices included.
        if weight == 0:
            return 0

        self.add(source)
        self.add(target)
        new_edge = Edge(source, target, weight)
        self._edges.append(new_edge)
        self._check_edge(new_edge)
        log.debug("edge_set", source=source, target=target, weight=weight, previous=0)
        return 0

    def remove(self, vertex: str) -> bool:
        if vertex not in self._vertices:
            return False
        self._edges = [e for e in self._edges if vertex not in (e.source, e.target)]
        self._vertices.remove(vertex)
        log.debug("vertex_removed", vertex=vertex)
        return True

    def vertices(self) -> frozenset[str]:
        return frozenset(self._vertices)

    def sources(self, target: str) -> dict[str, int]:
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: str) -> dict[str, int]:
        return {e.target: e.weight for e in self._edges if e.source == source}

    def edge_count(self) -> int:
        """Return the number of stored edges."""
        return len(self._edges)

    def __repr__(self) -> str:
        return f"EdgeListGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    def __str__(self) -> str:
        lines = [f"Vertices: {sorted(self._vertices)}", "Edges:"]
        lines.extend(str(edge) for edge in self._edges)
        return "\n".join(lines)
