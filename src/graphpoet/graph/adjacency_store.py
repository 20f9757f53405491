"""Adjacency-map graph implementation.

AdjacencyGraph keeps a list of vertex records, each owning a map from
target label to weight. Outgoing-edge queries are local to one vertex;
incoming-edge queries scan every vertex since no reverse index is kept.
Behavior is identical to EdgeListGraph.
"""

from __future__ import annotations

from graphpoet.graph.store import validate_edge_args
from graphpoet.observability.logging import get_logger

log = get_logger(__name__)


class _Vertex:
    """Mutable vertex record: a label and its outgoing edges."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._edges: dict[str, int] = {}

    def set_edge(self, target: str, weight: int) -> int:
        """Set the weight to *target* (0 deletes). Return the old weight."""
        if weight == 0:
            return self._edges.pop(target, 0)
        previous = self._edges.get(target, 0)
        self._edges[target] = weight
        return previous

    def remove_edge(self, target: str) -> None:
        self._edges.pop(target, None)

    def edge_weight(self, target: str) -> int | None:
        return self._edges.get(target)

    def targets(self) -> dict[str, int]:
        return dict(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __str__(self) -> str:
        return f"{self.label} -> {self._edges}"


class AdjacencyGraph:
    """Graph stored as a list of vertices that own their outgoing edges.

    Representation invariant:
        - vertex labels are unique and non-empty
        - no stored edge has weight <= 0
        - every edge target is the label of some vertex

    Mutators keep the invariant by construction. ``_check_rep`` scans the
    whole graph.
    """

    def __init__(self) -> None:
        self._vertices: list[_Vertex] = []

    def _check_rep(self) -> None:
        labels = [v.label for v in self._vertices]
        assert all(labels), "empty vertex label"
        assert len(labels) == len(set(labels)), "duplicate vertex labels"
        known = set(labels)
        for v in self._vertices:
            for target, weight in v.targets().items():
                assert weight > 0, f"{v.label!r} -> {target!r} stored with weight {weight}"
                assert target in known, f"dangling target {target!r}"

    def _find(self, label: str) -> _Vertex | None:
        for v in self._vertices:
            if v.label == label:
                return v
        return None

    def _find_or_create(self, label: str) -> _Vertex:
        v = self._find(label)
        if v is None:
            v = _Vertex(label)
            self._vertices.append(v)
        return v

    def add(self, vertex: str | None) -> bool:
        if not vertex or self._find(vertex) is not None:
            return False
        self._vertices.append(_Vertex(vertex))
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        validate_edge_args(source, target, weight)

        if weight == 0:
            # Deleting a missing edge leaves the graph untouched, vertices included.
            source_vertex = self._find(source)
            previous = 0 if source_vertex is None else source_vertex.set_edge(target, 0)
        else:
            source_vertex = self._find_or_create(source)
            self._find_or_create(target)
            previous = source_vertex.set_edge(target, weight)

        if weight or previous:
            log.debug("edge_set", source=source, target=target, weight=weight, previous=previous)
        return previous

    def remove(self, vertex: str) -> bool:
        if self._find(vertex) is None:
            return False
        kept: list[_Vertex] = []
        for v in self._vertices:
            if v.label != vertex:
                v.remove_edge(vertex)
                kept.append(v)
        self._vertices = kept
        log.debug("vertex_removed", vertex=vertex)
        return True

    def vertices(self) -> frozenset[str]:
        return frozenset(v.label for v in self._vertices)

    def sources(self, target: str) -> dict[str, int]:
        result: dict[str, int] = {}
        for v in self._vertices:
            weight = v.edge_weight(target)
            if weight is not None:
                result[v.label] = weight
        return result

    def targets(self, source: str) -> dict[str, int]:
        v = self._find(source)
        if v is None:
            return {}
        return v.targets()

    def edge_count(self) -> int:
        """Return the number of stored edges."""
        return sum(len(v) for v in self._vertices)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(vertices={len(self._vertices)}, edges={self.edge_count()})"

    def __str__(self) -> str:
        return "\n".join(["Graph:", *(str(v) for v in self._vertices)])
