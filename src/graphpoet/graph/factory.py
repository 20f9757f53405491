"""Graph representation selection."""

from __future__ import annotations

from enum import Enum

from graphpoet.graph.adjacency_store import AdjacencyGraph
from graphpoet.graph.store import EdgeListGraph, Graph


class GraphRepresentation(str, Enum):
    """Available graph representations.

    Both are behaviorally indistinguishable; they differ only in how edges
    are stored and therefore in the cost of each query.
    """

    EDGES = "edges"  # vertex set + flat edge list
    VERTICES = "vertices"  # per-vertex outgoing maps


DEFAULT_REPRESENTATION = GraphRepresentation.EDGES

_GRAPH_CLASSES: dict[GraphRepresentation, type[EdgeListGraph] | type[AdjacencyGraph]] = {
    GraphRepresentation.EDGES: EdgeListGraph,
    GraphRepresentation.VERTICES: AdjacencyGraph,
}


def empty_graph(representation: GraphRepresentation | str = DEFAULT_REPRESENTATION) -> Graph:
    """Create a new empty graph.

    Args:
        representation: A GraphRepresentation or its string value.

    Returns:
        Empty graph of the requested representation.

    Raises:
        ValueError: If the representation name is unknown.
    """
    try:
        rep = GraphRepresentation(representation)
    except ValueError:
        valid = ", ".join(r.value for r in GraphRepresentation)
        msg = f"Unknown graph representation {representation!r} (expected one of: {valid})"
        raise ValueError(msg) from None
    return _GRAPH_CLASSES[rep]()
