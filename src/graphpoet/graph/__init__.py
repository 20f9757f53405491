"""Graph package - weighted directed graph ADT.

Two interchangeable representations implement the Graph protocol:
EdgeListGraph (flat edge list) and AdjacencyGraph (per-vertex edge maps).
Use ``empty_graph`` to create one by name.
"""

from graphpoet.graph.adjacency_store import AdjacencyGraph
from graphpoet.graph.errors import GraphIntegrityError, InvalidLabelError, NegativeWeightError
from graphpoet.graph.factory import DEFAULT_REPRESENTATION, GraphRepresentation, empty_graph
from graphpoet.graph.store import Edge, EdgeListGraph, Graph

__all__ = [
    "DEFAULT_REPRESENTATION",
    "AdjacencyGraph",
    "Edge",
    "EdgeListGraph",
    "Graph",
    "GraphIntegrityError",
    "GraphRepresentation",
    "InvalidLabelError",
    "NegativeWeightError",
    "empty_graph",
]
