"""Bridge-word selection.

Pure function over a graph; never mutates it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphpoet.graph.store import Graph


def find_bridge(graph: Graph, source: str, target: str) -> str | None:
    """Find the best word to insert between *source* and *target*.

    A candidate B needs an edge ``source -> B`` and an edge ``B -> target``.
    The winner maximizes the sum of the two weights. Ties go to whichever
    candidate is met first, which depends on map iteration order and is
    therefore unspecified. Self-loops are allowed (B may equal either end).

    Args:
        graph: Word-adjacency graph.
        source: Normalized word before the gap.
        target: Normalized word after the gap.

    Returns:
        The bridge label, or None if no candidate exists.
    """
    out_edges = graph.targets(source)
    if not out_edges:
        return None
    in_edges = graph.sources(target)

    best: str | None = None
    best_weight = 0
    for candidate, weight in out_edges.items():
        back = in_edges.get(candidate)
        if back is None:
            continue
        total = weight + back
        if total > best_weight:
            best, best_weight = candidate, total
    return best
