"""Corpus inspection.

Summarizes what a poet learned from its corpus: vocabulary size, word
frequencies and the strongest word transitions. Pure graph analysis.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphpoet.observability.logging import get_logger

if TYPE_CHECKING:
    from graphpoet.poet.poet import GraphPoet

log = get_logger(__name__)


@dataclass
class Transition:
    """One weighted word-to-word edge."""

    source: str
    target: str
    weight: int


@dataclass
class CorpusReport:
    """Corpus and graph statistics."""

    total_words: int
    unique_words: int
    total_edges: int
    lexical_diversity: float = 0.0
    top_words: list[tuple[str, int]] = field(default_factory=list)
    top_transitions: list[Transition] = field(default_factory=list)


def inspect_corpus(poet: GraphPoet, *, top: int = 10) -> CorpusReport:
    """Build a report for *poet*'s corpus.

    Args:
        poet: An indexed poet.
        top: How many words and transitions to list.

    Returns:
        CorpusReport. Ties in the top lists are ordered alphabetically.
    """
    words = poet.corpus_words
    vertices = poet.graph.vertices()

    transitions = [
        Transition(source, target, weight)
        for source in vertices
        for target, weight in poet.graph.targets(source).items()
    ]
    transitions.sort(key=lambda t: (-t.weight, t.source, t.target))

    counts = Counter(words)
    top_words = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))[:top]

    report = CorpusReport(
        total_words=len(words),
        unique_words=len(vertices),
        total_edges=len(transitions),
        lexical_diversity=(len(vertices) / len(words)) if words else 0.0,
        top_words=top_words,
        top_transitions=transitions[:top],
    )

    log.info(
        "inspection_complete",
        words=report.total_words,
        vertices=report.unique_words,
        edges=report.total_edges,
    )
    return report
