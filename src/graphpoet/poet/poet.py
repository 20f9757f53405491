"""Graph poet: rewrite a sentence by inserting bridge words.

The poet learns word adjacency from a corpus and, for each pair of
consecutive input words, inserts the word that most strongly links them in
the corpus.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphpoet.graph.factory import DEFAULT_REPRESENTATION, GraphRepresentation, empty_graph
from graphpoet.observability.logging import get_logger
from graphpoet.poet.bridge import find_bridge
from graphpoet.poet.corpus import CorpusIndexer, read_corpus_lines
from graphpoet.poet.text import extract_punctuation, split_words, strip_punctuation

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from graphpoet.graph.store import Graph

log = get_logger(__name__)


class GraphPoet:
    """Bridge-word poet over a word-adjacency graph.

    Attributes:
        graph: The indexed word-adjacency graph. Treat as read-only.
    """

    def __init__(
        self,
        lines: Iterable[str],
        *,
        representation: GraphRepresentation | str = DEFAULT_REPRESENTATION,
        graph: Graph | None = None,
    ) -> None:
        """Index *lines* into a fresh graph.

        Args:
            lines: Corpus text, one line per item.
            representation: Graph representation to create. Ignored if
                *graph* is provided.
            graph: Pre-built (normally empty) graph to index into.
        """
        self.graph: Graph = graph if graph is not None else empty_graph(representation)
        self._corpus_words = CorpusIndexer(self.graph).index(lines)
        self._check_rep()

    @classmethod
    def from_file(
        cls,
        path: Path,
        *,
        representation: GraphRepresentation | str = DEFAULT_REPRESENTATION,
        encoding: str = "utf-8",
    ) -> GraphPoet:
        """Build a poet from a corpus text file.

        Raises:
            CorpusReadError: If the file cannot be read.
        """
        log.debug("corpus_open", path=str(path))
        return cls(read_corpus_lines(path, encoding), representation=representation)

    def _check_rep(self) -> None:
        for word in self._corpus_words:
            assert word, "empty corpus word"
            assert word == word.lower(), f"corpus word {word!r} not lowercase"

    @property
    def corpus_words(self) -> tuple[str, ...]:
        """Normalized corpus words in encounter order."""
        return self._corpus_words

    def poem(self, sentence: str) -> str:
        """Insert bridge words into *sentence*.

        Whitespace-only input is returned as is. Otherwise words are
        rejoined with single spaces, each word's punctuation is moved after
        its letters, and between each pair of words the strongest bridge
        (if any) is inserted in lowercase.
        """
        if not sentence.strip():
            return sentence

        tokens = split_words(sentence)
        bodies = [strip_punctuation(t) for t in tokens]
        out: list[str] = []
        bridges = 0

        for i, token in enumerate(tokens):
            out.append(bodies[i] + extract_punctuation(token))
            if i + 1 < len(tokens):
                bridge = find_bridge(self.graph, bodies[i].lower(), bodies[i + 1].lower())
                if bridge is not None:
                    out.append(bridge)
                    bridges += 1

        log.info("poem_generated", words=len(tokens), bridges=bridges)
        return " ".join(out)

    def __str__(self) -> str:
        return f"GraphPoet with {len(self._corpus_words)} words in corpus"

    def __repr__(self) -> str:
        return f"GraphPoet(words={len(self._corpus_words)}, graph={self.graph!r})"
