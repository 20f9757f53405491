"""Corpus indexing: turn a stream of text lines into a word-adjacency graph.

Each accepted word becomes a vertex, and every pair of consecutive words
(across line boundaries) adds 1 to the weight of the edge between them.
Tokens that normalize to nothing (pure punctuation) are dropped entirely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphpoet.observability.logging import get_logger
from graphpoet.poet.text import normalize_word, split_words

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from graphpoet.graph.store import Graph

log = get_logger(__name__)


class CorpusReadError(Exception):
    """Raised when a corpus file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read corpus at {path}: {reason}")


def read_corpus_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a corpus file without trailing newlines.

    Args:
        path: Corpus text file.
        encoding: Text encoding of the file.

    Raises:
        CorpusReadError: If the file is missing, unreadable or not decodable.
    """
    try:
        with path.open("r", encoding=encoding) as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise CorpusReadError(path, str(e)) from e


class CorpusIndexer:
    """Feeds normalized word pairs from text lines into a graph.

    The edge increment is a read-modify-write (read the current weight,
    then set weight + 1). It is not safe if the graph is mutated
    concurrently by anything else.

    Attributes:
        graph: The graph being populated.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._words: list[str] = []
        self._previous: str | None = None

    @property
    def words(self) -> tuple[str, ...]:
        """Every accepted word so far, in encounter order."""
        return tuple(self._words)

    def feed(self, line: str) -> int:
        """Index one line. Returns the number of words accepted from it."""
        accepted = 0
        for token in split_words(line):
            word = normalize_word(token)
            if not word:
                continue
            self._words.append(word)
            self.graph.add(word)
            if self._previous is not None:
                current = self.graph.targets(self._previous).get(word, 0)
                self.graph.set(self._previous, word, current + 1)
            self._previous = word
            accepted += 1
        return accepted

    def index(self, lines: Iterable[str]) -> tuple[str, ...]:
        """Index every line and return the full word sequence."""
        line_count = 0
        for line in lines:
            self.feed(line)
            line_count += 1

        log.info(
            "corpus_indexed",
            lines=line_count,
            words=len(self._words),
            vertices=len(self.graph.vertices()),
        )
        return self.words
