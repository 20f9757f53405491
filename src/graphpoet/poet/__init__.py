"""Poet package - corpus indexing and bridge-word poems."""

from graphpoet.poet.bridge import find_bridge
from graphpoet.poet.corpus import CorpusIndexer, CorpusReadError, read_corpus_lines
from graphpoet.poet.poet import GraphPoet
from graphpoet.poet.text import extract_punctuation, normalize_word, strip_punctuation

__all__ = [
    "CorpusIndexer",
    "CorpusReadError",
    "GraphPoet",
    "extract_punctuation",
    "find_bridge",
    "normalize_word",
    "read_corpus_lines",
    "strip_punctuation",
]
