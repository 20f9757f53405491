"""graphpoet: bridge-word poems from a word-adjacency graph."""

__version__ = "0.1.0"
