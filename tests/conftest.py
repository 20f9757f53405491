"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from graphpoet.graph import Graph, GraphRepresentation, empty_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def corpora_path() -> Path:
    """Return the directory holding corpus text fixtures."""
    return Path(__file__).parent / "fixtures" / "corpora"


@pytest.fixture
def one_line_corpus(corpora_path: Path) -> Path:
    """Corpus with the single line 'Seek to explore strange new life and new civilizations'."""
    return corpora_path / "one_line.txt"


@pytest.fixture(params=list(GraphRepresentation), ids=lambda r: r.value)
def representation(request: pytest.FixtureRequest) -> GraphRepresentation:
    """Every graph representation, one test run each."""
    return request.param


@pytest.fixture
def graph(representation: GraphRepresentation) -> Graph:
    """Empty graph of each representation."""
    return empty_graph(representation)
