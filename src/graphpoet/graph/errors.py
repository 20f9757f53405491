"""Graph error types.

These errors are raised when a graph operation is called with arguments that
would break the representation invariants (negative weights, missing labels).
Both subclass ``ValueError`` so callers can treat them as ordinary invalid
argument conditions.
"""

from __future__ import annotations

from dataclasses import dataclass


class GraphIntegrityError(Exception):
    """Base class for graph argument and integrity violations."""


@dataclass
class NegativeWeightError(GraphIntegrityError, ValueError):
    """Raised when an edge weight below zero is requested.

    The graph is left unmodified.

    Attributes:
        source: Source label of the rejected edge.
        target: Target label of the rejected edge.
        weight: The offending weight.
    """

    source: str
    target: str
    weight: int

    def __post_init__(self) -> None:
        super().__init__(
            f"Weight must be non-negative, got {self.weight} "
            f"for edge '{self.source}' -> '{self.target}'"
        )


@dataclass
class InvalidLabelError(GraphIntegrityError, ValueError):
    """Raised when an edge references a missing or empty vertex label.

    Attributes:
        label: The rejected label (None or empty string).
        context: Which side of the edge it was passed as.
    """

    label: str | None
    context: str = ""

    def __post_init__(self) -> None:
        msg = f"Invalid vertex label {self.label!r}"
        if self.context:
            msg += f" ({self.context})"
        super().__init__(msg)
