"""Observability module for graphpoet.

Provides structured logging.
"""

from graphpoet.observability.logging import (
    close_file_logging,
    configure_logging,
    get_logger,
)

__all__ = [
    "close_file_logging",
    "configure_logging",
    "get_logger",
]
