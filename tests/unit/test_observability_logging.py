"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from graphpoet.graph import EdgeListGraph
from graphpoet.observability import close_file_logging, configure_logging, get_logger
from graphpoet.observability.logging import console_formatter

if TYPE_CHECKING:
    from pathlib import Path


def test_configure_logging_sets_level_warning() -> None:
    """Default verbosity (0) sets WARNING level."""
    configure_logging(verbosity=0)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING


def test_configure_logging_verbose_sets_debug_root() -> None:
    """verbosity=1 opens the root logger; the console handler filters to INFO."""
    configure_logging(verbosity=1)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert root_logger.handlers[0].level == logging.INFO


def test_get_logger_returns_bound_logger() -> None:
    """get_logger returns a structlog logger with expected methods."""
    logger = get_logger(__name__)

    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")


def test_get_logger_auto_configures() -> None:
    """get_logger configures logging if not already done."""
    import graphpoet.observability.logging as log_module

    log_module._configured = False

    logger = get_logger("test")

    assert log_module._configured is True
    assert logger is not None


def test_file_logging_creates_parent_dirs(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "logs" / "run.jsonl"
    configure_logging(verbosity=0, log_file=log_file)
    close_file_logging()

    assert log_file.parent.is_dir()


def test_reconfiguration_closes_handler(tmp_path: Path) -> None:
    """Reconfiguring logging closes the previous file handler."""
    import graphpoet.observability.logging as log_module

    configure_logging(verbosity=0, log_file=tmp_path / "a.jsonl")
    first_handler = log_module._file_handler
    assert first_handler is not None

    configure_logging(verbosity=0, log_file=tmp_path / "b.jsonl")
    second_handler = log_module._file_handler

    assert first_handler.stream is None or first_handler.stream.closed
    assert second_handler is not None
    close_file_logging()
    assert log_module._file_handler is None


def test_file_sink_writes_structlog_context(tmp_path: Path) -> None:
    """The file sink writes structlog context as JSON lines."""
    log_file = tmp_path / "debug.jsonl"
    configure_logging(verbosity=0, log_file=log_file)

    logger = get_logger("test.context")
    logger.info("test_event", key1="value1", key2=42)
    close_file_logging()

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    matching = [e for e in entries if e.get("message") == "test_event"]
    assert matching, "Log entry with structlog context not found in JSONL"
    assert matching[0]["key1"] == "value1"
    assert matching[0]["key2"] == 42
    assert matching[0]["level"] == "INFO"


def test_graph_mutations_logged_at_debug(tmp_path: Path) -> None:
    """Edge updates and vertex removal emit DEBUG events."""
    log_file = tmp_path / "graph.jsonl"
    configure_logging(verbosity=0, log_file=log_file)

    graph = EdgeListGraph()
    graph.set("a", "b", 2)
    graph.remove("a")
    close_file_logging()

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    events = {e["message"]: e for e in entries}
    assert events["edge_set"]["weight"] == 2
    assert events["edge_set"]["previous"] == 0
    assert events["vertex_removed"]["vertex"] == "a"
    assert events["edge_set"]["level"] == "DEBUG"


def test_file_sink_records_logger_name_and_stdlib_records(tmp_path: Path) -> None:
    """Plain stdlib records reach the file with the same JSON shape."""
    log_file = tmp_path / "mixed.jsonl"
    configure_logging(verbosity=0, log_file=log_file)

    get_logger("graphpoet.test").warning("structured_event")
    logging.getLogger("thirdparty").warning("plain %s", "message")
    close_file_logging()

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    by_message = {e["message"]: e for e in entries}
    assert by_message["structured_event"]["logger"] == "graphpoet.test"
    assert by_message["plain message"]["logger"] == "thirdparty"
    assert by_message["plain message"]["level"] == "WARNING"
    assert all("timestamp" in e for e in entries)


def test_console_formatter_renders_event_and_context() -> None:
    """The console line carries the event and its key/values, not Rich's columns."""
    record = logging.LogRecord("graphpoet", logging.INFO, __file__, 1, "poem_generated", None, None)
    line = console_formatter().format(record)

    assert "poem_generated" in line
    assert "timestamp" not in line
    assert "level" not in line
