"""Structured logging configuration for graphpoet.

Events are built by structlog and handed to stdlib logging, where each sink
renders them with its own ``ProcessorFormatter``:

- Console: Rich handler on stderr, level chosen by the -v count
- File: every event as one JSON object per line, enabled by --log-file
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 - Used at runtime for path operations
from typing import TYPE_CHECKING

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from structlog.typing import EventDict, Processor, WrappedLogger

# Module-level state
_configured = False
_file_handler: logging.FileHandler | None = None

VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _uppercase_level(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    if "level" in event_dict:
        event_dict["level"] = event_dict["level"].upper()
    return event_dict


def _drop_rich_fields(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    # Rich already prints time, level and origin in its own columns.
    for key in ("timestamp", "level", "logger"):
        event_dict.pop(key, None)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def json_lines_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter for the file sink: ``{"timestamp", "level", "logger", "message", ...}``."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _uppercase_level,
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
    )


def console_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter for the Rich console sink: ``event key=value ...``."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _drop_rich_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )


def configure_logging(verbosity: int = 0, log_file: Path | None = None) -> None:
    """Configure logging for graphpoet.

    Safe to call more than once; a previous log file is closed first.

    Args:
        verbosity: 0=WARNING (default), 1=INFO, 2+=DEBUG
        log_file: If given, also append every event to this JSONL file.
    """
    global _configured, _file_handler

    close_file_logging()

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbosity >= 2,
        show_time=verbosity >= 1,
        show_path=verbosity >= 2,
        markup=False,
        level=VERBOSITY_LEVELS.get(verbosity, logging.DEBUG),
    )
    console_handler.setFormatter(console_formatter())
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        _file_handler.setLevel(logging.DEBUG)
        _file_handler.setFormatter(json_lines_formatter())
        handlers.append(_file_handler)

    # The file sink wants DEBUG even when the console is quiet, so the
    # bound-logger filter follows the root level rather than the console.
    root_level = logging.DEBUG if (verbosity > 0 or log_file is not None) else logging.WARNING
    logging.basicConfig(level=root_level, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        cache_logger_on_first_use=False,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance, configuring defaults on first use."""
    if not _configured:
        configure_logging()

    logger: structlog.typing.FilteringBoundLogger = structlog.get_logger(name)
    return logger


def close_file_logging() -> None:
    """Close the JSONL file handler, if one is open."""
    global _file_handler
    if _file_handler:
        _file_handler.close()
        _file_handler = None
