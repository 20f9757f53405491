"""graphpoet CLI - typer application entry point."""

from __future__ import annotations

import atexit
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from graphpoet.config import ConfigError, GraphPoetConfig, resolve_config
from graphpoet.graph.factory import GraphRepresentation
from graphpoet.observability import close_file_logging, configure_logging, get_logger
from graphpoet.poet.corpus import CorpusReadError
from graphpoet.poet.poet import GraphPoet

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="graphpoet",
    help="graphpoet: insert bridge words into sentences using corpus word adjacency.",
    no_args_is_help=True,
)
console = Console()
log = get_logger(__name__)

# Global state for logging flags (set by callback, used by commands)
_verbose: int = 0
_log_file: Path | None = None

CorpusArg = Annotated[
    Path,
    typer.Argument(help="Corpus text file used to learn word adjacency."),
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML config file (default: ./graphpoet.yaml if present).",
    ),
]
RepresentationOpt = Annotated[
    GraphRepresentation | None,
    typer.Option(
        "--representation",
        "-r",
        help="Graph representation (overrides config and environment).",
        case_sensitive=False,
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity: -v for INFO, -vv for DEBUG.",
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Append all log events to this JSONL file.",
            envvar="GRAPHPOET_LOG_FILE",
        ),
    ] = None,
) -> None:
    """graphpoet: insert bridge words into sentences using corpus word adjacency."""
    global _verbose, _log_file
    _verbose = verbose
    _log_file = log_file

    configure_logging(verbosity=verbose, log_file=log_file)
    if log_file is not None:
        atexit.register(close_file_logging)


def _load_config(config: Path | None) -> GraphPoetConfig:
    """Resolve config, exiting with a message on failure."""
    try:
        settings = resolve_config(config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    # A log file named only in the config file is picked up here.
    if _log_file is None and settings.log_file is not None:
        configure_logging(verbosity=_verbose, log_file=settings.log_file)
        atexit.register(close_file_logging)
    return settings


def _build_poet(
    corpus: Path,
    config: Path | None,
    representation: GraphRepresentation | None,
) -> GraphPoet:
    """Index *corpus* into a poet, exiting with a message on failure."""
    settings = _load_config(config)
    rep = representation or settings.representation
    try:
        poet = GraphPoet.from_file(corpus, representation=rep, encoding=settings.encoding)
    except CorpusReadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    log.info("poet_ready", corpus=str(corpus), representation=rep.value, words=len(poet.corpus_words))
    return poet


@app.command()
def poem(
    corpus: CorpusArg,
    sentence: Annotated[
        list[str] | None,
        typer.Argument(help="Sentence(s) to rewrite. Reads lines from stdin if omitted."),
    ] = None,
    config: ConfigOpt = None,
    representation: RepresentationOpt = None,
) -> None:
    """Rewrite sentences by inserting bridge words learned from CORPUS."""
    poet = _build_poet(corpus, config, representation)

    if sentence:
        inputs = [" ".join(sentence)]
    else:
        inputs = [line.rstrip("\r\n") for line in sys.stdin]

    for text in inputs:
        console.print(poet.poem(text), markup=False, highlight=False, emoji=False, soft_wrap=True)


@app.command()
def inspect(
    corpus: CorpusArg,
    top: Annotated[int, typer.Option("--top", "-n", min=1, help="Rows to list per table.")] = 10,
    config: ConfigOpt = None,
    representation: RepresentationOpt = None,
) -> None:
    """Show statistics about what was learned from CORPUS."""
    from graphpoet.inspection import inspect_corpus

    poet = _build_poet(corpus, config, representation)
    report = inspect_corpus(poet, top=top)

    summary = Table(title=f"Corpus: {escape(corpus.name)}")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", justify="right")
    summary.add_row("Words", str(report.total_words))
    summary.add_row("Unique words", str(report.unique_words))
    summary.add_row("Transitions", str(report.total_edges))
    summary.add_row("Lexical diversity", f"{report.lexical_diversity:.3f}")

    transitions = Table(title="Strongest transitions")
    transitions.add_column("From", style="cyan")
    transitions.add_column("To", style="cyan")
    transitions.add_column("Weight", justify="right", style="bold")
    for t in report.top_transitions:
        transitions.add_row(escape(t.source), escape(t.target), str(t.weight))

    words = Table(title="Most frequent words")
    words.add_column("Word", style="cyan")
    words.add_column("Count", justify="right")
    for word, count in report.top_words:
        words.add_row(escape(word), str(count))

    console.print()
    console.print(summary)
    if report.top_transitions:
        console.print(transitions)
    if report.top_words:
        console.print(words)
    console.print()


@app.command()
def version() -> None:
    """Show version information."""
    from graphpoet import __version__

    console.print(f"graphpoet v{__version__}")


if __name__ == "__main__":
    app()
