"""Test CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from graphpoet import __version__
from graphpoet.cli import app
from graphpoet.config import ENV_ENCODING, ENV_REPRESENTATION

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each command away from any graphpoet.yaml and env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_REPRESENTATION, raising=False)
    monkeypatch.delenv(ENV_ENCODING, raising=False)


def test_version_command() -> None:
    """Test graphpoet version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"v{__version__}" in result.stdout


def test_no_args_shows_help() -> None:
    """Test that no arguments shows help."""
    result = runner.invoke(app, [])
    # no_args_is_help=True returns exit code 2 (not 0 like --help)
    assert result.exit_code == 2
    assert "bridge words" in result.output


# --- Poem Command Tests ---


def test_poem_with_sentence_argument(one_line_corpus: Path) -> None:
    result = runner.invoke(
        app, ["poem", str(one_line_corpus), "Seek to explore new and exciting synergies!"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "Seek to explore strange new life and exciting synergies!"


def test_poem_joins_multiple_arguments(one_line_corpus: Path) -> None:
    result = runner.invoke(app, ["poem", str(one_line_corpus), "explore", "new"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "explore strange new"


def test_poem_reads_stdin(one_line_corpus: Path) -> None:
    result = runner.invoke(
        app,
        ["poem", str(one_line_corpus)],
        input="explore new\nhello world\n",
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["explore strange new", "hello world"]


@pytest.mark.parametrize("rep", ["edges", "vertices"])
def test_poem_representation_option(one_line_corpus: Path, rep: str) -> None:
    result = runner.invoke(
        app, ["poem", str(one_line_corpus), "--representation", rep, "TO EXPLORE NEW worlds"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "TO EXPLORE strange NEW worlds"


def test_poem_invalid_representation(one_line_corpus: Path) -> None:
    result = runner.invoke(app, ["poem", str(one_line_corpus), "-r", "matrix", "a b"])
    assert result.exit_code == 2


def test_poem_missing_corpus(tmp_path: Path) -> None:
    result = runner.invoke(app, ["poem", str(tmp_path / "missing.txt"), "a b"])
    assert result.exit_code == 1
    assert "Failed to read corpus" in result.output


def test_poem_uses_config_file(tmp_path: Path) -> None:
    corpus = tmp_path / "latin1.txt"
    corpus.write_bytes("café au lait\n".encode("latin-1"))
    config = tmp_path / "custom.yaml"
    config.write_text("encoding: latin-1\nrepresentation: vertices\n")

    result = runner.invoke(app, ["poem", str(corpus), "--config", str(config), "café lait"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "café au lait"


def test_poem_bad_config(one_line_corpus: Path, tmp_path: Path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("representation: matrix\n")
    result = runner.invoke(app, ["poem", str(one_line_corpus), "-c", str(config), "a b"])
    assert result.exit_code == 1
    assert "Failed to load config" in result.output


def test_log_file_option(one_line_corpus: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"
    result = runner.invoke(
        app, ["--log-file", str(log_file), "poem", str(one_line_corpus), "explore new"]
    )
    assert result.exit_code == 0
    assert log_file.exists()
    assert "poem_generated" in log_file.read_text()


# --- Inspect Command Tests ---


def test_inspect_shows_tables(one_line_corpus: Path) -> None:
    result = runner.invoke(app, ["inspect", str(one_line_corpus), "--top", "3"])
    assert result.exit_code == 0
    assert "Unique words" in result.stdout
    assert "Strongest transitions" in result.stdout
    assert "explore" in result.stdout


def test_inspect_missing_corpus(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
