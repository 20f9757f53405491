"""Configuration loading.

Settings come from, in order of precedence:
1. Environment variables (GRAPHPOET_REPRESENTATION, GRAPHPOET_ENCODING)
2. A YAML config file (``graphpoet.yaml`` by default)
3. Built-in defaults
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

from graphpoet.graph.factory import DEFAULT_REPRESENTATION, GraphRepresentation

DEFAULT_CONFIG_FILE = "graphpoet.yaml"
DEFAULT_ENCODING = "utf-8"

ENV_REPRESENTATION = "GRAPHPOET_REPRESENTATION"
ENV_ENCODING = "GRAPHPOET_ENCODING"


class ConfigError(Exception):
    """Raised when configuration cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config at {path}: {reason}")


@dataclass
class GraphPoetConfig:
    """Settings for building a poet.

    Attributes:
        representation: Graph representation used for the corpus graph.
        encoding: Text encoding of corpus files.
        log_file: Optional JSONL log destination.
    """

    representation: GraphRepresentation = DEFAULT_REPRESENTATION
    encoding: str = DEFAULT_ENCODING
    log_file: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GraphPoetConfig:
        """Create config from a dictionary.

        Args:
            data: Mapping with optional ``representation``, ``encoding``
                and ``log_file`` keys.

        Returns:
            GraphPoetConfig instance.

        Raises:
            ValueError: If the representation name is unknown.
        """
        log_file = data.get("log_file")
        return cls(
            representation=GraphRepresentation(data.get("representation", DEFAULT_REPRESENTATION)),
            encoding=str(data.get("encoding", DEFAULT_ENCODING)),
            log_file=Path(log_file) if log_file else None,
        )

    def with_env_overrides(self) -> GraphPoetConfig:
        """Return a copy with environment variables applied."""
        representation = os.getenv(ENV_REPRESENTATION)
        encoding = os.getenv(ENV_ENCODING)
        return GraphPoetConfig(
            representation=GraphRepresentation(representation) if representation else self.representation,
            encoding=encoding or self.encoding,
            log_file=self.log_file,
        )


def load_config(config_path: Path) -> GraphPoetConfig:
    """Load configuration from a YAML file.

    Environment overrides are not applied here; see ``resolve_config``.

    Raises:
        ConfigError: If the file is missing, empty or invalid.
    """
    if not config_path.exists():
        raise ConfigError(config_path, "File not found")

    yaml = YAML(typ="safe")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.load(f)

        if data is None:
            raise ConfigError(config_path, "Empty file")
        if not isinstance(data, dict):
            raise ConfigError(config_path, "Expected a mapping at top level")

        return GraphPoetConfig.from_dict(dict(data))
    except Exception as e:
        if isinstance(e, ConfigError):
            raise
        raise ConfigError(config_path, str(e)) from e


def resolve_config(config_path: Path | None = None) -> GraphPoetConfig:
    """Load the effective configuration.

    Uses *config_path* if given, else ``graphpoet.yaml`` in the current
    directory when it exists, else defaults. Environment variables are
    applied last.

    Raises:
        ConfigError: If an explicit or discovered config file is invalid,
            or an environment override names an unknown representation.
    """
    if config_path is None:
        default_path = Path(DEFAULT_CONFIG_FILE)
        config = load_config(default_path) if default_path.exists() else GraphPoetConfig()
    else:
        config = load_config(config_path)

    try:
        return config.with_env_overrides()
    except ValueError as e:
        raise ConfigError(Path(f"${ENV_REPRESENTATION}"), str(e)) from e
