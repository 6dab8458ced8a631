"""Enumerations and source records shared by the configuration models."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any


class LogLevel(StrEnum):
    """Accepted ``logging.level`` values, most verbose first."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Accepted ``logging.format`` values."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Where a configuration layer comes from, highest precedence first."""

    CLI = "cli"
    ENV = "env"
    LOCAL = "local"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One configuration layer.

    Attributes:
        name: Which layer this is.
        path: File backing the layer; None for the CLI, environment and
            default layers.
        exists: Whether the file exists, or the layer has values.
        values: The layer's values; empty until loaded.
    """

    name: ConfigSourceName
    path: Path | None
    exists: bool
    values: dict[str, Any]  # pyright: ignore[reportExplicitAny]
