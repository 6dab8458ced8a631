# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""Per-invocation state shared by every command.

The meta app builds one ``CLIContext`` from the global options and the loaded
configuration and stores it in a context variable; commands read it back with
``CLIContext.get_current()``.
"""

import contextvars
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from specgraph.config import Config

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class OutputFormat(StrEnum):
    """Values accepted by ``--format``."""

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and configuration for one CLI invocation.

    Attributes:
        config: Merged configuration.
        verbose: ``--verbose`` was given.
        quiet: ``--quiet`` was given.
        no_color: ``--no-color`` was given.
        project_root: ``--project-root``, if given.
        config_error: Why configuration fell back to defaults, if it did.
        logger: File logger for this invocation; commands never log to the
            terminal.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    no_color: bool = False
    project_root: Path | None = None
    config_error: str | None = None
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Return the active context, or one with default configuration."""
        ctx = _current_cli_context.get()
        return ctx if ctx is not None else cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Forget the active context."""
        _current_cli_context.set(None)


_current_cli_context: "contextvars.ContextVar[CLIContext | None]" = contextvars.ContextVar(
    "cli_context", default=None
)
