"""structlog loggers for specgraph.

Loggers are built per invocation with ``structlog.wrap_logger`` and write
to a file under ``.specgraph/logs/``. Global structlog configuration is
never touched, so embedding applications keep their own.
"""

import logging
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_specgraph_cli_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

DEBUG_ENV = "SPECGRAPH_DEBUG"
LOG_LEVEL_ENV = "SPECGRAPH_LOG_LEVEL"


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Map ``debug``/``info``/``warning``/``error`` to a logging level.

    Unknown names map to INFO. With ``respect_env``, a set
    ``SPECGRAPH_DEBUG`` wins over ``level``.
    """
    if respect_env and getenv(DEBUG_ENV):
        return logging.DEBUG
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _get_log_level() -> int:
    """Level from ``SPECGRAPH_DEBUG`` or ``SPECGRAPH_LOG_LEVEL``, else INFO."""
    return _log_level_from_string(getenv(LOG_LEVEL_ENV, "info"), respect_env=True)


def _processors(log_format: LogFormatType) -> "list[Processor]":
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _create_logger(
    log_file_path: str,
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Build a logger appending to ``log_file_path``.

    Args:
        log_file_path: Log file; parent directories are created.
        log_level: Minimum level; taken from the environment when None.
        log_format: ``"json"`` for one JSON object per line, ``"text"`` for
            ``timestamp [level] event key=value`` lines.
    """
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    level = _get_log_level() if log_level is None else log_level

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLogger(path.open("a", encoding="utf-8")),
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
    project_root: Path | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Logger for one CLI invocation.

    Args:
        level: Configured ``logging.level``; ``SPECGRAPH_DEBUG`` overrides it.
        log_format: Configured ``logging.format``.
        log_file: Configured ``logging.file``; empty means
            ``.specgraph/logs/cli.log`` under the project root.
        command: Bound to every entry as ``command`` when given.
        project_root: Root used for the default log file.
    """
    logger = _create_logger(
        log_file or str(get_specgraph_cli_log_file(project_root)),
        log_level=_log_level_from_string(level, respect_env=True),
        log_format=log_format,
    )
    return logger.bind(command=command) if command else logger


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Logger that writes nothing, for library callers that pass none."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )
